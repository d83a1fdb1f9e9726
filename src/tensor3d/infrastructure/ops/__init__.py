"""
NumPy CPU kernels for tensor algebra, reductions and storage operations.

The functions here operate on any object satisfying `ITensor` and build their
results through ``type(tensor)._wrap``; they are re-exported as the package's
functional API.
"""
