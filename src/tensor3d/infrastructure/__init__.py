"""
Infrastructure layer: NumPy-backed Tensor, CPU kernels, runtime config.
"""
