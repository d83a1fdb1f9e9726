"""
Human-readable tensor dump for debugging.

The output nests depth slices around rows of comma-terminated values, e.g. a
(1, 2, 2) tensor holding 1..4 renders as::

    [[1.000000,2.000000,]
    3.000000,4.000000,]
    ]
    ]

This is a debugging aid only; it is not parseable and has no compatibility
guarantees.
"""

from __future__ import annotations

from ...domain._tensor import ITensor


def format_tensor(tensor: ITensor) -> str:
    shape = tensor.shape
    values = tensor.to_numpy()
    parts = ["["]
    for z in range(shape.depth):
        parts.append("[")
        for y in range(shape.height):
            for x in range(shape.width):
                parts.append(f"{float(values[z, y, x]):f},")
            parts.append("]\n")
        parts.append("]\n")
    parts.append("]")
    return "".join(parts)
