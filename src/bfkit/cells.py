from __future__ import annotations

CELL_MODULUS = 256
CELL_MASK = CELL_MODULUS - 1

# Value read by ',' once the input stream is exhausted.
EOF_SENTINEL = 255


def increment(value: int) -> int:
    return (int(value) + 1) & CELL_MASK


def decrement(value: int) -> int:
    return (int(value) - 1) & CELL_MASK


def wrap(value: int) -> int:
    """Reduce an arbitrary integer to a cell value (modulo 256)."""
    return int(value) & CELL_MASK
