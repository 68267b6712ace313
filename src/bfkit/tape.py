from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .cells import wrap

log = logging.getLogger(__name__)


class Tape:
    """Unbounded-to-the-right byte tape with a single movable pointer.

    Cells are created lazily as the pointer advances and start at zero. A
    pointer below zero is the halt condition for the engine driving the tape;
    no cell is ever read or written at a negative position.
    """

    def __init__(self) -> None:
        self.cells = bytearray(1)
        self.pointer = 0

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def halted(self) -> bool:
        return self.pointer < 0

    def read(self, pos: int) -> int:
        if pos < 0:
            raise IndexError(f"tape position {pos} is below the start of the tape")
        if pos >= len(self.cells):
            return 0
        return self.cells[pos]

    def write(self, pos: int, value: int) -> None:
        if pos < 0:
            raise IndexError(f"tape position {pos} is below the start of the tape")
        self._extend_to(pos)
        self.cells[pos] = wrap(value)

    def move(self, delta: int) -> int:
        self.pointer += delta
        if self.pointer < 0:
            log.debug("tape pointer moved below the start of the tape")
        else:
            self._extend_to(self.pointer)
        return self.pointer

    @property
    def current(self) -> int:
        return self.read(self.pointer)

    @current.setter
    def current(self, value: int) -> None:
        self.write(self.pointer, value)

    def _extend_to(self, pos: int) -> None:
        missing = pos + 1 - len(self.cells)
        if missing > 0:
            self.cells.extend(bytes(missing))

    def as_array(self) -> np.ndarray:
        return np.frombuffer(bytes(self.cells), dtype=np.uint8)

    def nonzero_cells(self) -> List[Tuple[int, int]]:
        arr = self.as_array()
        return [(int(i), int(arr[i])) for i in np.nonzero(arr)[0]]


def allocate_fixed_tape(capacity: int) -> np.ndarray:
    """Zero-initialised fixed-capacity tape used by translated programs."""
    return np.zeros(capacity, dtype=np.uint8)


def nonzero_cells(tape: np.ndarray) -> List[Tuple[int, int]]:
    return [(int(i), int(tape[i])) for i in np.nonzero(tape)[0]]
