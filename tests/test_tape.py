"""Growable tape memory."""

import pytest

from bfkit.tape import Tape, allocate_fixed_tape, nonzero_cells


def test_new_tape_has_pointer_at_zero():
    tape = Tape()
    assert tape.pointer == 0
    assert tape.current == 0
    assert not tape.halted


def test_moving_right_extends_with_zero_cells():
    tape = Tape()
    tape.move(3)
    assert tape.pointer == 3
    assert len(tape) == 4
    assert all(tape.read(i) == 0 for i in range(4))


def test_extension_is_monotonic():
    tape = Tape()
    tape.move(5)
    tape.move(-4)
    assert len(tape) == 6


def test_read_beyond_extent_is_zero():
    tape = Tape()
    assert tape.read(100) == 0
    assert len(tape) == 1


def test_write_wraps_value():
    tape = Tape()
    tape.write(2, 257)
    assert tape.read(2) == 1
    assert len(tape) == 3


def test_moving_below_zero_halts_without_access():
    tape = Tape()
    tape.move(-1)
    assert tape.halted
    assert len(tape) == 1
    with pytest.raises(IndexError):
        tape.read(-1)
    with pytest.raises(IndexError):
        tape.write(-1, 0)


def test_nonzero_cells_uses_array_view():
    tape = Tape()
    tape.write(0, 3)
    tape.write(4, 9)
    assert tape.as_array().tolist() == [3, 0, 0, 0, 9]
    assert tape.nonzero_cells() == [(0, 3), (4, 9)]


def test_fixed_tape_is_zeroed():
    tape = allocate_fixed_tape(16)
    assert tape.shape == (16,)
    assert tape.dtype.name == "uint8"
    assert nonzero_cells(tape) == []
