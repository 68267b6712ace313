"""Wrapping byte-cell arithmetic."""

from bfkit.cells import EOF_SENTINEL, decrement, increment, wrap


def test_increment_decrement_are_inverses():
    """increment/decrement undo each other for every cell value."""
    for v in range(256):
        assert increment(decrement(v)) == v
        assert decrement(increment(v)) == v


def test_wraparound_at_boundaries():
    assert increment(255) == 0
    assert decrement(0) == 255
    assert increment(0) == 1
    assert decrement(255) == 254


def test_wrap_reduces_modulo_256():
    assert wrap(256) == 0
    assert wrap(-1) == 255
    assert wrap(513) == 1


def test_eof_sentinel_is_255():
    assert EOF_SENTINEL == 255
