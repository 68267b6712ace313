"""Bundled example programs."""

import pytest

from bfkit import programs


def test_available_lists_bundled_programs():
    assert {"hello", "rot13"} <= set(programs.available())


def test_load_returns_program_text():
    assert programs.load("hello").startswith("++++++++[")


def test_unknown_program():
    with pytest.raises(KeyError):
        programs.load("mandelbrot-xl")
