"""Options dataclasses and environment defaults."""

import pytest

from bfkit import BFConfigError, IOOptions, TranslateOptions, interpret_string
from bfkit import config


def test_default_capacity(monkeypatch):
    monkeypatch.delenv("BFKIT_TAPE_CAPACITY", raising=False)
    assert TranslateOptions().tape_capacity == 1_000_000


def test_capacity_read_from_environment_when_options_are_built(monkeypatch):
    monkeypatch.setenv("BFKIT_TAPE_CAPACITY", "64")
    assert TranslateOptions().tape_capacity == 64
    monkeypatch.setenv("BFKIT_TAPE_CAPACITY", "lots")
    with pytest.raises(BFConfigError):
        TranslateOptions()


def test_default_encoding_is_utf8(monkeypatch):
    monkeypatch.delenv("BFKIT_ENCODING", raising=False)
    assert IOOptions().encoding == "utf-8"


def test_bad_encoding_env_is_a_config_error(monkeypatch):
    """The string form validates the environment default too."""
    monkeypatch.setenv("BFKIT_ENCODING", "no-such-codec")
    with pytest.raises(BFConfigError):
        interpret_string("+.")


def test_capacity_must_be_positive():
    with pytest.raises(BFConfigError):
        TranslateOptions(tape_capacity=0)


def test_unknown_encoding_rejected():
    with pytest.raises(BFConfigError):
        IOOptions(encoding="no-such-codec")


def test_options_are_frozen():
    opts = IOOptions()
    with pytest.raises(Exception):
        opts.autoflush = True


def test_env_int(monkeypatch):
    monkeypatch.setenv("BFKIT_TEST_CAPACITY", "30_000")
    assert config._env_int("BFKIT_TEST_CAPACITY", 5) == 30000
    monkeypatch.setenv("BFKIT_TEST_CAPACITY", "")
    assert config._env_int("BFKIT_TEST_CAPACITY", 5) == 5
    monkeypatch.setenv("BFKIT_TEST_CAPACITY", "lots")
    with pytest.raises(BFConfigError):
        config._env_int("BFKIT_TEST_CAPACITY", 5)
