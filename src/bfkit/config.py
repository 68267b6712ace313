from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, field

from .errors import BFConfigError

_DEFAULT_TAPE_CAPACITY = 1_000_000
_DEFAULT_ENCODING = "utf-8"

# Program text is read byte-for-byte so any file is accepted.
PROGRAM_ENCODING = "latin-1"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.replace("_", ""))
    except ValueError:
        raise BFConfigError(message=f"ConfigError: {name} must be an integer, got {raw!r}") from None


def default_tape_capacity() -> int:
    return _env_int("BFKIT_TAPE_CAPACITY", _DEFAULT_TAPE_CAPACITY)


def default_encoding() -> str:
    return os.environ.get("BFKIT_ENCODING") or _DEFAULT_ENCODING


@dataclass(frozen=True)
class TranslateOptions:
    tape_capacity: int = field(default_factory=default_tape_capacity)

    def __post_init__(self) -> None:
        if self.tape_capacity <= 0:
            raise BFConfigError(
                message=f"ConfigError: tape_capacity must be positive, got {self.tape_capacity}"
            )


@dataclass(frozen=True)
class IOOptions:
    """Text conversion for the string convenience forms.

    Strings are encoded and decoded with ``surrogateescape`` so output bytes
    that are not valid in ``encoding`` still round-trip through ``str``.
    """

    encoding: str = field(default_factory=default_encoding)
    autoflush: bool = False

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise BFConfigError(message=f"ConfigError: unknown encoding {self.encoding!r}") from None
