"""Byte-stream adapters used by both execution strategies."""

from __future__ import annotations

import io
from typing import BinaryIO, Optional

from .cells import EOF_SENTINEL, wrap


class ByteReader:
    """Reads single bytes from a binary stream.

    Once the stream is exhausted every read returns ``EOF_SENTINEL`` (255).
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.exhausted = False

    def read_byte(self) -> int:
        if self.exhausted:
            return EOF_SENTINEL
        chunk = self._stream.read(1)
        if not chunk:
            self.exhausted = True
            return EOF_SENTINEL
        return chunk[0]


class ByteWriter:
    def __init__(self, stream: BinaryIO, *, autoflush: bool = False):
        self._stream = stream
        self.autoflush = autoflush

    def write_byte(self, value: int) -> None:
        self._stream.write(bytes((wrap(value),)))
        if self.autoflush:
            self._stream.flush()

    def flush(self) -> None:
        self._stream.flush()


def string_input(data: str, encoding: str) -> io.BytesIO:
    return io.BytesIO(data.encode(encoding, "surrogateescape"))


def decode_output(buffer: io.BytesIO, encoding: str) -> str:
    return buffer.getvalue().decode(encoding, "surrogateescape")


def as_reader(source: Optional[BinaryIO]) -> ByteReader:
    if isinstance(source, ByteReader):
        return source
    if source is None:
        source = io.BytesIO()
    return ByteReader(source)


def as_writer(sink: Optional[BinaryIO], *, autoflush: bool = False) -> ByteWriter:
    if isinstance(sink, ByteWriter):
        return sink
    if sink is None:
        sink = io.BytesIO()
    return ByteWriter(sink, autoflush=autoflush)
