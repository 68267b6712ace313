"""Byte-stream adapters."""

import io

from bfkit.streams import ByteReader, ByteWriter, as_reader, as_writer, decode_output, string_input


class _CountingBuffer(io.BytesIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_reader_returns_bytes_then_sentinel_forever():
    reader = ByteReader(io.BytesIO(b"ab"))
    assert reader.read_byte() == ord("a")
    assert reader.read_byte() == ord("b")
    assert [reader.read_byte() for _ in range(5)] == [255] * 5
    assert reader.exhausted


def test_reader_passes_nul_bytes_through():
    reader = ByteReader(io.BytesIO(b"\x00"))
    assert reader.read_byte() == 0
    assert reader.read_byte() == 255


def test_writer_preserves_order():
    buf = io.BytesIO()
    writer = ByteWriter(buf)
    for b in (72, 105, 0, 255):
        writer.write_byte(b)
    assert buf.getvalue() == b"Hi\x00\xff"


def test_autoflush_flushes_every_byte():
    buf = _CountingBuffer()
    writer = ByteWriter(buf, autoflush=True)
    writer.write_byte(1)
    writer.write_byte(2)
    assert buf.flushes == 2


def test_adapters_accept_none_and_existing_adapters():
    reader = as_reader(None)
    assert reader.read_byte() == 255
    assert as_reader(reader) is reader
    writer = as_writer(None)
    assert as_writer(writer) is writer


def test_string_helpers_round_trip_any_text_and_bytes():
    assert string_input("café €", "utf-8").getvalue() == "café €".encode("utf-8")
    raw = io.BytesIO(b"ok\xff\xfe")
    text = decode_output(raw, "utf-8")
    assert string_input(text, "utf-8").getvalue() == b"ok\xff\xfe"
