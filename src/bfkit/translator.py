"""
Translator: parse once into the IR, then emit.

Two back-ends share the IR:

* ``translate`` compiles every node into a Python closure and returns a
  ``CompiledProgram``, invocable with an input and an output stream.
* ``emit_python`` renders the program as the source of a standalone module
  whose ``run`` function mirrors the program statement for statement.

Translated programs run on a fixed-capacity numpy tape rather than the
interpreter's growable one. Moving below cell 0 halts silently as in the
interpreter; moving to or past the capacity raises TapeOverflowError.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Callable, List, Optional, Tuple

import numpy as np

from .cells import decrement, increment
from .config import IOOptions, TranslateOptions
from .errors import make_overflow_error, make_translate_error
from .ir import Add, Input, Loop, Move, Node, Output, Program, emit, parse_program
from .streams import ByteReader, ByteWriter, as_reader, as_writer, decode_output, string_input
from .tape import allocate_fixed_tape

log = logging.getLogger(__name__)

# CPython refuses to compile more than 20 statically nested blocks.
MAX_EMIT_DEPTH = 19


class _Halt(Exception):
    """Raised inside compiled code when the pointer moves below cell 0."""


class _Machine:
    __slots__ = ("tape", "pointer", "capacity", "reader", "writer")

    def __init__(self, capacity: int, reader: ByteReader, writer: ByteWriter):
        self.tape = allocate_fixed_tape(capacity)
        self.pointer = 0
        self.capacity = capacity
        self.reader = reader
        self.writer = writer


Op = Callable[[_Machine], None]


# ---------------- Closure back-end ----------------
def _op_increment(m: _Machine) -> None:
    m.tape[m.pointer] = increment(m.tape[m.pointer])


def _op_decrement(m: _Machine) -> None:
    m.tape[m.pointer] = decrement(m.tape[m.pointer])


def _op_right(m: _Machine) -> None:
    m.pointer += 1
    if m.pointer >= m.capacity:
        raise make_overflow_error(position=m.pointer, capacity=m.capacity)


def _op_left(m: _Machine) -> None:
    m.pointer -= 1
    if m.pointer < 0:
        raise _Halt()


def _op_output(m: _Machine) -> None:
    m.writer.write_byte(m.tape[m.pointer])


def _op_input(m: _Machine) -> None:
    m.tape[m.pointer] = m.reader.read_byte()


def _op_loop(body: Tuple[Op, ...]) -> Op:
    def loop(m: _Machine) -> None:
        tape = m.tape
        while tape[m.pointer] != 0:
            for op in body:
                op(m)
    return loop


def _compile_nodes(nodes: Tuple[Node, ...]) -> Tuple[Op, ...]:
    ops: List[Op] = []
    for n in nodes:
        if isinstance(n, Add):
            ops.append(_op_increment if n.delta > 0 else _op_decrement)
        elif isinstance(n, Move):
            ops.append(_op_right if n.delta > 0 else _op_left)
        elif isinstance(n, Output):
            ops.append(_op_output)
        elif isinstance(n, Input):
            ops.append(_op_input)
        elif isinstance(n, Loop):
            ops.append(_op_loop(_compile_nodes(n.body)))
    return tuple(ops)


class CompiledProgram:
    """A translated program. Each call runs it once on a fresh tape."""

    def __init__(self, program: Program, options: TranslateOptions):
        self.program = program
        self.options = options
        self._ops = _compile_nodes(program.nodes)

    @property
    def source(self) -> str:
        """The program reduced to its meaningful symbols."""
        return emit(self.program.nodes)

    def __call__(self, input: Optional[BinaryIO] = None, output: Optional[BinaryIO] = None,
                 *, autoflush: bool = False) -> np.ndarray:
        writer = as_writer(output, autoflush=autoflush)
        m = _Machine(self.options.tape_capacity, as_reader(input), writer)
        try:
            for op in self._ops:
                op(m)
        except _Halt:
            log.debug("translated program halted: tape pointer below zero")
        finally:
            writer.flush()
        return m.tape

    def run_string(self, data: str = "", *, options: Optional[IOOptions] = None) -> str:
        encoding = (options or IOOptions()).encoding
        out = io.BytesIO()
        self(string_input(data, encoding), out)
        return decode_output(out, encoding)


def translate(code: str, *, options: Optional[TranslateOptions] = None) -> CompiledProgram:
    """Translate ``code`` into a callable unit.

    Raises BFParseError for unbalanced brackets before anything is built.
    """
    options = options or TranslateOptions()
    program = parse_program(code)
    compiled = CompiledProgram(program, options)
    log.debug("translated %d symbols (tape capacity %d)", program.size, options.tape_capacity)
    return compiled


# ---------------- Python source back-end ----------------
_MODULE_HEADER = '''\
"""Translated from a tape-language program by bfkit."""

import sys

import numpy as np

from bfkit.errors import make_overflow_error
from bfkit.streams import as_reader, as_writer

TAPE_CAPACITY = {capacity}


def run(input=None, output=None):
    reader = as_reader(input)
    writer = as_writer(output)
    tape = np.zeros(TAPE_CAPACITY, dtype=np.uint8)
    pos = 0
'''

_MODULE_FOOTER = '''\
    writer.flush()
    return tape


if __name__ == "__main__":
    run(sys.stdin.buffer, sys.stdout.buffer)
'''

_STATEMENTS = {
    "+": ["tape[pos] = (int(tape[pos]) + 1) & 0xFF"],
    "-": ["tape[pos] = (int(tape[pos]) - 1) & 0xFF"],
    ">": [
        "pos += 1",
        "if pos >= TAPE_CAPACITY:",
        "    writer.flush()",
        "    raise make_overflow_error(position=pos, capacity=TAPE_CAPACITY)",
    ],
    "<": [
        "pos -= 1",
        "if pos < 0:",
        "    writer.flush()",
        "    return tape",
    ],
    ".": ["writer.write_byte(tape[pos])"],
    ",": ["tape[pos] = reader.read_byte()"],
}


def _emit_block(nodes: Tuple[Node, ...], indent: int, out: List[str]) -> None:
    pad = "    " * indent
    if not nodes:
        out.append(pad + "pass")
        return
    for n in nodes:
        if isinstance(n, Loop):
            out.append(pad + "while tape[pos]:")
            _emit_block(n.body, indent + 1, out)
        else:
            for line in _STATEMENTS[emit((n,))]:
                out.append(pad + line)


def emit_python(code: str, *, options: Optional[TranslateOptions] = None) -> str:
    """Render ``code`` as the source of a standalone Python module."""
    options = options or TranslateOptions()
    program = parse_program(code)
    if program.depth > MAX_EMIT_DEPTH:
        raise make_translate_error(
            message=f"loops nested too deeply for Python source "
                    f"({program.depth} levels, at most {MAX_EMIT_DEPTH})"
        )
    lines: List[str] = []
    _emit_block(program.nodes, 1, lines)
    body = "\n".join(lines)
    return _MODULE_HEADER.format(capacity=options.tape_capacity) + body + "\n" + _MODULE_FOOTER
