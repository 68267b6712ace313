from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from .config import PROGRAM_ENCODING, IOOptions, TranslateOptions
from .interpreter import Interpreter
from .streams import as_reader, as_writer, decode_output, string_input
from .tape import Tape
from .translator import CompiledProgram, emit_python, translate


def load_program(path: str | Path, *, encoding: str = PROGRAM_ENCODING) -> str:
    p = Path(path)
    return p.read_text(encoding=encoding)


def interpret(code: str, input: Optional[BinaryIO] = None, output: Optional[BinaryIO] = None,
              *, options: Optional[IOOptions] = None) -> Tape:
    """Interpret ``code``, reading from ``input`` and writing to ``output``.

    Returns the final tape.
    """
    autoflush = False if options is None else options.autoflush
    interpreter = Interpreter(code, as_reader(input), as_writer(output, autoflush=autoflush))
    return interpreter.run()


def interpret_string(code: str, data: str = "", *, options: Optional[IOOptions] = None) -> str:
    """Interpret ``code`` on the string ``data`` and return what it printed."""
    encoding = (options or IOOptions()).encoding
    out = io.BytesIO()
    interpret(code, string_input(data, encoding), out)
    return decode_output(out, encoding)


def interpret_stdio(code: str) -> Tape:
    """Interpret ``code`` against the process's standard input and output."""
    return interpret(code, sys.stdin.buffer, sys.stdout.buffer, options=IOOptions(autoflush=True))


def interpret_file(path: str | Path, input: Optional[BinaryIO] = None, output: Optional[BinaryIO] = None,
                   *, encoding: str = PROGRAM_ENCODING) -> Tape:
    return interpret(load_program(path, encoding=encoding), input, output)


def translate_file(path: str | Path, *, options: Optional[TranslateOptions] = None,
                   encoding: str = PROGRAM_ENCODING) -> CompiledProgram:
    return translate(load_program(path, encoding=encoding), options=options)


__all__ = [
    "load_program",
    "interpret",
    "interpret_string",
    "interpret_stdio",
    "interpret_file",
    "translate",
    "translate_file",
    "emit_python",
]
