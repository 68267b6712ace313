"""
Direct interpreter.

Loops are evaluated by re-entering ``_run_body`` once per bracket nesting
level; repetition is driven by a ``while`` at that level, so the Python call
stack grows with nesting depth only, never with iteration count.

Untaken loop bodies are walked in skip mode: symbols advance the instruction
pointer without effect, and nested ``[`` still recurse, choosing their own
skip mode from the actual current cell.
"""

from __future__ import annotations

import logging

from .cells import decrement, increment
from .streams import ByteReader, ByteWriter
from .tape import Tape

log = logging.getLogger(__name__)


class Interpreter:
    def __init__(self, code: str, reader: ByteReader, writer: ByteWriter):
        self.code = code
        self.reader = reader
        self.writer = writer
        self.tape = Tape()
        self.code_pos = 0
        self.depth = 0
        self.max_depth = 0

    def run(self) -> Tape:
        # A top-level ']' returns here with a result nobody asked for.
        try:
            self._run_body(skip=False)
        finally:
            self.writer.flush()
        if self.tape.halted:
            log.debug("halted at code position %d: tape pointer below zero", self.code_pos)
        elif self.code_pos < len(self.code):
            log.debug("stopped at unmatched ']' (code position %d)", self.code_pos)
        return self.tape

    def _run_body(self, skip: bool) -> bool:
        code = self.code
        tape = self.tape
        while tape.pointer >= 0 and self.code_pos < len(code):
            symbol = code[self.code_pos]
            if symbol == '[':
                self.code_pos += 1
                body_start = self.code_pos
                self._enter_loop()
                while self._run_body(tape.current == 0):
                    self.code_pos = body_start
                self.depth -= 1
            elif symbol == ']':
                return tape.current != 0
            elif not skip:
                self._apply(symbol)
            self.code_pos += 1
        return False

    def _enter_loop(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            self.max_depth = self.depth

    def _apply(self, symbol: str) -> None:
        tape = self.tape
        if symbol == '+':
            tape.current = increment(tape.current)
        elif symbol == '-':
            tape.current = decrement(tape.current)
        elif symbol == '>':
            tape.move(1)
        elif symbol == '<':
            tape.move(-1)
        elif symbol == '.':
            self.writer.write_byte(tape.current)
        elif symbol == ',':
            tape.current = self.reader.read_byte()
