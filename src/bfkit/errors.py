from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _locate(source: str, offset: int) -> Tuple[int, int]:
    line = source.count('\n', 0, offset) + 1
    line_start = source.rfind('\n', 0, offset) + 1
    return line, offset - line_start + 1


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(message: str) -> Optional[str]:
    msg = message.lower()
    if "unmatched '['" in msg:
        return 'Every "[" needs a closing "]" later in the program.'
    if "unmatched ']'" in msg:
        return 'This "]" has no opening "[" before it. The interpreter would stop here silently.'
    if 'nested too deeply' in msg:
        return 'Use translate() for in-memory execution, which has no static nesting limit.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFParseError(BFError):
    line: int
    column: int
    context: str


@dataclass
class BFTranslateError(BFError):
    pass


@dataclass
class TapeOverflowError(BFError):
    position: int
    capacity: int


@dataclass
class BFConfigError(BFError):
    pass


def make_parse_error(*, message: str, source: str, offset: int) -> BFParseError:
    line, column = _locate(source, offset)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return BFParseError(
        message=f"ParseError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        line=line,
        column=column,
        context=ctx,
    )


def make_translate_error(*, message: str) -> BFTranslateError:
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return BFTranslateError(message=f"TranslateError: {message}{hint_block}")


def make_overflow_error(*, position: int, capacity: int) -> TapeOverflowError:
    return TapeOverflowError(
        message=f"TapeOverflowError: pointer moved to cell {position}, "
                f"past the fixed tape capacity of {capacity} cells",
        position=position,
        capacity=capacity,
    )
