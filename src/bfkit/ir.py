from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from .errors import make_parse_error

log = logging.getLogger(__name__)

# ---------------- IR Nodes ----------------
@dataclass(frozen=True)
class Add:
    delta: int  # +1 or -1 on current cell

@dataclass(frozen=True)
class Move:
    delta: int  # +1 or -1 pointer step

@dataclass(frozen=True)
class Output:
    pass

@dataclass(frozen=True)
class Input:
    pass

@dataclass(frozen=True)
class Loop:
    body: Tuple["Node", ...]

Node = Union[Add, Move, Output, Input, Loop]
BF_OPS = frozenset("+-<>[],.")

_PRIMITIVES = {
    "+": Add(1),
    "-": Add(-1),
    ">": Move(1),
    "<": Move(-1),
    ".": Output(),
    ",": Input(),
}


@dataclass(frozen=True)
class Program:
    nodes: Tuple[Node, ...]
    depth: int
    size: int  # number of meaningful symbols


# ---------------- Parser: source -> IR ----------------
def parse_program(code: str) -> Program:
    """Parse ``code`` in one pass with a stack of statement blocks.

    Raises BFParseError when the brackets do not balance.
    """
    stack: List[List[Node]] = [[]]
    opened: List[int] = []
    depth = 0
    size = 0

    for pos, ch in enumerate(code):
        if ch not in BF_OPS:
            continue
        size += 1
        if ch == "[":
            stack.append([])
            opened.append(pos)
            depth = max(depth, len(opened))
        elif ch == "]":
            if len(stack) == 1:
                raise make_parse_error(message="Unmatched ']'", source=code, offset=pos)
            body = stack.pop()
            opened.pop()
            stack[-1].append(Loop(tuple(body)))
        else:
            stack[-1].append(_PRIMITIVES[ch])

    if len(stack) != 1:
        raise make_parse_error(message="Unmatched '['", source=code, offset=opened[-1])

    log.debug("parsed %d symbols, loop nesting depth %d", size, depth)
    return Program(nodes=tuple(stack[0]), depth=depth, size=size)


# ---------------- Emit back to source ----------------
def emit(nodes: Tuple[Node, ...]) -> str:
    out: List[str] = []
    for n in nodes:
        if isinstance(n, Add):
            out.append("+" if n.delta > 0 else "-")
        elif isinstance(n, Move):
            out.append(">" if n.delta > 0 else "<")
        elif isinstance(n, Output):
            out.append(".")
        elif isinstance(n, Input):
            out.append(",")
        elif isinstance(n, Loop):
            out.append("[" + emit(n.body) + "]")
    return "".join(out)
