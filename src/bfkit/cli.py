from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__, programs
from .api import interpret_stdio, load_program, translate
from .config import PROGRAM_ENCODING
from .errors import BFError
from .translator import emit_python

log = logging.getLogger(__name__)


def init_logging(debug: bool = False) -> None:
    pkg = logging.getLogger("bfkit")
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)5s %(name)s: %(message)s"))
    pkg.addHandler(handler)
    pkg.setLevel(logging.DEBUG if debug else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfkit",
        description="Interpret or translate programs in the eight-symbol tape language.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"bfkit {__version__}")
    parser.add_argument("--debug", action="store_true", help="Log debug messages to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Translate and run a bundled program on stdin/stdout")
    demo.add_argument("name", nargs="?", default="hello", choices=programs.available())

    run = sub.add_parser("interpret", help="Interpret a program file (or program text from stdin)")
    run.add_argument("file", nargs="?", help="Program file; read from stdin when omitted")
    run.add_argument("--dump-tape", action="store_true",
                     help="Print the non-zero cells of the final tape to stderr")

    comp = sub.add_parser("compile", help="Translate a program file into a Python module")
    comp.add_argument("file", help="Program file")
    comp.add_argument("-o", "--output", help="Write the module here instead of stdout")
    return parser


def _cmd_demo(args: argparse.Namespace) -> int:
    compiled = translate(programs.load(args.name))
    compiled(sys.stdin.buffer, sys.stdout.buffer, autoflush=True)
    return 0


def _cmd_interpret(args: argparse.Namespace) -> int:
    if args.file:
        code = load_program(args.file, encoding=PROGRAM_ENCODING)
    else:
        code = sys.stdin.buffer.read().decode(PROGRAM_ENCODING)
    tape = interpret_stdio(code)
    if args.dump_tape:
        for pos, value in tape.nonzero_cells():
            print(f"{pos:8d}: {value:3d}", file=sys.stderr)
    return 0


def _cmd_compile(args: argparse.Namespace) -> int:
    source = emit_python(load_program(args.file, encoding=PROGRAM_ENCODING))
    if args.output:
        Path(args.output).write_text(source, encoding="utf-8")
        log.debug("wrote %s", args.output)
    else:
        sys.stdout.write(source)
    return 0


_COMMANDS = {
    "demo": _cmd_demo,
    "interpret": _cmd_interpret,
    "compile": _cmd_compile,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    init_logging(args.debug)

    try:
        return _COMMANDS[args.command](args)
    except FileNotFoundError as e:
        print(f"Couldn't find file: {e.filename}", file=sys.stderr)
        return 1
    except BFError as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
