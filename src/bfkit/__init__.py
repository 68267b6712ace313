__version__ = "1.0.0"

from .api import (
    emit_python,
    interpret,
    interpret_file,
    interpret_stdio,
    interpret_string,
    load_program,
    translate,
    translate_file,
)
from .config import IOOptions, TranslateOptions
from .errors import BFConfigError, BFError, BFParseError, BFTranslateError, TapeOverflowError
from .interpreter import Interpreter
from .tape import Tape
from .translator import CompiledProgram

__all__ = [
    'interpret',
    'interpret_string',
    'interpret_stdio',
    'interpret_file',
    'load_program',
    'translate',
    'translate_file',
    'emit_python',
    'CompiledProgram',
    'Interpreter',
    'Tape',
    'IOOptions',
    'TranslateOptions',
    'BFError',
    'BFParseError',
    'BFTranslateError',
    'TapeOverflowError',
    'BFConfigError',
]
