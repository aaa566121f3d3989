# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for the Lox language.
import sys

# Parsing and evaluation recurse once per level of nesting in the program.
RECURSION_LIMIT = 10000
sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))

from .errors import ErrorReporter, LoxRuntimeError, ParseError  # noqa: E402
from .interpreter import Interpreter, RunResult, run_file, run_program  # noqa: E402
from .parser import Parser, parse_program  # noqa: E402
from .scanner import Scanner, scan  # noqa: E402

__all__ = [
    'ErrorReporter',
    'Interpreter',
    'LoxRuntimeError',
    'ParseError',
    'Parser',
    'RECURSION_LIMIT',
    'RunResult',
    'Scanner',
    'parse_program',
    'run_file',
    'run_program',
    'scan',
]
