# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for a
# fragment of the Lox language.
from .interpreter import Interpreter, run_source
from .parser import Parser, parse_program
from .scanner import Scanner
from .runner import Lox
from .errors import LoxError, LoxRuntimeError

__all__ = [
    'Interpreter',
    'run_source',
    'Parser',
    'parse_program',
    'Scanner',
    'Lox',
    'LoxError',
    'LoxRuntimeError',
]
