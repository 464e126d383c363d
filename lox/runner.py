"""Drives source text through the scanner, parser and interpreter.

A `Lox` instance owns one interpreter, so variables defined by one call to
`run` are visible to the next; this is what the interactive shell relies
on. The error latches live in `self.diagnostics` and decide the process
exit status of a script run.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, TextIO

from .ast import Stmt
from .debug import DebugLog
from .diagnostics import Diagnostics
from .interpreter import Interpreter
from .parser import parse_program

# sysexits.h
EX_OK = 0
EX_DATAERR = 65
EX_SOFTWARE = 70


class Lox:
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.diagnostics = Diagnostics(err)
        self.debug = DebugLog(debug_level, debug_file)
        self.interpreter = Interpreter(self.diagnostics, self.debug, out)

    def exit_code(self) -> int:
        if self.diagnostics.had_error:
            return EX_DATAERR
        if self.diagnostics.had_runtime_error:
            return EX_SOFTWARE
        return EX_OK

    def parse(self, source: str) -> List[Stmt]:
        return parse_program(source, self.diagnostics, self.debug)

    def run(self, source: str) -> int:
        """Run one complete program. Nothing executes if it has a syntax error."""
        statements = self.parse(source)
        if self.diagnostics.had_error:
            self.debug.log(1, "syntax errors, program not run")
            return self.exit_code()
        return self.execute(statements)

    def execute(self, statements: List[Stmt]) -> int:
        self.interpreter.interpret(statements)
        return self.exit_code()

    def run_file(self, path: str) -> int:
        with open(Path(path), 'r', encoding='utf-8') as f:
            source = f.read()
        self.debug.log(1, f"running {path}")
        try:
            return self.run(source)
        finally:
            self.debug.close()

    def run_prompt(self):
        from .shell import LoxShell
        try:
            LoxShell(self).cmdloop()
        finally:
            self.debug.close()
