"""Handles interactive mode for the Lox interpreter. Uses cmd as backend."""

import cmd

from .runner import Lox


class LoxShell(cmd.Cmd):
    """Lox read-eval-print loop.

    Each input line is run as a complete program against the session's
    interpreter, so variables persist from one line to the next. Errors are
    reported and then forgotten: both latches are cleared before the next
    prompt.
    """
    intro = "Lox interpreter :: Python backend\nType 'exit' or press Ctrl-D to leave."
    prompt = "> "

    def __init__(self, lox: Lox, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lox = lox

    def onecmd(self, line):
        """Only the bare words `exit` and `EOF` are commands; every other line is Lox."""
        command = line.strip()
        if not command:
            return self.emptyline()
        if command == 'EOF':
            return self.do_EOF('')
        if command == 'exit':
            return self.do_exit('')
        return self.default(line)

    def default(self, line):
        """Runs a line of Lox source."""
        try:
            self.lox.run(line)
        finally:
            self.lox.diagnostics.reset()

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
