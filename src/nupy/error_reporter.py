# error_reporter.py
"""
Diagnostics for the nuPython front end.

Syntax errors and lexical warnings are recorded on an ErrorReporter and
written, one line each, to the diagnostic stream (stdout unless another
stream is given). Contract violations are raised through ``panic`` and are
not meant to be caught.
"""

import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class NupyError(Exception):
    """Base class for every error raised or reported by nupy."""

    def __init__(self, message, line=None, column=None, filename="<stdin>", suggestion=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion

    def render(self):
        return self.message

    def __str__(self):
        return self.render()


class NupySyntaxError(NupyError):
    """First grammar mismatch in a program."""

    def render(self):
        return f"**SYNTAX ERROR @ ({self.line},{self.column}): {self.message}"


class NupyInternalError(NupyError):
    """The grammar implementation disagrees with itself."""

    def render(self):
        return f"**INTERNAL ERROR: {self.message}"


class ContractViolation(NupyError):
    """A caller broke an API contract (missing argument, empty dequeue)."""

    def render(self):
        return f"**PANIC: {self.message}"


@dataclass
class LexicalWarning:
    message: str
    line: int
    column: int
    filename: str = "<stdin>"

    def render(self):
        return f"**WARNING: {self.message}"

    def __str__(self):
        return self.render()


def panic(message):
    raise ContractViolation(message)


class ErrorReporter:
    def __init__(self, stream=None):
        self.stream = stream
        self.errors: List[NupyError] = []
        self.warnings: List[LexicalWarning] = []
        self._sources: Dict[str, List[str]] = {}

    def register_source(self, filename, source_code):
        self._sources[filename] = source_code.splitlines()

    def source_line(self, filename, line) -> Optional[str]:
        lines = self._sources.get(filename)
        if not lines or line is None or not 1 <= line <= len(lines):
            return None
        return lines[line - 1]

    def _emit(self, text):
        print(text, file=self.stream if self.stream is not None else sys.stdout)

    def report_error(self, error_cls, message, line=None, column=None,
                     filename="<stdin>", suggestion=None):
        error = error_cls(message, line=line, column=column,
                          filename=filename, suggestion=suggestion)
        self.errors.append(error)
        self._emit(error.render())
        return error

    def report_warning(self, message, line, column, filename="<stdin>"):
        warning = LexicalWarning(message, line, column, filename)
        self.warnings.append(warning)
        self._emit(warning.render())
        return warning

    def has_errors(self):
        return bool(self.errors)

    def clear(self):
        self.errors.clear()
        self.warnings.clear()


_default_reporter: Optional[ErrorReporter] = None


def get_error_reporter() -> ErrorReporter:
    global _default_reporter
    if _default_reporter is None:
        _default_reporter = ErrorReporter()
    return _default_reporter


def reset_error_reporter(stream=None) -> ErrorReporter:
    global _default_reporter
    _default_reporter = ErrorReporter(stream)
    return _default_reporter


def print_error(error, console=None, reporter=None):
    """Pretty-print an error with the offending source line, for the CLI."""
    console = console or Console(stderr=True)
    reporter = reporter or get_error_reporter()

    body = Text(error.render(), style="bold red")
    src = reporter.source_line(error.filename, error.line)
    if src is not None:
        body.append(f"\n\n{error.line:>4} | {src}", style="white")
        if error.column:
            body.append("\n     | " + " " * (error.column - 1) + "^", style="bold yellow")
    if error.suggestion:
        body.append(f"\n\nhint: {error.suggestion}", style="cyan")

    title = f"{error.filename}:{error.line}:{error.column}" if error.line else error.filename
    console.print(Panel(body, title=title, border_style="red"))
