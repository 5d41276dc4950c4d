# source.py
"""Peekable-by-one character reader over a string or a text stream."""

import io
import sys

from .error_reporter import panic


class CharSource:
    def __init__(self, stream, filename=None):
        if stream is None:
            panic("input stream is None (CharSource)")
        if isinstance(stream, str):
            self.text = stream
            stream = io.StringIO(stream)
        else:
            self.text = None
        self.stream = stream
        self.filename = filename or getattr(stream, "name", None) or "<stdin>"
        self._pushback = None
        self.exhausted = False

    @property
    def interactive(self):
        if self.stream is sys.stdin:
            return True
        isatty = getattr(self.stream, "isatty", None)
        try:
            return bool(isatty and isatty())
        except ValueError:
            # closed stream
            return False

    def read(self):
        """Next character, or "" once the stream is exhausted."""
        if self._pushback is not None:
            ch, self._pushback = self._pushback, None
            return ch
        if self.exhausted:
            return ""
        ch = self.stream.read(1)
        if ch == "":
            self.exhausted = True
        return ch

    def unread(self, ch):
        if ch == "":
            return
        if self._pushback is not None:
            panic("pushback buffer already holds a character (CharSource.unread)")
        self._pushback = ch

    def drain_line(self):
        """Discard input up to and including the next newline."""
        ch = self.read()
        while ch not in ("\n", ""):
            ch = self.read()
