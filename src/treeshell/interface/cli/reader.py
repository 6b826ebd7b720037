from __future__ import annotations

"""
Console Input Reader.

Reads user input from a text stream in one of two modes:
- token: whitespace-delimited words; menu choices are single characters
  and any leftover characters stay buffered for the next read.
- line: each read consumes a whole line, so names may contain spaces.
End of input is reported as None.
"""

import re
import sys
from typing import Optional, TextIO

_TOKEN_RX = re.compile(r"\S+")


class ConsoleReader:
    """Buffered reader over an input stream (stdin by default)."""

    def __init__(self, stream: Optional[TextIO] = None, line_mode: bool = False):
        self._stream = stream if stream is not None else sys.stdin
        self._line_mode = line_mode
        self._pending = ""

    @property
    def line_mode(self) -> bool:
        return self._line_mode

    def read_token(self) -> Optional[str]:
        """
        Read the next name.

        Returns:
            Optional[str]: The next token (or stripped line in line mode),
                           None once the input is exhausted.
        """
        if self._line_mode:
            return self._read_line()

        if not self._skip_whitespace():
            return None
        match = _TOKEN_RX.match(self._pending)
        token = match.group(0) if match else ""
        self._pending = self._pending[len(token):]
        return token

    def read_char(self) -> Optional[str]:
        """
        Read a menu choice.

        In token mode this is the next non-whitespace character; in line mode
        it is the whole stripped line.
        """
        if self._line_mode:
            return self._read_line()

        if not self._skip_whitespace():
            return None
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _fill(self) -> bool:
        """Append the next raw line to the buffer. False at end of input."""
        line = self._stream.readline()
        if not line:
            return False
        self._pending += line
        return True

    def _skip_whitespace(self) -> bool:
        """Drop leading whitespace, pulling lines until a visible char appears."""
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                return True
            if not self._fill():
                return False

    def _read_line(self) -> Optional[str]:
        if not self._pending and not self._fill():
            return None
        line, _, rest = self._pending.partition("\n")
        self._pending = rest
        return line.strip()
