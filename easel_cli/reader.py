"""
Token Reader
============

Whitespace-separated token input for the interactive session. Several
values may share one line ("0 0" for an origin) or be split across lines.
"""

import math
from collections import deque
from typing import Deque, TextIO

from easel_geometry import Point


class InputError(ValueError):
    """Raised when a token cannot be parsed as the expected type."""
    pass


class TokenReader:
    """
    Pull tokens from a text stream on demand.

    Raises EOFError once the stream is exhausted.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending: Deque[str] = deque()

    def next_token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if line == "":
                raise EOFError("End of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def next_float(self) -> float:
        token = self.next_token()
        try:
            value = float(token)
        except ValueError:
            raise InputError(f"Expected a number, got {token!r}") from None
        if not math.isfinite(value):
            raise InputError(f"Expected a finite number, got {token!r}")
        return value

    def next_point(self) -> Point:
        x = self.next_float()
        y = self.next_float()
        return Point(x, y)

    def discard_line(self) -> None:
        """Drop the unread rest of the current line (used after an error)."""
        self._pending.clear()
