from __future__ import annotations

import sys
from typing import Protocol, TextIO, Optional


class Console(Protocol):
    """Abstract interface for the interactive line reader and writer.

    `read_line` raises EOFError when the input is exhausted.
    """

    def read_line(self, prompt: str = "") -> str:
        ...

    def write(self, text: str) -> None:
        ...


class StdConsole:
    """Console bound to text streams (stdin/stdout by default).

    Item names loaded from non-UTF-8 files carry surrogate escapes, so both
    streams are switched to `surrogateescape` to pass those bytes through
    unchanged in either direction.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        for stream in (self._in, self._out):
            # StringIO and other in-memory streams hold str and have no codec
            reconfigure = getattr(stream, "reconfigure", None)
            if reconfigure is not None:
                reconfigure(errors="surrogateescape")

    def read_line(self, prompt: str = "") -> str:
        if prompt:
            self._out.write(prompt)
            self._out.flush()
        line = self._in.readline()
        if line == "":
            raise EOFError("end of console input")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()
