"""Line-oriented console channel used by the pager and session."""

import sys
from typing import Optional, TextIO

__all__ = ["ConsoleIO"]


class ConsoleIO:
    """
    Print a line; read a line.

    Streams default to sys.stdout / sys.stdin at call time so that pytest's
    capsys and monkeypatched stdin are honoured.  `read_line` returns None at
    end of input.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self._stdout = stdout
        self._stdin = stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    def write(self, line: str) -> None:
        print(line, file=self.stdout)

    def read_line(self, prompt: str = "") -> Optional[str]:
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        raw = self.stdin.readline()
        if not raw:
            return None
        return raw.rstrip("\r\n")
