"""A simple text progress bar redrawn in place with backspaces."""

from __future__ import annotations

import sys
from typing import TextIO

_WIDTH = 50


class ProgressBar:
    """Progress bar over a known number of iterations, advanced by ``update``."""

    def __init__(
        self,
        n: int = 0,
        show_bar: bool = True,
        output: TextIO | None = None,
        done_char: str = "#",
        todo_char: str = " ",
        opening_bracket: str = "[",
        closing_bracket: str = "]",
    ) -> None:
        self.n = n
        self.show_bar = show_bar
        self.output = output if output is not None else sys.stderr
        self.done_char = done_char
        self.todo_char = todo_char
        self.opening_bracket = opening_bracket
        self.closing_bracket = closing_bracket
        self.reset()

    def reset(self) -> None:
        """Start over so the bar can be used for another loop."""
        self._progress = 0
        self._last_percent = 0
        self._started = False

    def _percent(self) -> int:
        if self.n <= 1:
            return 100
        return int(self._progress * 100.0 / (self.n - 1))

    def update(self) -> None:
        """Advance by one iteration and redraw what changed."""
        if self.n == 0:
            raise RuntimeError("number of cycles not set")
        write = self.output.write

        if not self._started:
            if self.show_bar:
                write(self.opening_bracket + self.todo_char * _WIDTH + self.closing_bracket + " 0%")
            else:
                write("0%")
        self._started = True

        percent = self._percent()
        if percent < self._last_percent:
            return

        if percent == self._last_percent + 1:
            if percent <= 10:
                write(f"\b\b{percent}%")
            elif percent <= 100:
                write(f"\b\b\b{percent}%")

        if self.show_bar and percent % 2 == 0:
            write("\b" * len(self.closing_bracket))
            if percent < 10:
                write("\b" * 3)
            elif percent < 100:
                write("\b" * 4)
            elif percent == 100:
                write("\b" * 5)

            remaining = _WIDTH - int((percent - 1) / 2)
            write("\b" * (len(self.todo_char) * max(remaining, 0)))
            write(self.todo_char if percent == 0 else self.done_char)
            write(self.todo_char * max(remaining - 1, 0))
            write(f"{self.closing_bracket} {percent}%")

        self._last_percent = percent
        self._progress += 1
        self.output.flush()