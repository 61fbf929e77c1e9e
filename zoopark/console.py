"""In-game message log shown in the console panel."""

from __future__ import annotations

from collections import deque

MAX_LINES = 100


class ConsoleLog:
    """A bounded log of messages; the oldest entries are dropped first."""

    def __init__(self, max_lines: int = MAX_LINES) -> None:
        self._lines: deque[str] = deque(maxlen=max_lines)

    def write(self, text: str) -> None:
        """Append one message to the log."""
        self._lines.append(str(text))

    def clear(self) -> None:
        """Remove every message."""
        self._lines.clear()

    def lines(self) -> list[str]:
        """Return the messages, oldest first."""
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self):
        return iter(list(self._lines))