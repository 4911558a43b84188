"""Messages stored one per line in a text file."""

from __future__ import annotations

from pathlib import Path

from .storage import count_occurrences


class Mailbox:
    """The newline-terminated lines of a file, read once when opened."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        text = self.path.read_text(encoding="utf-8")
        self._messages = text.split("\n")[: count_occurrences(text, "\n")]

    def __len__(self) -> int:
        return len(self._messages)

    def __getitem__(self, index: int) -> str:
        return self._messages[index]