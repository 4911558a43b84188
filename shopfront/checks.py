"""Checks issued to clients and the book of uncashed checks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .storage import count_occurrences


@dataclass
class Check:
    """A check worth ``amount`` that the client with ``client_egn`` may redeem."""

    amount: float
    code: str
    client_egn: str

    def to_line(self) -> str:
        return f"{self.amount:.6g} {self.code} {self.client_egn}"

    @classmethod
    def from_line(cls, line: str) -> Check:
        amount_text, _, rest = line.rstrip("\r\n").lstrip().partition(" ")
        code, sep, egn = rest.partition(" ")
        if not sep:
            raise ValueError(f"malformed check line: {line!r}")
        return cls(float(amount_text), code, egn)

    def append_to(self, path) -> None:
        """Append this check to the file at ``path``."""
        with open(path, "a", encoding="utf-8") as output:
            output.write(self.to_line() + "\n")


class CheckBook:
    """The uncashed checks stored in one file."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        text = self.path.read_text(encoding="utf-8")
        lines = text.split("\n")[: count_occurrences(text, "\n")]
        self._checks = [Check.from_line(line) for line in lines]

    def __len__(self) -> int:
        return len(self._checks)

    def has_check(self, code: str) -> bool:
        return any(check.code == code for check in self._checks)

    def amount_for(self, code: str, egn: str) -> float:
        """Amount of the check with ``code`` issued to ``egn``, or 0 if none."""
        for check in self._checks:
            if check.code == code and check.client_egn == egn:
                return check.amount
        print("Sorry! We couldn't find the check!")
        return 0.0

    def delete_check(self, code: str) -> None:
        for index, check in enumerate(self._checks):
            if check.code == code:
                del self._checks[index]
                return
        print("No check with this code!")

    def save(self) -> None:
        """Overwrite the file with the checks still in the book."""
        with open(self.path, "w", encoding="utf-8") as output:
            for check in self._checks:
                output.write(check.to_line() + "\n")