"""Client wallets: money balance and loyalty points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Wallet:
    """The balance and loyalty points of one client, keyed by EGN."""

    client_egn: str = ""
    balance: float = 0.0
    loyalty_points: float = 0.0

    def add_money(self, amount: float) -> None:
        self.balance += amount

    def withdraw(self, amount: float) -> None:
        """Take ``amount`` out of the wallet."""
        if amount > self.balance:
            raise ValueError("Not enough money in wallet!")
        self.balance -= amount

    def add_points(self, points: float) -> None:
        self.loyalty_points += points

    def set_points(self, points: float) -> None:
        if points < 0:
            raise ValueError("Points can't be a negative number!")
        self.loyalty_points = points

    def to_line(self) -> str:
        """Render the wallet as a line of the bank file, without newline."""
        return f"{self.client_egn}|{self.balance:.6g} {self.loyalty_points:.6g}"

    @classmethod
    def from_line(cls, line: str) -> Wallet:
        """Parse a line of the bank file."""
        egn, sep, rest = line.rstrip("\r\n").partition("|")
        numbers = rest.split()
        if not sep or len(numbers) < 2:
            raise ValueError(f"malformed wallet line: {line!r}")
        return cls(egn, float(numbers[0]), float(numbers[1]))

    def append_to(self, path) -> None:
        """Append this wallet to the bank file at ``path``."""
        with open(path, "a", encoding="utf-8") as output:
            output.write(self.to_line() + "\n")