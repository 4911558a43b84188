"""The wallets of all clients, kept in one file."""

from __future__ import annotations

from pathlib import Path

from .storage import count_occurrences
from .wallet import Wallet


class Bank:
    """Wallets read from the bank file at ``path``."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        text = self.path.read_text(encoding="utf-8")
        lines = text.split("\n")[: count_occurrences(text, "\n")]
        if not lines:
            raise ValueError("There are still no clients in the system!")
        self._wallets = [Wallet.from_line(line) for line in lines]

    def __len__(self) -> int:
        return len(self._wallets)

    def __getitem__(self, index: int) -> Wallet:
        return self._wallets[index]

    def wallet_for(self, egn: str) -> Wallet | None:
        """The wallet of the client with ``egn``, or None."""
        for wallet in self._wallets:
            if wallet.client_egn == egn:
                return wallet
        return None

    def save(self) -> None:
        """Overwrite the bank file with the current wallets."""
        with open(self.path, "w", encoding="utf-8") as output:
            for wallet in self._wallets:
                output.write(wallet.to_line() + "\n")