"""The carts of all clients, kept in one file."""

from __future__ import annotations

from pathlib import Path

from .cart import Cart
from .storage import count_occurrences


class CartBook:
    """Carts read from ``path``; their products are looked up in ``items_path``."""

    def __init__(self, path, items_path) -> None:
        self.path = Path(path)
        self.items_path = Path(items_path)
        text = self.path.read_text(encoding="utf-8")
        lines = text.split("\n")[: count_occurrences(text, "\n")]
        self._carts = [Cart.from_line(line, self.items_path) for line in lines]

    def __len__(self) -> int:
        return len(self._carts)

    def get(self, client_name: str) -> Cart | None:
        """The cart of ``client_name``, or None if the client has none."""
        for cart in self._carts:
            if cart.client_name == client_name:
                return cart
        return None

    def add(self, cart: Cart) -> None:
        self._carts.append(cart)

    def remove(self, client_name: str) -> None:
        for position, cart in enumerate(self._carts):
            if cart.client_name == client_name:
                del self._carts[position]
                return
        print("We couldn't find card!")

    def save(self) -> None:
        """Overwrite the carts file with the current carts."""
        with open(self.path, "w", encoding="utf-8") as output:
            for cart in self._carts:
                output.write(cart.to_line() + "\n")