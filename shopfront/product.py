"""Catalogue products and their one-line file format."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field

_ids = itertools.count(1)

_LINE = re.compile(r"\s*(-?\d+) ([^|]*)\|\s*(\S+)\s+(\S+)\s+(\S+)\s+(\S+) ?(.*)")


def _next_id() -> int:
    return next(_ids)


@dataclass(eq=False)
class Product:
    """A product in the store's catalogue.

    Products compare equal when their names match.
    """

    name: str
    price: float
    quantity: int
    description: str = ""
    number_of_sales: int = 0
    rating: float = 0.0
    id: int = field(default_factory=_next_id)

    def rate(self, rating: float) -> None:
        """Set the product's rating, which must lie between 0 and 5."""
        if not 0 <= rating <= 5:
            raise ValueError("ratings can only be between 0 and 5!")
        self.rating = rating

    def take_from_storage(self, quantity: int) -> None:
        """Move ``quantity`` items from stock to sales."""
        if quantity > self.quantity:
            raise ValueError("Not enough products!")
        self.quantity -= quantity
        self.number_of_sales += quantity

    def return_to_storage(self, quantity: int) -> None:
        """Move ``quantity`` items from sales back to stock."""
        self.quantity += quantity
        self.number_of_sales -= quantity

    def to_line(self) -> str:
        """Render the product as a line of the items file, without newline."""
        return (
            f"{self.id} {self.name}|{self.price:.6g} {self.quantity} "
            f"{self.number_of_sales} {self.rating:.6g} {self.description}"
        )

    @classmethod
    def from_line(cls, line: str) -> Product:
        """Parse a line of the items file."""
        text = line.rstrip("\r\n")
        match = _LINE.fullmatch(text)
        if match is None:
            raise ValueError(f"malformed product line: {text!r}")
        ident, name, price, quantity, sales, rating, description = match.groups()
        return cls(
            name=name,
            price=float(price),
            quantity=int(quantity),
            description=description,
            number_of_sales=int(sales),
            rating=float(rating),
            id=int(ident),
        )

    def describe(self) -> str:
        """One-line human-readable summary."""
        return (
            f"Product #{self.id} Name:{self.name} {self.price:.6g}BGN "
            f"In stock: {self.quantity} Sold: {self.number_of_sales} "
            f"Stars: {self.rating:.6g} {self.description}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.name == other.name