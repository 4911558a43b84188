"""Locations of the data files and access to the product catalogue."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Iterable

from .product import Product


@dataclass(frozen=True)
class DataFiles:
    """Paths of every file the store keeps its state in."""

    items: Path = Path("items_collection.txt")
    users: Path = Path("users.txt")
    bank: Path = Path("bank.txt")
    carts: Path = Path("carts.txt")
    orders: Path = Path("orders.txt")
    refund_requests: Path = Path("refund_requests.txt")
    refunds: Path = Path("refunds.txt")
    rejected_requests: Path = Path("rejected_requests.txt")
    descriptions: Path = Path("descriptions.txt")
    ratings: Path = Path("ratings.txt")
    uncashed_checks: Path = Path("uncashed_checks.txt")
    transactions: Path = Path("transactions.txt")

    @classmethod
    def at(cls, directory) -> DataFiles:
        """The standard file names, placed inside ``directory``."""
        base = Path(directory)
        defaults = cls()
        return cls(**{f.name: base / getattr(defaults, f.name) for f in fields(cls)})


def count_occurrences(text: str, ch: str) -> int:
    """Number of times ``ch`` occurs in ``text``."""
    return text.count(ch)


def read_products(path) -> list[Product]:
    """Read every newline-terminated product line from ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")[: count_occurrences(text, "\n")]
    return [Product.from_line(line) for line in lines]


def find_product(products: Iterable[Product], name: str) -> Product:
    """The first product called ``name``."""
    for product in products:
        if product.name == name:
            return product
    raise LookupError("No product with this name")


def write_products(products: Iterable[Product], path) -> None:
    """Overwrite ``path`` with the given products."""
    with open(path, "w", encoding="utf-8") as output:
        for product in products:
            output.write(product.to_line() + "\n")


def load_product_by_name(name: str, path) -> Product:
    """Read the catalogue at ``path`` and return the product called ``name``."""
    return find_product(read_products(path), name)