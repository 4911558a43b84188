"""Browsing, sorting and editing the product catalogue."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from .product import Product
from .storage import read_products, write_products


class Searchbar:
    """The products of the catalogue file at ``path``, held in memory."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        self._products: list[Product] = read_products(self.path)

    def __len__(self) -> int:
        return len(self._products)

    def __getitem__(self, index: int) -> Product:
        return self._products[index]

    def _select_sort(self, key: Callable[[Product], object], pick) -> None:
        """Selection sort: each position gets the first extreme of what is left."""
        items = self._products
        for position in range(len(items)):
            best = pick(range(position, len(items)), key=lambda j: key(items[j]))
            if best != position:
                items[best], items[position] = items[position], items[best]

    def list_products(self) -> None:
        """Print a numbered short listing of the products."""
        for number, product in enumerate(self._products, start=1):
            print(
                f"{number} {product.name} {product.price:.6g} BGN "
                f"{product.rating:.6g} rating {product.quantity} quantity"
            )

    def sort_by_sales(self) -> None:
        """Best sellers first."""
        self._select_sort(lambda p: p.number_of_sales, max)

    def sort_by_rating(self) -> None:
        """Highest rated first."""
        self._select_sort(lambda p: p.rating, max)

    def sort_by_name(self) -> None:
        """Alphabetical order of names."""
        self._select_sort(lambda p: p.name, min)

    def sort_by_price(self, descending: bool = False) -> None:
        """Cheapest first, or dearest first when ``descending``."""
        self._select_sort(lambda p: p.price, max if descending else min)

    def view_product(self, product_id: int) -> None:
        """Print the details of the product with ``product_id``."""
        for product in self._products:
            if product.id == product_id:
                print(f"Name: {product.name}")
                print(f"Price: {product.price:.6g}")
                print(f"In stock: {product.quantity}")
                print(f"Rating: {product.rating:.6g}")
                print(f"Description: {product.description}")
                return
        print("There's no such product!")

    def show(self) -> None:
        """Print the full description of every product."""
        for product in self._products:
            print(product.describe())

    def find_available(self, product_id: int, quantity: int) -> Product:
        """The product with ``product_id`` if at least ``quantity`` are in stock."""
        for product in self._products:
            if product.id == product_id and quantity <= product.quantity:
                return product
        raise LookupError("No products with this ID in storage!")

    def delete_product(self, index: int) -> None:
        if not 0 <= index < len(self._products):
            raise IndexError("index out of range!")
        del self._products[index]

    def rate_product(self, product_id: int, rating: float) -> None:
        for product in self._products:
            if product.id == product_id:
                product.rate(rating)
                return
        print("Couldn't find product!")

    def save(self) -> None:
        """Overwrite the catalogue file with the current products."""
        write_products(self._products, self.path)