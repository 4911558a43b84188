"""A client's shopping cart and its one-line file format."""

from __future__ import annotations

import re

from .order import MAX_ORDER_CAPACITY, NAME_DELIM, PRODUCT_DELIM
from .product import Product
from .storage import find_product, read_products

_ITEM = re.compile(r"\s*(\d+).([^,]*)")


class Cart:
    """Products a client intends to buy, with the running total and discount."""

    def __init__(self, client_name: str = "") -> None:
        self.client_name = client_name
        self.products: list[Product] = []
        self.total_amount = 0.0
        self.discount = 0.0

    def __len__(self) -> int:
        return len(self.products)

    def quantity_of(self, product_name: str) -> int:
        return sum(1 for product in self.products if product.name == product_name)

    def _grouped(self) -> list[tuple[Product, int]]:
        groups = []
        position = 0
        while position < len(self.products):
            product = self.products[position]
            quantity = self.quantity_of(product.name)
            groups.append((product, quantity))
            position += quantity
        return groups

    def add_product(self, product: Product) -> None:
        self.products.append(product)
        self.total_amount += product.price

    def remove_product(self, product_name: str, quantity: int) -> None:
        """Take up to ``quantity`` products called ``product_name`` out of the cart."""
        available = self.quantity_of(product_name)
        if available == 0:
            print("There are no products with this name in your cart!")
            return
        if quantity > available:
            print(f"There are only {available}x {product_name} left in your cart!")
            quantity = available

        for position, product in enumerate(self.products):
            if product.name == product_name:
                self.total_amount -= quantity * product.price
                del self.products[position : position + quantity]
                break

        print(f"{quantity}x {product_name} removed from your cart")

    def view(self) -> None:
        """Print the cart's contents, discount and total."""
        print("Items in cart: ")
        for product, quantity in self._grouped():
            print(f"{quantity}x {product.name} {product.price:.6g} BGN")
        print(f"Discount: -{self.discount:.6g} BGN")
        print(f"Total amount: {self.total_amount:.6g} BGN")

    def apply_discount(self, discount: float) -> bool:
        """Subtract ``discount`` from the total if it is under half of it."""
        if discount >= 0.5 * self.total_amount:
            print("Only discounts under 50% allowed!")
            return False
        self.total_amount -= discount
        self.discount = discount
        return True

    def remove_discount(self) -> float:
        """Undo the discount and return its amount, or 0 if there was none."""
        if self.discount == 0:
            print("No discount applied!")
            return 0.0
        returned = self.discount
        self.total_amount += self.discount
        self.discount = 0.0
        return returned

    def clear(self) -> None:
        """Remove every product; the total and discount are left as they are."""
        self.products = []

    def to_line(self) -> str:
        """Render the cart as a line of the carts file, without newline."""
        items = "".join(
            f"{quantity}x{product.name}{PRODUCT_DELIM}"
            for product, quantity in self._grouped()
        )
        return (
            f"{self.client_name}{NAME_DELIM}{items} "
            f"{self.total_amount:.6g} {self.discount:.6g}"
        )

    @classmethod
    def from_line(cls, line: str, items_path) -> Cart:
        """Parse a line of the carts file, looking products up in ``items_path``."""
        text = line.rstrip("\r\n")
        count = text.count(PRODUCT_DELIM)
        client_name, _, rest = text.partition(NAME_DELIM)
        pieces = rest.split(PRODUCT_DELIM, count)
        item_pieces, tail = pieces[:-1], pieces[-1]

        catalogue = read_products(items_path) if item_pieces else []
        cart = cls(client_name)
        for piece in item_pieces:
            match = _ITEM.fullmatch(piece)
            if match is None:
                raise ValueError(f"malformed cart item: {piece!r}")
            counter, name = int(match.group(1)), match.group(2)
            product = find_product(catalogue, name)
            for _ in range(counter):
                if len(cart.products) == MAX_ORDER_CAPACITY:
                    raise ValueError("You exceeded the limit of one order")
                cart.products.append(product)

        numbers = tail.split()
        if len(numbers) < 2:
            raise ValueError(f"malformed cart line: {text!r}")
        cart.total_amount = float(numbers[0])
        cart.discount = float(numbers[1])
        return cart