"""Orders placed by clients and their one-line file format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from .product import Product
from .storage import find_product, read_products, write_products

NAME_DELIM = "|"
PRODUCT_DELIM = ","
MAX_ORDER_CAPACITY = 100

_ITEM = re.compile(r"\s*(\d+).([^,]*)")


class OrderStatus(str, Enum):
    """The stages an order passes through."""

    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    REJECTED = "Rejected"
    REFUNDED = "Refunded"


def _parse_status(status) -> OrderStatus:
    try:
        return OrderStatus(status)
    except ValueError:
        raise ValueError("There's no such status") from None


@dataclass(eq=False)
class Order:
    """A client's order: the products bought, the price paid and its status."""

    client_name: str
    products: list[Product] = field(default_factory=list)
    total_price: float = 0.0
    discount: float = 0.0
    status: OrderStatus = OrderStatus.PENDING

    def __post_init__(self) -> None:
        self.status = _parse_status(self.status)
        self.products = list(self.products)

    def __len__(self) -> int:
        return len(self.products)

    def __getitem__(self, index: int) -> Product:
        return self.products[index]

    def quantity_of(self, product_name: str) -> int:
        """How many of the order's products are called ``product_name``."""
        return sum(1 for product in self.products if product.name == product_name)

    def grouped(self) -> list[tuple[Product, int]]:
        """Runs of equally named products, each with its quantity."""
        groups = []
        position = 0
        while position < len(self.products):
            product = self.products[position]
            quantity = self.quantity_of(product.name)
            groups.append((product, quantity))
            position += quantity
        return groups

    def loyalty_points(self) -> float:
        """Points earned when the order is delivered."""
        return 5 * self.total_price

    def to_line(self) -> str:
        """Render the order as a line of an orders file, without newline."""
        items = "".join(
            f"{quantity}x{product.name}{PRODUCT_DELIM}"
            for product, quantity in self.grouped()
        )
        return (
            f"{self.client_name}{NAME_DELIM}{items} "
            f"{self.total_price:.6g} {self.discount:.6g} {self.status.value}"
        )

    @classmethod
    def from_line(cls, line: str, items_path) -> Order:
        """Parse a line of an orders file, looking products up in ``items_path``."""
        text = line.rstrip("\r\n")
        count = text.count(PRODUCT_DELIM)
        client_name, _, rest = text.partition(NAME_DELIM)
        pieces = rest.split(PRODUCT_DELIM, count)
        item_pieces, tail = pieces[:-1], pieces[-1]

        catalogue = read_products(items_path) if item_pieces else []
        products: list[Product] = []
        for piece in item_pieces:
            match = _ITEM.fullmatch(piece)
            if match is None:
                raise ValueError(f"malformed order item: {piece!r}")
            counter, name = int(match.group(1)), match.group(2)
            product = find_product(catalogue, name)
            for _ in range(counter):
                if len(products) == MAX_ORDER_CAPACITY:
                    raise ValueError("You exceeded the limit of one order")
                products.append(product)

        fields_ = tail.split(None, 2)
        if len(fields_) < 3:
            raise ValueError(f"malformed order line: {text!r}")
        total, discount, status = fields_
        return cls(
            client_name=client_name,
            products=products,
            total_price=float(total),
            discount=float(discount),
            status=_parse_status(status),
        )

    def append_to(self, path) -> None:
        """Append this order to the orders file at ``path``."""
        with open(path, "a", encoding="utf-8") as output:
            output.write(self.to_line() + "\n")

    def describe(self) -> str:
        """One-line human-readable summary."""
        items = ", ".join(
            f"{quantity}x {product.name}" for product, quantity in self.grouped()
        )
        return (
            f"{self.client_name}: {items} {self.total_price:.6g}BGN "
            f"Current status: {self.status.value}"
        )

    def has_product(self, product_id: int) -> bool:
        return any(product.id == product_id for product in self.products)

    def _move_stock(self, items_path, taking: bool) -> None:
        catalogue = read_products(items_path)
        for product, quantity in self.grouped():
            item = find_product(catalogue, product.name)
            if taking:
                item.take_from_storage(quantity)
            else:
                item.return_to_storage(quantity)
        write_products(catalogue, items_path)

    def take_from_storage(self, items_path) -> None:
        """Remove the ordered quantities from the catalogue's stock."""
        self._move_stock(items_path, taking=True)

    def return_to_storage(self, items_path) -> None:
        """Put the ordered quantities back into the catalogue's stock."""
        self._move_stock(items_path, taking=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return (
            self.client_name == other.client_name
            and self.status == other.status
            and self.products == other.products
        )