"""Users of the store: administrators, businesses and clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .cart import Cart
from .order import Order, OrderStatus
from .searchbar import Searchbar
from .storage import DataFiles
from .wallet import Wallet


class Role(str, Enum):
    """The kinds of account the store knows."""

    ADMINISTRATOR = "Administrator"
    BUSINESS = "Business"
    CLIENT = "Client"


@dataclass(eq=False)
class User:
    """An account holder identified by name, EGN and password."""

    name: str
    egn: str
    password: str = field(repr=False)

    role: ClassVar[Role]
    _help_lines: ClassVar[tuple[str, ...]] = ()

    def help_text(self) -> str:
        """What this kind of user may do, one item per line."""
        return "\n".join(self._help_lines)

    def profile(self) -> str:
        return f"Your profile: {self.name} EGN: {self.egn}"

    def to_line(self) -> str:
        """Render the user as a line of the users file, without newline."""
        return f"{self.name}|{self.egn}|{self.password}|{self.role.value}"


@dataclass(eq=False)
class Administrator(User):
    role: ClassVar[Role] = Role.ADMINISTRATOR
    _help_lines: ClassVar[tuple[str, ...]] = (
        "As an administrator you can: ",
        "- send checks to clients",
        "- view statistics about clients",
        "- view all transactions made",
    )


@dataclass(eq=False)
class Business(User):
    role: ClassVar[Role] = Role.BUSINESS
    _help_lines: ClassVar[tuple[str, ...]] = (
        "As a business you can: ",
        "- add and remove items",
        "- manage orders and refund requests by clients by approving or rejecting them",
        "- view best selling products and your revenue",
    )


@dataclass(eq=False)
class Client(User):
    """A buyer, who once logged in has a wallet and a cart attached."""

    role: ClassVar[Role] = Role.CLIENT
    _help_lines: ClassVar[tuple[str, ...]] = (
        "As a client you can: ",
        "- view all available products",
        "- manage your cart by adding and removing items",
        "- manage your wallet by using discounts",
        "- make, confirm and refund orders",
        "- rate products",
    )

    wallet: Wallet | None = None
    cart: Cart | None = None
    files: DataFiles = field(default_factory=DataFiles)

    def _wallet(self) -> Wallet:
        if self.wallet is None:
            raise RuntimeError("No wallet is attached to this client")
        return self.wallet

    def _cart(self) -> Cart:
        if self.cart is None:
            raise RuntimeError("No cart is attached to this client")
        return self.cart

    def check_balance(self) -> None:
        wallet = self._wallet()
        print(f"Current balance: {wallet.balance:.6g} BGN")
        print(f"Loyalty points: {wallet.loyalty_points:.6g}")

    def add_points(self, points: float) -> None:
        self._wallet().add_points(points)

    def add_to_wallet(self, amount: float) -> None:
        self._wallet().add_money(amount)

    def reset_points(self) -> None:
        self._wallet().set_points(0)

    def add_to_cart(self, product_id: int, quantity: int) -> None:
        """Put ``quantity`` of the catalogue product ``product_id`` into the cart."""
        cart = self._cart()
        product = Searchbar(self.files.items).find_available(product_id, quantity)
        for _ in range(quantity):
            cart.add_product(product)
        print(f"{quantity}x {product.name} added to your cart")

    def remove_from_cart(self, product_name: str, quantity: int) -> None:
        self._cart().remove_product(product_name, quantity)

    def view_cart(self) -> None:
        self._cart().view()

    def apply_discount(self) -> bool:
        """Turn all loyalty points into a discount (one point per 0.01)."""
        wallet = self._wallet()
        discount = wallet.loyalty_points * 0.01
        if not self._cart().apply_discount(discount):
            print("Points stay the same.")
            return False
        print(f"Discount successfully applied! {discount:.6g} off your order!")
        wallet.set_points(0)
        return True

    def remove_discount(self) -> None:
        """Take the discount off the cart and give the points back."""
        wallet = self._wallet()
        amount = self._cart().remove_discount()
        if amount == 0:
            print("Points stay the same.")
            return
        wallet.add_points(amount * 100)
        print(f"Discount successfully removed! {amount * 100:.6g} points received")

    def checkout(self) -> bool:
        """Pay for the cart and place a pending order; False if funds are short."""
        wallet = self._wallet()
        cart = self._cart()
        amount = cart.total_amount
        if wallet.balance < amount:
            print("You don't have enough money in your wallet!")
            return False

        wallet.withdraw(amount)
        order = Order(
            client_name=self.name,
            products=list(cart.products),
            total_price=amount,
            discount=cart.discount,
            status=OrderStatus.PENDING,
        )
        order.append_to(self.files.orders)
        cart.clear()

        with open(self.files.transactions, "a", encoding="utf-8") as log:
            log.write(f"New purchase from: {self.name} Amount: {amount:.6g}\n")
        return True


_CLASSES: dict[Role, type[User]] = {
    Role.ADMINISTRATOR: Administrator,
    Role.BUSINESS: Business,
    Role.CLIENT: Client,
}


def create_user(name: str, egn: str, password: str, role) -> User:
    """Make a user of the class that ``role`` names."""
    try:
        kind = Role(role)
    except ValueError:
        raise ValueError("Such role doesn't exist") from None
    return _CLASSES[kind](name, egn, password)