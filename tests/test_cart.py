import pytest

from shopfront.cart import Cart
from shopfront.product import Product
from shopfront.storage import write_products


@pytest.fixture
def apple():
    return Product("apple", 1.5, 10, "red", id=1)


@pytest.fixture
def pear():
    return Product("pear", 2.0, 5, "green", id=2)


@pytest.fixture
def items(tmp_path, apple, pear):
    path = tmp_path / "items_collection.txt"
    write_products([apple, pear], path)
    return path


def test_new_cart_is_empty():
    cart = Cart("ana")
    assert len(cart) == 0
    assert cart.total_amount == 0
    assert cart.to_line() == "ana| 0 0"


def test_add_product_updates_total(apple, pear):
    cart = Cart("ana")
    cart.add_product(apple)
    cart.add_product(apple)
    cart.add_product(pear)
    assert len(cart) == 3
    assert cart.quantity_of("apple") == 2
    assert cart.total_amount == pytest.approx(2 * apple.price + pear.price)


def test_remove_product_clamps_quantity(apple, pear, capsys):
    cart = Cart("ana")
    cart.add_product(apple)
    cart.add_product(apple)
    cart.add_product(pear)
    cart.remove_product("apple", 5)
    out = capsys.readouterr().out
    assert "There are only 2x apple left in your cart!" in out
    assert "2x apple removed from your cart" in out
    assert cart.quantity_of("apple") == 0
    assert cart.total_amount == pytest.approx(pear.price)


def test_remove_missing_product(apple, capsys):
    cart = Cart("ana")
    cart.add_product(apple)
    cart.remove_product("pear", 1)
    assert "There are no products with this name" in capsys.readouterr().out
    assert len(cart) == 1


def test_discount_must_be_under_half(apple):
    cart = Cart("ana")
    cart.add_product(apple)
    assert cart.apply_discount(apple.price / 2) is False
    assert cart.discount == 0
    assert cart.apply_discount(0.5) is True
    assert cart.total_amount == pytest.approx(apple.price - 0.5)


def test_remove_discount_restores_total(apple):
    cart = Cart("ana")
    cart.add_product(apple)
    cart.apply_discount(0.5)
    assert cart.remove_discount() == 0.5
    assert cart.discount == 0
    assert cart.total_amount == pytest.approx(apple.price)
    assert cart.remove_discount() == 0


def test_clear_keeps_amounts(apple):
    cart = Cart("ana")
    cart.add_product(apple)
    cart.clear()
    assert len(cart) == 0
    assert cart.total_amount == pytest.approx(apple.price)


def test_round_trip(items, apple, pear):
    cart = Cart("ana")
    cart.add_product(apple)
    cart.add_product(apple)
    cart.add_product(pear)
    cart.apply_discount(1.0)
    again = Cart.from_line(cart.to_line() + "\n", items)
    assert again.client_name == "ana"
    assert [p.name for p in again.products] == ["apple", "apple", "pear"]
    assert again.total_amount == pytest.approx(cart.total_amount)
    assert again.discount == pytest.approx(1.0)
    assert again.to_line() == cart.to_line()


def test_from_line_unknown_product(items):
    with pytest.raises(LookupError):
        Cart.from_line("ana|1xbanana, 1 0", items)


def test_from_line_over_capacity(items):
    with pytest.raises(ValueError):
        Cart.from_line("ana|101xapple, 0 0", items)


def test_from_line_malformed(items):
    with pytest.raises(ValueError):
        Cart.from_line("ana|", items)


def test_view_groups_products(apple, pear, capsys):
    cart = Cart("ana")
    cart.add_product(apple)
    cart.add_product(apple)
    cart.add_product(pear)
    cart.view()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Items in cart: "
    assert lines[1] == "2x apple 1.5 BGN"
    assert lines[2] == "1x pear 2 BGN"