import pytest

from shopfront.cart import Cart
from shopfront.carts import CartBook
from shopfront.product import Product
from shopfront.storage import write_products


@pytest.fixture
def files(tmp_path):
    items = tmp_path / "items_collection.txt"
    apple = Product("apple", 1.5, 10, "red", id=1)
    write_products([apple], items)
    ana = Cart("ana")
    ana.add_product(apple)
    bob = Cart("bob")
    carts = tmp_path / "carts.txt"
    carts.write_text(ana.to_line() + "\n" + bob.to_line() + "\n", encoding="utf-8")
    return carts, items


def test_loads_carts(files):
    book = CartBook(*files)
    assert len(book) == 2
    assert book.get("ana").quantity_of("apple") == 1
    assert len(book.get("bob")) == 0


def test_get_missing_returns_none(files):
    assert CartBook(*files).get("eve") is None


def test_add_and_remove(files, capsys):
    book = CartBook(*files)
    book.add(Cart("eve"))
    assert book.get("eve").client_name == "eve"
    book.remove("ana")
    assert book.get("ana") is None
    assert len(book) == 2
    book.remove("nobody")
    assert "We couldn't find card!" in capsys.readouterr().out


def test_save_round_trip(files):
    book = CartBook(*files)
    book.remove("bob")
    book.add(Cart("eve"))
    book.save()
    again = CartBook(*files)
    assert [again.get(n) is not None for n in ("ana", "bob", "eve")] == [True, False, True]
    assert again.get("ana").to_line() == book.get("ana").to_line()


def test_empty_file(tmp_path):
    carts = tmp_path / "carts.txt"
    carts.write_text("", encoding="utf-8")
    book = CartBook(carts, tmp_path / "items_collection.txt")
    assert len(book) == 0