# shopfront

Building blocks of a small shop that keeps all of its state in plain text
files, one record per line: a product catalogue, shopping carts, orders,
client wallets, checks, product ratings and user accounts.

## Installing

```
pip install .
```

## Modules

| Module | What it holds |
| --- | --- |
| `shopfront.product` | `Product`: name, price, stock, sales, rating, description and a numeric id. `rate()` accepts 0 to 5 only; `take_from_storage()` / `return_to_storage()` move items between stock and sales. Products compare equal by name. |
| `shopfront.storage` | `DataFiles`, the paths of every data file (`DataFiles.at(directory)` puts the standard names in one directory); `read_products`, `write_products`, `find_product`, `load_product_by_name`. |
| `shopfront.wallet` | `Wallet`: a client's balance and loyalty points, keyed by EGN. `withdraw()` refuses to go below zero, `set_points()` refuses negative points. |
| `shopfront.bank` | `Bank`: every wallet in the bank file; `wallet_for(egn)`, `save()`. An empty bank file raises `ValueError`. |
| `shopfront.checks` | `Check` and `CheckBook`: uncashed checks; `has_check`, `amount_for(code, egn)`, `delete_check`, `save`. |
| `shopfront.ratings` | `Rating` and `RatingBook`: one rating per client and product; `add_rating`, `remove_rating`, `average`, `save`. |
| `shopfront.mailbox` | `Mailbox`: the lines of a text file, indexable. |
| `shopfront.order` | `Order` and `OrderStatus` (Pending, Shipped, Delivered, Rejected, Refunded); reading and writing order lines, `describe()`, `loyalty_points()` (5 per unit of price), and moving ordered quantities out of or back into the catalogue. |
| `shopfront.searchbar` | `Searchbar`: the catalogue in memory; sorting by sales, rating, name or price, `view_product`, `find_available`, `delete_product`, `rate_product`, `save`. |
| `shopfront.cart` | `Cart`: products, running total and discount; a discount must be under half the total. |
| `shopfront.carts` | `CartBook`: every client's cart in the carts file; `get`, `add`, `remove`, `save`. |
| `shopfront.users` | `Role`, `User`, `Administrator`, `Business`, `Client` and `create_user(name, egn, password, role)`. A `Client` with a wallet and cart attached can add to and remove from the cart, turn loyalty points into a discount (one point per 0.01) and back, and `checkout()`, which pays from the wallet, appends a pending order and logs the purchase. |

Functions that report to the user (listing products, viewing a cart, warnings
such as a missing check) print to standard output.

## Data files

`DataFiles` names these files:

| File | Line format |
| --- | --- |
| `items_collection.txt` | `id name|price quantity sales rating description` |
| `users.txt` | `name|egn|password|Role` |
| `bank.txt` | `egn|balance points` |
| `carts.txt` | `client|2xMug,1xPen, total discount` |
| `orders.txt`, `refund_requests.txt`, `refunds.txt`, `rejected_requests.txt` | `client|2xMug,1xPen, total discount Status` |
| `descriptions.txt` | one reason per line |
| `ratings.txt` | `product_id-client-rating` |
| `uncashed_checks.txt` | `amount code egn` |
| `transactions.txt` | an append-only log |

Products in carts and orders are stored by name and looked up in the
catalogue when a line is read.

## Example

```python
from pathlib import Path

from shopfront.cart import Cart
from shopfront.product import Product
from shopfront.storage import DataFiles, write_products
from shopfront.users import create_user
from shopfront.wallet import Wallet

files = DataFiles.at(Path("shopdata"))
files.items.parent.mkdir(exist_ok=True)
write_products([Product("Mug", 12.5, 10, "Ceramic mug", id=1)], files.items)

password = "password"
client = create_user("Ann", "egn-1", password, "Client")
client.files = files
client.wallet = Wallet("egn-1", balance=100.0, loyalty_points=200.0)
client.cart = Cart("Ann")

client.add_to_cart(1, 2)   # 2x Mug added to your cart
client.apply_discount()    # 200 points become 2.0 off
client.checkout()          # pays 23.0, appends a pending order to orders.txt
```

## What it does not do

The package provides the records and the operations on them, but no
interactive program: there is no command to start a shop, no login or
session handling, and no role checks around the operations. It also has no
object for the whole orders file — approving, rejecting or confirming orders,
handling refund requests and totals per client are left to the caller, who can
read and write order lines with `Order.from_line` and `Order.append_to`.