"""Products, carts, orders, wallets, checks, ratings and users of a shop stored in plain text files."""

__version__ = "0.1.0"