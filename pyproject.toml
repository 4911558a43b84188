[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopfront"
version = "0.1.0"
description = "Building blocks of a file-backed shop: products, carts, orders, wallets, checks, ratings and users, each stored one record per line in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "point-of-sale", "cart", "orders", "wallet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shopfront"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
