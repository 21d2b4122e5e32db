"""Shop users: customers who buy and sellers who stock the catalog."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Iterator, TextIO

from shopsys.cart import Cart
from shopsys.catalog import (
    Catalog,
    CatalogError,
    InsufficientStockError,
    ProductNotFoundError,
)
from shopsys.product import Product

STOCK_FILE = "product.txt"

_CUSTOMER_MENU = (
    "\n===== CUSTOMER MENU =====\n"
    "1. View Products\n"
    "2. Add to Cart\n"
    "3. View Cart\n"
    "4. Checkout\n"
    "5. Set Price Filter (Min $200)\n"
    "0. Logout\n"
    "Choice: "
)

_SELLER_MENU = (
    "\n===== SELLER MENU =====\n"
    "1. Add Product\n"
    "2. Update Product\n"
    "3. Remove Product\n"
    "4. View My Products\n"
    "0. Logout\n"
    "Choice: "
)


def _parse_stock(text: str) -> Iterator[Product]:
    """Yield products from records of id, name, price and quantity."""
    tokens = iter(text.split())
    while True:
        fields = list(islice(tokens, 4))
        if len(fields) < 4:
            return
        try:
            yield Product(int(fields[0]), fields[1], float(fields[2]), int(fields[3]))
        except ValueError:
            return


@dataclass
class User(ABC):
    """Someone with an account in the shop."""

    name: str
    contact: str
    address: str
    email: str
    password: str = field(repr=False)

    @abstractmethod
    def menu_text(self) -> str:
        """Return the menu shown to this user."""


@dataclass
class Customer(User):
    """A user who buys products."""

    points: int = 0
    cart: Cart = field(default_factory=Cart, repr=False, compare=False)

    def menu_text(self) -> str:
        return _CUSTOMER_MENU

    def add_to_cart(self, product: Product) -> None:
        """Put a product in this customer's cart."""
        self.cart.add_item(product)

    def view_cart(self, out: TextIO) -> None:
        """Write the contents of this customer's cart."""
        self.cart.view(out)

    def buy_product(
        self,
        product_id: int,
        quantity: int,
        path: str | os.PathLike[str] = STOCK_FILE,
    ) -> Product:
        """Take stock from a product in a stock file and return the updated record.

        Raises ProductNotFoundError when no record has the id, and
        InsufficientStockError when none has enough stock.
        """
        stock_path = Path(path)
        try:
            text = stock_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError("Unable to open product file!") from exc

        records = list(_parse_stock(text))
        matches = [record for record in records if record.id == product_id]
        if not matches:
            raise ProductNotFoundError("Product not found.")

        bought: Product | None = None
        for record in matches:
            if record.quantity >= quantity:
                record.quantity -= quantity
                bought = bought or record
        if bought is None:
            raise InsufficientStockError("Insufficient stock.")

        with stock_path.open("w", encoding="utf-8") as fout:
            fout.writelines(
                f"{p.id} {p.name} {p.price:g} {p.quantity}\n" for p in records
            )
        return bought


@dataclass
class Seller(User):
    """A user who offers products through a catalog."""

    catalog: Catalog = field(repr=False, compare=False)

    def menu_text(self) -> str:
        return _SELLER_MENU

    def add_product(self, product_id: int, name: str, price: float, quantity: int) -> Product:
        """Offer a new product under this seller's e-mail and return it."""
        product = Product(product_id, name, price, quantity, self.email)
        self.catalog.add_product(product)
        return product

    def remove_product(self, name: str) -> bool:
        """Withdraw this seller's product by name; return whether one was removed."""
        return self.catalog.remove_product(name, self.email)

    def update_product(self, product_id: int, new_quantity: int) -> bool:
        """Set the stock of one of this seller's products; return whether it was found."""
        return self.catalog.update_quantity(product_id, new_quantity, self.email)