"""The interactive shop: main menu, customer and seller sessions."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from shopsys.accounts import (
    is_email_unique,
    is_valid_email_format,
    save_user,
    validate_login,
)
from shopsys.catalog import Catalog, CatalogError
from shopsys.product import Product
from shopsys.users import Customer, Seller

USERS_FILE = "users.txt"
CUSTOMERS_FILE = "customers.txt"
SELLERS_FILE = "sellers.txt"

_MAIN_MENU = "\n===== MAIN MENU =====\n1. Login\n2. Register\n0. Exit\nChoice: "


class _Console:
    """Reads numbers, words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def word(self) -> str:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                break
            self._buffer = ""
            if not self._fill():
                raise EOFError("input ended")
        word, _, rest = stripped.partition(" ")
        head, newline, tail = word.partition("\n")
        if newline:
            self._buffer = newline + tail + (" " + rest if _ else "")
            word = head
        else:
            self._buffer = " " + rest if _ else ""
        head_parts = word.split()
        if len(head_parts) > 1:
            self._buffer = word[len(head_parts[0]):] + self._buffer
        return head_parts[0]

    def integer(self) -> int:
        try:
            return int(self.word())
        except ValueError:
            return 0

    def number(self) -> float:
        try:
            return float(self.word())
        except ValueError:
            return 0.0

    def ignore(self) -> None:
        if self._buffer or self._fill():
            self._buffer = self._buffer[1:]

    def line(self) -> str:
        parts: list[str] = []
        while True:
            index = self._buffer.find("\n")
            if index >= 0:
                parts.append(self._buffer[:index])
                self._buffer = self._buffer[index + 1:]
                return "".join(parts)
            parts.append(self._buffer)
            self._buffer = ""
            if not self._fill():
                if any(parts):
                    return "".join(parts)
                raise EOFError("input ended")


def _console(stdin: TextIO | _Console) -> _Console:
    return stdin if isinstance(stdin, _Console) else _Console(stdin)


def _show_cart(cart: list[Product], out: TextIO) -> None:
    if not cart:
        out.write("Cart is empty.\n")
        return
    out.write("\n===== YOUR CART =====\n")
    for item in cart:
        out.write(
            f"{item.name} x{item.quantity} @ ${item.price:g} = ${item.line_total():g}\n"
        )
    total = sum((item.line_total() for item in cart), 0.0)
    out.write(f"TOTAL: ${total:g}\n")


def _checkout(customer: Customer, catalog: Catalog, cart: list[Product], out: TextIO) -> None:
    if not cart:
        out.write("Cart is empty.\n")
        return
    for item in cart:
        if catalog.find_product(item.id) is None:
            continue
        try:
            catalog.reduce_quantity(item.id, item.quantity, item.seller_name)
        except CatalogError as exc:
            out.write(f"{exc}\n")
        else:
            out.write("Product quantities updated successfully.\n")
    catalog.save()
    catalog.generate_receipt(customer.email, cart, out)
    cart.clear()


def handle_customer_session(
    customer: Customer, catalog: Catalog, stdin: TextIO, out: TextIO
) -> None:
    """Run the customer menu until the customer logs out."""
    console = _console(stdin)
    cart: list[Product] = []
    while True:
        out.write(customer.menu_text())
        choice = console.integer()
        if choice == 0:
            return
        if choice == 1:
            try:
                catalog.list_products(out)
            except CatalogError as exc:
                out.write(f"{exc}\n")
        elif choice == 2:
            out.write("Enter product ID: ")
            product = catalog.find_product(console.integer())
            if product is None:
                out.write("Product not found.\n")
                continue
            out.write(f"Enter quantity (Available: {product.quantity}): ")
            quantity = console.integer()
            if 0 < quantity <= product.quantity:
                cart.append(
                    Product(product.id, product.name, product.price, quantity, product.seller_name)
                )
                out.write("Added to cart.\n")
            else:
                out.write("Invalid quantity.\n")
        elif choice == 3:
            _show_cart(cart, out)
        elif choice == 4:
            _checkout(customer, catalog, cart, out)
        elif choice == 5:
            out.write("Enter minimum price to filter (e.g., 200): ")
            min_price = console.number()
            out.write("Enter maxmum price to filter: ")
            max_price = console.number()
            catalog.list_products_in_range(min_price, max_price, out)


def handle_seller_session(
    seller: Seller, catalog: Catalog, stdin: TextIO, out: TextIO
) -> None:
    """Run the seller menu until the seller logs out."""
    console = _console(stdin)
    while True:
        out.write(seller.menu_text())
        choice = console.integer()
        if choice == 1:
            while True:
                out.write("Enter product ID: ")
                product_id = console.integer()
                if not catalog.is_duplicate_id(product_id):
                    break
                out.write("This product ID already exists. Please enter a unique ID.\n")
            out.write("Enter product name: ")
            name = console.word()
            out.write("Enter price: $")
            price = console.number()
            out.write("Enter quantity: ")
            quantity = console.integer()
            catalog.add_product(Product(product_id, name, price, quantity, seller.email))
        elif choice == 2:
            out.write("Enter product ID to update: ")
            product_id = console.integer()
            out.write("Enter new quantity: ")
            new_quantity = console.integer()
            catalog.update_quantity(product_id, new_quantity, seller.email)
        elif choice == 3:
            out.write("Enter product name to remove: ")
            catalog.remove_product(console.word(), seller.email)
        elif choice == 4:
            catalog.show_products_for_seller(seller.email, out)
        elif choice == 0:
            out.write("Logging out...\n")
            return
        else:
            out.write("Invalid choice, try again.\n")


def _register(directory: Path, console: _Console, out: TextIO, fields: dict[str, str]) -> None:
    email = fields["email"]
    if not is_valid_email_format(email):
        out.write("Invalid email format.\n")
        return
    if not is_email_unique(directory / USERS_FILE, email):
        out.write("Email already exists.\n")
        return
    out.write("Register as:\n1. Customer\n2. Seller\nChoice: ")
    role = console.integer()
    record = (
        fields["email"], fields["password"], fields["name"],
        fields["contact"], fields["address"],
    )
    save_user(directory / USERS_FILE, *record)
    save_user(directory / (CUSTOMERS_FILE if role == 1 else SELLERS_FILE), *record)
    out.write("Registration successful.\n")


def _login(
    directory: Path, catalog: Catalog, console: _Console, out: TextIO, fields: dict[str, str]
) -> None:
    email, password = fields["email"], fields["password"]
    if validate_login(directory / CUSTOMERS_FILE, email, password):
        customer = Customer(
            fields["name"], fields["contact"], fields["address"], email, password=password
        )
        handle_customer_session(customer, catalog, console, out)
    elif validate_login(directory / SELLERS_FILE, email, password):
        seller = Seller(
            fields["name"], fields["contact"], fields["address"], email,
            password=password, catalog=catalog,
        )
        handle_seller_session(seller, catalog, console, out)
    else:
        out.write("Invalid credentials.\n")


def _main_loop(directory: Path, console: _Console, out: TextIO) -> None:
    catalog = Catalog(directory)
    try:
        catalog.load()
    except CatalogError as exc:
        out.write(f"{exc}\n")

    while True:
        try:
            out.write(_MAIN_MENU)
            choice = console.integer()
            console.ignore()
            if choice == 0:
                break
            fields = {}
            for key, prompt in (
                ("name", "Name"), ("contact", "Contact"), ("address", "Address"),
                ("email", "Email"), ("password", "Password"),
            ):
                out.write(f"Enter {prompt}: ")
                fields[key] = console.line()
            if choice == 2:
                _register(directory, console, out, fields)
            else:
                _login(directory, catalog, console, out, fields)
        except EOFError:
            break

    catalog.save()
    out.write("Goodbye!\n")


def run(
    directory: str | os.PathLike[str] = ".",
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> None:
    """Run the shop on the data files in a directory."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    try:
        _main_loop(Path(directory), _Console(stdin), out)
    except (OSError, CatalogError) as exc:
        out.write(f"Exception: {exc}\n")


def main(argv: list[str] | None = None) -> int:
    """Start the shop in the current directory."""
    run(".", sys.stdin, sys.stdout)
    return 0