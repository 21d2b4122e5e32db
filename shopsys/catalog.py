"""The product catalog, stored in a whitespace-separated text file."""

from __future__ import annotations

import os
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from shopsys.product import Product

PRODUCTS_FILE = "products.txt"
TEMP_FILE = "products_temp.txt"
ORDERS_FILE = "orders.txt"
DISCOUNT_THRESHOLD = 10000
DISCOUNT_RATE = 0.10
MIN_FILTER_PRICE = 2


class CatalogError(Exception):
    """Raised when the catalog cannot do what was asked."""


class InsufficientStockError(CatalogError):
    """Raised when more stock is requested than is available."""


class ProductNotFoundError(CatalogError):
    """Raised when no product matches the request."""


def _parse_records(text: str) -> Iterator[Product]:
    tokens = iter(text.split())
    while True:
        fields = list(islice(tokens, 5))
        if len(fields) < 5:
            return
        try:
            yield Product(int(fields[0]), fields[1], float(fields[2]), int(fields[3]), fields[4])
        except ValueError:
            return


def _format_record(product: Product) -> str:
    return (
        f"{product.id} {product.name} {product.price:g} "
        f"{product.quantity} {product.seller_name}\n"
    )


def _format_listing(product: Product) -> str:
    return (
        f"ID: {product.id}, Name: {product.name}, Price: {product.price:g}, "
        f"Quantity: {product.quantity}, Seller: {product.seller_name}\n"
    )


class Catalog:
    """Products held in memory and kept in a products file in a directory."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self._products: list[Product] = []

    @property
    def products_path(self) -> Path:
        return self.directory / PRODUCTS_FILE

    @property
    def orders_path(self) -> Path:
        return self.directory / ORDERS_FILE

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def add_product(self, product: Product) -> None:
        """Add a product and append it to the products file."""
        self._products.append(product)
        try:
            with self.products_path.open("a", encoding="utf-8") as fout:
                fout.write(_format_record(product))
        except OSError as exc:
            raise CatalogError(
                f"Could not open {PRODUCTS_FILE} to write product."
            ) from exc

    def remove_product(self, name: str, seller: str) -> bool:
        """Remove the first product with this name and seller; return whether one was."""
        for product in self._products:
            if product.name == name and product.seller_name == seller:
                self._products.remove(product)
                return True
        return False

    def is_duplicate_id(self, product_id: int) -> bool:
        """Return True if a product with this id is already held."""
        return any(product.id == product_id for product in self._products)

    def list_products(self, out: TextIO) -> None:
        """Write every product stored in the products file."""
        try:
            text = self.products_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Could not open {PRODUCTS_FILE} for reading.") from exc
        for product in _parse_records(text):
            out.write(_format_listing(product))

    def load(self) -> None:
        """Read the products file and add its products to those held."""
        try:
            text = self.products_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError("Error loading products file!") from exc
        self._products.extend(_parse_records(text))

    def save(self) -> None:
        """Write every held product to the products file, replacing it."""
        try:
            with self.products_path.open("w", encoding="utf-8") as fout:
                fout.writelines(_format_record(p) for p in self._products)
        except OSError as exc:
            raise CatalogError(f"Unable to open {PRODUCTS_FILE} for saving.") from exc

    def find_product(self, product_id: int) -> Product | None:
        """Return the first product with this id, or None."""
        return next((p for p in self._products if p.id == product_id), None)

    def update_quantity(self, product_id: int, new_quantity: int, seller_email: str) -> bool:
        """Set the stock of a seller's product and save; return whether it was found."""
        for product in self._products:
            if product.id == product_id and product.seller_name == seller_email:
                product.quantity = new_quantity
                self.save()
                return True
        return False

    def reduce_quantity(self, product_id: int, amount: int, seller_email: str) -> None:
        """Take stock away from a seller's product and rewrite the products file."""
        matches = [
            p for p in self._products
            if p.id == product_id and p.seller_name == seller_email
        ]
        if not matches:
            raise ProductNotFoundError("Product not found or update failed.")
        for product in matches:
            if product.quantity - amount < 0:
                raise InsufficientStockError("Not enough stock for this product.")
            product.quantity -= amount
        temp_path = self.directory / TEMP_FILE
        try:
            with temp_path.open("w", encoding="utf-8") as fout:
                fout.writelines(_format_record(p) for p in self._products)
            os.replace(temp_path, self.products_path)
        except OSError as exc:
            raise CatalogError("Error opening temporary file.") from exc

    def generate_receipt(self, customer_email: str, cart: Iterable[Product], out: TextIO) -> float:
        """Record an order in the orders file, write a receipt and return the grand total.

        Each ordered product's stock is set to the ordered quantity.
        """
        record = [f"Customer: {customer_email}\n", "Ordered Products:\n"]
        out.write("\n===== Receipt =====\n")
        out.write(f"Customer: {customer_email}\n")
        out.write("Products:\n")

        total = 0.0
        for item in cart:
            cost = item.line_total()
            total += cost
            summary = (
                f"ID: {item.id}, Name: {item.name}, Qty: {item.quantity}, "
                f"Price: {item.price:g}"
            )
            record.append(f"{summary}, Seller: {item.seller_name}, Total: {cost:g}\n")
            out.write(f"{summary}, Total: {cost:g}\n")
            self.update_quantity(item.id, item.quantity, item.seller_name)

        if total > DISCOUNT_THRESHOLD:
            discount = total * DISCOUNT_RATE
            total -= discount
            line = f"Discount Applied (10%): -{discount:g}\n"
            record.append(line)
            out.write(line)

        record.append(f"Grand Total: {total:g}\n\n")
        with self.orders_path.open("a", encoding="utf-8") as fout:
            fout.writelines(record)

        out.write(f"Grand Total: {total:g}\n")
        out.write(f"Receipt saved to {ORDERS_FILE}\n")
        return total

    def products_in_range(self, min_price: float, max_price: float) -> list[Product]:
        """Return products priced within the inclusive range."""
        if min_price < MIN_FILTER_PRICE:
            raise ValueError(f"Minimum price must be at least {MIN_FILTER_PRICE}.")
        return [p for p in self._products if min_price <= p.price <= max_price]

    def list_products_in_range(self, min_price: float, max_price: float, out: TextIO) -> None:
        """Write the products priced within the inclusive range."""
        try:
            found = self.products_in_range(min_price, max_price)
        except ValueError as exc:
            out.write(f"{exc}\n")
            return
        if not found:
            out.write("No products found in this price range.\n")
            return
        for product in found:
            out.write(_format_listing(product))

    def products_for_seller(self, seller_email: str) -> list[Product]:
        """Return the products offered by this seller."""
        return [p for p in self._products if p.seller_name == seller_email]

    def show_products_for_seller(self, seller_email: str, out: TextIO) -> None:
        """Write the products offered by this seller."""
        out.write(f"\n===== PRODUCTS FOR SELLER: {seller_email} =====\n")
        found = self.products_for_seller(seller_email)
        if not found:
            out.write("No products found for this seller.\n")
            return
        for product in found:
            out.write(
                f"ID: {product.id}, Name: {product.name}, Price: ${product.price:g}, "
                f"Quantity: {product.quantity}\n"
            )