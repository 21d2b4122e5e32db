"""A shopping cart with an interactive checkout."""

from __future__ import annotations

import re
from typing import Iterator, TextIO

from shopsys.product import Product

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WORD = re.compile(r"\S+")


class _InputReader:
    """Reads whitespace-separated words, characters and lines from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def _skip_space(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            self._buffer = ""
            if not self._fill():
                raise EOFError("input ended")

    def word(self) -> str:
        self._skip_space()
        match = _WORD.match(self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group()

    def char(self) -> str:
        self._skip_space()
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def ignore(self) -> None:
        if self._buffer or self._fill():
            self._buffer = self._buffer[1:]

    def ignore_line(self) -> None:
        while True:
            index = self._buffer.find("\n")
            if index >= 0:
                self._buffer = self._buffer[index + 1:]
                return
            self._buffer = ""
            if not self._fill():
                return

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


def _read_amount(reader: _InputReader, out: TextIO) -> float:
    """Read a non-negative amount, asking again until one is given."""
    while True:
        text = reader.word()
        if _NUMBER.fullmatch(text):
            value = float(text)
            if value >= 0:
                return value
        out.write("Invalid input. Enter a valid amount: ")
        reader.ignore_line()


class Cart:
    """An ordered collection of products a customer intends to buy."""

    def __init__(self) -> None:
        self._items: list[Product] = []

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, product: Product) -> None:
        """Append a product to the cart."""
        self._items.append(product)

    def view(self, out: TextIO) -> None:
        """Write every item in the cart, or a note that it is empty."""
        if not self._items:
            out.write("Cart is empty.\n")
            return
        for item in self._items:
            out.write(item.describe() + "\n")

    def total(self) -> float:
        """Return the sum of price times quantity over all items."""
        return sum((item.line_total() for item in self._items), 0.0)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def remove_item(self, name: str) -> Product:
        """Remove and return the first item with this name; raise KeyError if none."""
        for item in self._items:
            if item.name == name:
                self._items.remove(item)
                return item
        raise KeyError(name)

    def checkout(self, stdin: TextIO, out: TextIO) -> bool:
        """Take payment interactively; return True when paid, False when cancelled.

        Raises EOFError if the input ends before checkout is finished.
        """
        reader = _InputReader(stdin)
        total = self.total()
        out.write(f"\nCart Total: Rs. {total:g}\n")
        out.write("Enter payment amount (Rs.): ")
        payment = _read_amount(reader, out)

        while payment < total:
            out.write("Sorry, payment is less than total bill.\n")
            out.write("Do you want to remove an item from the cart? (y/n): ")
            choice = reader.char()
            if choice not in ("y", "Y"):
                out.write("Checkout cancelled.\n")
                return False
            out.write("Enter product name to remove: ")
            reader.ignore()
            name = reader.line()
            try:
                self.remove_item(name)
            except KeyError:
                out.write("Item not found in cart.\n")
            else:
                out.write(f"{name} removed from cart.\n")
            total = self.total()
            out.write(f"\nUpdated Cart Total: Rs. {total:g}\n")
            out.write("Enter new payment amount: ")
            payment = _read_amount(reader, out)

        out.write("Payment successful. Thank you for shopping!\n")
        self.clear()
        return True