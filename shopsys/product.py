"""Products offered for sale."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """An item for sale, with its stock quantity and the seller offering it."""

    id: int
    name: str
    price: float
    quantity: int
    seller_name: str = ""

    def describe(self) -> str:
        """Return a one-line description of the product."""
        return (
            f"ID: {self.id}, Name: {self.name}, Price: ${self.price:g}, "
            f"Quantity: {self.quantity}, Seller: {self.seller_name}"
        )

    def line_total(self) -> float:
        """Return price multiplied by quantity."""
        return self.price * self.quantity