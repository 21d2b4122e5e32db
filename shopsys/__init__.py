"""A console shopping system: catalog, cart, customers, sellers and receipts."""

__version__ = "0.1.0"
__all__ = ["accounts", "cart", "catalog", "cli", "product", "users"]