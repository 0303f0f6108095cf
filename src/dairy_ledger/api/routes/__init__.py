"""Route group exports."""

from . import customers, entries, health, locations, products, search

__all__ = ["locations", "customers", "products", "entries", "search", "health"]
