"""Per-location dairy delivery ledgers."""

__version__ = "0.1.0"
