"""Inventory backend: staff authentication plus category and product catalog."""

__version__ = "1.0.0"
