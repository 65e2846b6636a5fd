"""Small exercises over numbers, strings, lists and matrices, with printing walk-throughs."""

__version__ = "0.1.0"