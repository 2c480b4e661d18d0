"""Ingredient parsing, normalization and shopping-list consolidation."""

__version__ = "0.1.0"
