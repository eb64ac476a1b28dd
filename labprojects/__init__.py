"""Sorting algorithms with a timing comparison, a console library manager and a console card game."""

__version__ = "0.1.0"