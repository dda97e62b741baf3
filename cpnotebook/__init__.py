"""Algorithms and data structures for contest-style problems."""

__version__ = "0.1.0"