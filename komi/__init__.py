"""Locations, tokens, syntax trees, a Pratt parser and value representation for the komi language."""

__version__ = "0.1.0"