"""Inverted indexes over a hash table and a Patricia tree, with TF-IDF search."""

__version__ = "0.1.0"