"""Classic array, string, linked-list, tree and cache algorithms."""

__version__ = "0.1.0"