"""A red-black tree of unique integers, provided by the ``redblack.tree`` module."""

__version__ = "0.1.0"
__all__ = ["tree"]