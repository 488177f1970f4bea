"""Solutions to classic programming katas, one module per puzzle."""

__version__ = "0.1.0"