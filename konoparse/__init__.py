"""Tokenizing, quote handling and variable expansion for a small shell, with string, line-reading and printf helpers."""

__version__ = "0.1.0"
__all__ = ["commands", "environ", "libstr", "linereader", "printf", "quoting", "tokens"]