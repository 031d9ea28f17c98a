"""Printf-style formatting with a small fixed set of conversions."""

__version__ = "0.1.0"
__all__ = ["convert", "printer"]