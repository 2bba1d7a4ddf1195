"""Integer exercises, printable text patterns and a small command line front end."""

__version__ = "0.1.0"
__all__ = ["arith", "patterns", "cli"]