"""Search files for literal text or regular expressions, grep-style."""

__version__ = "1.0.0"
__all__ = ["__version__"]