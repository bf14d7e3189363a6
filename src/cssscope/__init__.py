"""cssscope: namespace CSS blocks under a class derived from their SCOPE marker."""

__version__ = "0.1.0"
