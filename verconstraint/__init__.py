"""Version parsing, comparison, sorting and constraint checking."""

__version__ = "1.0.0"
__all__ = ["version", "constraint"]