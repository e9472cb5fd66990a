"""Sort files from a watched directory into target directories by regex rules."""

__version__ = "0.1.0"
__all__ = ["__version__"]