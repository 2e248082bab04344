"""CSV structure detection, column typing, metadata files and summary statistics for the terminal."""

__version__ = "0.1.0"
__all__ = ["__version__"]