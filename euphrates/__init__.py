"""Parser and value types for the Euphrates stack-based language."""

__version__ = "0.0.0"
__all__ = ["parser", "types"]