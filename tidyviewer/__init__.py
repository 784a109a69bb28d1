"""Pretty printing of string tables with type-aware column formatting."""

__version__ = "0.1.7"
__all__ = ["datatype", "sigfig", "table"]