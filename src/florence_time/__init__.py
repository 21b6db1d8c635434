"""Universal Florence Hexadecimal Mean Time."""

__version__ = "0.1.0"
