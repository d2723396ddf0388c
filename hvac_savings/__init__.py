"""Heat pump savings calculator."""

__version__ = "1.0.0"
