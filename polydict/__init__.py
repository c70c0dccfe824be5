"""polydict - one query interface over many dictionary engines."""

__version__ = "0.1.0"
