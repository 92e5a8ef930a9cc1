"""filedrop - a small self-hosted file drop."""

__version__ = "0.1.0"
