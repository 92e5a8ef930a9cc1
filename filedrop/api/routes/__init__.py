"""API routes."""

from filedrop.api.routes import files

__all__ = ["files"]
