"""API schemas."""

from filedrop.models.schemas.file import (
    MessageResponse,
    StoredFileRecord,
    UploadResponse,
)

__all__ = ["MessageResponse", "StoredFileRecord", "UploadResponse"]
