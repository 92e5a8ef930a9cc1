"""File schemas for API responses."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from filedrop.core.file_types import FileType, classify
from filedrop.core.formatting import format_file_size
from filedrop.core.storage.base import StoredBlob
from filedrop.core.storage.keys import original_name


class StoredFileRecord(BaseModel):
    """Schema for one stored file, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255, description="Storage key")
    original_name: str = Field(..., min_length=1, description="Filename supplied by the uploader")
    size: str = Field(..., description="Human readable size")
    size_bytes: int = Field(..., ge=0)
    upload_date: datetime
    type: FileType
    path: str = Field(..., description="Public URL of the raw file")

    @classmethod
    def from_blob(cls, blob: StoredBlob) -> "StoredFileRecord":
        """Derive the record for a stored blob."""
        name = original_name(blob.key)
        return cls(
            name=blob.key,
            original_name=name,
            size=format_file_size(blob.size),
            size_bytes=blob.size,
            upload_date=blob.created_at,
            type=classify(name),
            path=f"/uploads/{blob.key}",
        )


class UploadResponse(BaseModel):
    """Schema for upload response."""

    message: str
    files: list[StoredFileRecord]


class MessageResponse(BaseModel):
    """Schema for a plain confirmation message."""

    message: str
