"""File storage."""

from filedrop.core.storage.base import FileStore, StoredBlob
from filedrop.core.storage.keys import generate_key, original_name
from filedrop.core.storage.local_storage import LocalFileStore

__all__ = [
    "FileStore",
    "StoredBlob",
    "LocalFileStore",
    "generate_key",
    "original_name",
]
