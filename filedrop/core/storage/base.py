"""Storage port for uploaded files."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO, List, Tuple


@dataclass(frozen=True)
class StoredBlob:
    """A stored file as seen by the storage backend."""

    key: str
    size: int
    created_at: datetime


class FileStore(ABC):
    """
    Key addressed blob storage.

    The request layer only depends on this interface; the local directory
    backend is one implementation.
    """

    @abstractmethod
    def list(self) -> List[StoredBlob]:
        """List every stored blob, in no particular order."""

    @abstractmethod
    def put(self, filename: str, content: BinaryIO, max_size: int | None = None) -> StoredBlob:
        """
        Store content under a freshly generated key.

        Args:
            filename: Original filename supplied by the client
            content: Readable binary stream
            max_size: Reject content longer than this many bytes

        Raises:
            PayloadTooLarge: content exceeds max_size, nothing is kept
            StorageIOError: the backend failed to write
        """

    @abstractmethod
    def get(self, key: str) -> StoredBlob:
        """Return metadata for key. Raises StoredFileNotFound when absent."""

    @abstractmethod
    def open(self, key: str) -> Tuple[StoredBlob, BinaryIO]:
        """
        Open key for binary reading.

        Returns:
            Metadata and an open stream taken from the same file handle;
            the caller closes the stream

        Raises:
            StoredFileNotFound: key is absent
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Raises StoredFileNotFound when absent."""
