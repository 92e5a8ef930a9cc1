"""Local directory backend for the file store."""

import logging
import os
import stat as stat_module
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, List, Tuple

from filedrop.core.errors import PayloadTooLarge, StorageIOError, StoredFileNotFound
from filedrop.core.storage.base import FileStore, StoredBlob
from filedrop.core.storage.keys import generate_key, is_valid_key

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _created_at(stat: os.stat_result) -> datetime:
    # st_birthtime is missing on most Linux filesystems
    timestamp = getattr(stat, "st_birthtime", None) or stat.st_ctime
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class LocalFileStore(FileStore):
    """Store files as flat entries of a single directory."""

    def __init__(self, base_path: str | Path = "./uploads"):
        """
        Initialize the store, creating the directory if needed.

        Args:
            base_path: Directory holding the uploaded files
        """
        self.base_path = Path(base_path)
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Unable to create storage directory: {e}") from e

    def _path_for(self, key: str) -> Path:
        """Resolve key to a path inside the directory, or raise StoredFileNotFound."""
        if not is_valid_key(key):
            raise StoredFileNotFound()
        path = self.base_path / key
        if not path.is_file():
            raise StoredFileNotFound()
        return path

    def list(self) -> List[StoredBlob]:
        blobs = []
        try:
            entries = list(os.scandir(self.base_path))
        except OSError as e:
            logger.error("Unable to read storage directory %s", self.base_path, exc_info=True)
            raise StorageIOError("Unable to read files") from e

        for entry in entries:
            try:
                entry.name.encode("utf-8")
            except UnicodeEncodeError:
                # Undecodable bytes in a name dropped in from outside
                logger.warning("Skipping entry with a non UTF-8 name: %r", entry.name)
                continue

            try:
                if not entry.is_file():
                    continue
                stat = entry.stat()
            except FileNotFoundError:
                # Deleted between scandir() and stat()
                continue
            except OSError as e:
                raise StorageIOError("Unable to read files") from e

            blobs.append(StoredBlob(key=entry.name, size=stat.st_size, created_at=_created_at(stat)))

        return blobs

    def put(self, filename: str, content: BinaryIO, max_size: int | None = None) -> StoredBlob:
        key = generate_key(filename)
        file_path = self.base_path / key
        size = 0

        try:
            # "x" refuses to overwrite on the unlikely event of a key collision
            with open(file_path, "xb") as f:
                while True:
                    chunk = content.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if max_size is not None and size > max_size:
                        raise PayloadTooLarge(f"File exceeds the {max_size} byte limit: {filename}")
                    f.write(chunk)
            stat = file_path.stat()
        except PayloadTooLarge:
            self._discard(file_path)
            raise
        except FileExistsError as e:
            raise StorageIOError(f"Storage key collision: {key}") from e
        except OSError as e:
            logger.error("Failed to store %s as %s", filename, key, exc_info=True)
            self._discard(file_path)
            raise StorageIOError(f"Failed to store file: {filename}") from e

        logger.info("Stored %s as %s (%d bytes)", filename, key, size)
        return StoredBlob(key=key, size=stat.st_size, created_at=_created_at(stat))

    def get(self, key: str) -> StoredBlob:
        path = self._path_for(key)
        try:
            stat = path.stat()
        except FileNotFoundError as e:
            raise StoredFileNotFound() from e
        except OSError as e:
            raise StorageIOError(f"Unable to read file: {key}") from e
        return StoredBlob(key=key, size=stat.st_size, created_at=_created_at(stat))

    def open(self, key: str) -> Tuple[StoredBlob, BinaryIO]:
        if not is_valid_key(key):
            raise StoredFileNotFound()

        try:
            stream = open(self.base_path / key, "rb")
        except (FileNotFoundError, IsADirectoryError) as e:
            raise StoredFileNotFound() from e
        except OSError as e:
            raise StorageIOError(f"Unable to read file: {key}") from e

        try:
            stat = os.fstat(stream.fileno())
        except OSError as e:
            stream.close()
            raise StorageIOError(f"Unable to read file: {key}") from e

        if not stat_module.S_ISREG(stat.st_mode):
            stream.close()
            raise StoredFileNotFound()

        return StoredBlob(key=key, size=stat.st_size, created_at=_created_at(stat)), stream

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise StoredFileNotFound() from e
        except OSError as e:
            logger.error("Failed to delete %s", key, exc_info=True)
            raise StorageIOError("Failed to delete file") from e
        logger.info("Deleted %s", key)

    def _discard(self, file_path: Path) -> None:
        """Remove a partially written file."""
        try:
            file_path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove partial file %s", file_path, exc_info=True)
