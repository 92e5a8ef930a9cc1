"""Error types raised by the storage layer and the API."""


class FileDropError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class StoredFileNotFound(FileDropError):
    """No stored file exists under the requested key."""

    status_code = 404
    message = "File not found"


class UploadValidationError(FileDropError):
    """The upload request carries no usable files."""

    status_code = 400
    message = "No files uploaded"


class PayloadTooLarge(FileDropError):
    """A file exceeds the per-file size ceiling."""

    status_code = 413
    message = "File too large"


class StorageIOError(FileDropError):
    """The filesystem refused a read, write or unlink."""

    status_code = 500
    message = "Storage error"
