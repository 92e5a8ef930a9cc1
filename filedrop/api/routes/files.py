"""File API routes."""

import logging
import mimetypes
from typing import BinaryIO, Iterator, List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask
from starlette.concurrency import run_in_threadpool

from filedrop.api.deps import get_file_store, get_settings
from filedrop.core.config import Settings
from filedrop.core.errors import PayloadTooLarge, UploadValidationError
from filedrop.core.storage import FileStore, original_name
from filedrop.models.schemas.file import MessageResponse, StoredFileRecord, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])

DOWNLOAD_CHUNK_SIZE = 64 * 1024


def content_disposition(filename: str) -> str:
    """Build an attachment Content-Disposition header value for filename."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


def _iter_file(stream: BinaryIO) -> Iterator[bytes]:
    with stream:
        while True:
            chunk = stream.read(DOWNLOAD_CHUNK_SIZE)
            if not chunk:
                break
            yield chunk


@router.get("/files", response_model=List[StoredFileRecord])
async def list_files(
    store: FileStore = Depends(get_file_store),
):
    """
    List every stored file.

    The order follows the storage backend and is not stable.
    """
    blobs = await run_in_threadpool(store.list)
    return [StoredFileRecord.from_blob(blob) for blob in blobs]


@router.post("/upload", response_model=UploadResponse)
async def upload_files(
    files: Optional[List[UploadFile]] = File(None),
    store: FileStore = Depends(get_file_store),
    app_settings: Settings = Depends(get_settings),
):
    """
    Upload one or more files in the multipart field ``files``.

    Files are written independently: an I/O failure on one file leaves the
    files written before it in place.
    """
    uploads = [upload for upload in files or [] if upload.filename]

    if not uploads:
        raise UploadValidationError("No files uploaded")

    if len(uploads) > app_settings.max_upload_files:
        raise UploadValidationError(
            f"Too many files: at most {app_settings.max_upload_files} per upload"
        )

    # Reject oversized parts before writing anything
    for upload in uploads:
        if upload.size is not None and upload.size > app_settings.max_file_size:
            logger.warning("Rejected %s: %d bytes over the limit", upload.filename, upload.size)
            raise PayloadTooLarge(
                f"File exceeds the {app_settings.max_file_size} byte limit: {upload.filename}"
            )

    records = []
    for upload in uploads:
        blob = await run_in_threadpool(
            store.put, upload.filename, upload.file, app_settings.max_file_size
        )
        records.append(StoredFileRecord.from_blob(blob))

    logger.info("Uploaded %d file(s)", len(records))

    return UploadResponse(message="Files uploaded successfully", files=records)


@router.delete("/files/{key}", response_model=MessageResponse)
async def delete_file(
    key: str,
    store: FileStore = Depends(get_file_store),
):
    """Delete a stored file."""
    await run_in_threadpool(store.delete, key)
    return MessageResponse(message="File deleted successfully")


@router.get("/download/{key}")
async def download_file(
    key: str,
    store: FileStore = Depends(get_file_store),
):
    """Download a stored file under its original name."""
    blob, stream = await run_in_threadpool(store.open, key)

    filename = original_name(key)
    media_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"

    return StreamingResponse(
        _iter_file(stream),
        media_type=media_type,
        headers={
            "Content-Disposition": content_disposition(filename),
            "Content-Length": str(blob.size),
        },
        background=BackgroundTask(stream.close),
    )
