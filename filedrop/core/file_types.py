"""Classification of stored files by extension."""

import enum
import os


class FileType(str, enum.Enum):
    """Coarse file category shown in the catalog."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    CODE = "code"
    ARCHIVE = "archive"
    OTHER = "other"


EXTENSION_TYPES: dict[str, FileType] = {
    # Images
    "jpg": FileType.IMAGE,
    "jpeg": FileType.IMAGE,
    "png": FileType.IMAGE,
    "gif": FileType.IMAGE,
    "webp": FileType.IMAGE,
    "svg": FileType.IMAGE,
    "bmp": FileType.IMAGE,
    # Videos
    "mp4": FileType.VIDEO,
    "avi": FileType.VIDEO,
    "mov": FileType.VIDEO,
    "mkv": FileType.VIDEO,
    "webm": FileType.VIDEO,
    "wmv": FileType.VIDEO,
    # Audio
    "mp3": FileType.AUDIO,
    "wav": FileType.AUDIO,
    "ogg": FileType.AUDIO,
    "m4a": FileType.AUDIO,
    "flac": FileType.AUDIO,
    # Documents, spreadsheets, presentations
    "pdf": FileType.DOCUMENT,
    "doc": FileType.DOCUMENT,
    "docx": FileType.DOCUMENT,
    "txt": FileType.DOCUMENT,
    "rtf": FileType.DOCUMENT,
    "odt": FileType.DOCUMENT,
    "xls": FileType.DOCUMENT,
    "xlsx": FileType.DOCUMENT,
    "csv": FileType.DOCUMENT,
    "ppt": FileType.DOCUMENT,
    "pptx": FileType.DOCUMENT,
    # Code
    "js": FileType.CODE,
    "html": FileType.CODE,
    "css": FileType.CODE,
    "py": FileType.CODE,
    "java": FileType.CODE,
    "cpp": FileType.CODE,
    "c": FileType.CODE,
    "php": FileType.CODE,
    "json": FileType.CODE,
    "xml": FileType.CODE,
    # Archives
    "zip": FileType.ARCHIVE,
    "rar": FileType.ARCHIVE,
    "7z": FileType.ARCHIVE,
    "tar": FileType.ARCHIVE,
    "gz": FileType.ARCHIVE,
    # Executables
    "exe": FileType.OTHER,
    "msi": FileType.OTHER,
    "apk": FileType.OTHER,
}


def classify(filename: str) -> FileType:
    """Return the file type for a filename, OTHER when the extension is unknown."""
    ext = os.path.splitext(filename)[1].lstrip(".").lower()
    return EXTENSION_TYPES.get(ext, FileType.OTHER)
