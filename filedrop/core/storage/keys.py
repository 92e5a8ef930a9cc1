"""Storage key generation and parsing.

A storage key has the form ``<epoch-millis>-<random>-<original name>``.
The first two fields are digits only, so everything after the second
``-`` is the original name, whatever characters it contains.
"""

import os
import random
import re
import time

KEY_PATTERN = re.compile(r"^(\d+)-(\d+)-(.+)$", re.DOTALL)

MAX_KEY_BYTES = 255
RANDOM_MAX = 10**9
DEFAULT_NAME = "file"


def sanitize_filename(filename: str) -> str:
    """Reduce a client supplied filename to a safe single path component."""
    # Browsers on Windows may send full paths
    filename = os.path.basename(filename.replace("\\", "/"))

    for char in ("/", "\\", "\0"):
        filename = filename.replace(char, "_")

    return filename or DEFAULT_NAME


def _truncate(name: str, max_bytes: int) -> str:
    """Trim the stem so the UTF-8 encoded name fits in max_bytes."""
    if len(name.encode("utf-8")) <= max_bytes:
        return name

    stem, ext = os.path.splitext(name)
    if len(ext.encode("utf-8")) >= max_bytes:
        ext = ""
    budget = max_bytes - len(ext.encode("utf-8"))
    stem = stem.encode("utf-8")[:budget].decode("utf-8", errors="ignore")
    return stem + ext


def generate_key(filename: str, now_ms: int | None = None) -> str:
    """
    Build a fresh storage key for an uploaded file.

    Args:
        filename: Filename as supplied by the client
        now_ms: Timestamp override in epoch milliseconds

    Returns:
        Storage key that embeds the sanitized original name
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    prefix = f"{now_ms}-{random.randint(0, RANDOM_MAX)}-"
    name = _truncate(sanitize_filename(filename), MAX_KEY_BYTES - len(prefix))
    return prefix + name


def original_name(key: str) -> str:
    """Recover the original filename from a storage key.

    Keys that were not generated by generate_key are returned unchanged.
    """
    match = KEY_PATTERN.match(key)
    if match is None:
        return key
    return match.group(3)


def is_valid_key(key: str) -> bool:
    """Whether key is a single path component that stays inside the storage directory."""
    if not key or key in (".", ".."):
        return False
    return not any(char in key for char in ("/", "\\", "\0"))
