"""Display helpers."""

import math

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_file_size(size: int) -> str:
    """
    Format a byte count for display.

    Uses a 1024 divisor and two-decimal rounding, dropping trailing zeros:
    10 -> "10 Bytes", 1536 -> "1.5 KB", 1048576 -> "1 MB".
    """
    if size <= 0:
        return "0 Bytes"

    index = min(int(math.log(size, 1024)), len(SIZE_UNITS) - 1)
    # log() can land just below an exact power of 1024
    if index + 1 < len(SIZE_UNITS) and size >= 1024 ** (index + 1):
        index += 1

    value = round(size / 1024**index, 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"
