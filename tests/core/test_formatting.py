"""Tests for size formatting."""

import pytest

from filedrop.core.formatting import format_file_size


@pytest.mark.unit
class TestFormatFileSize:
    """Test cases for format_file_size()."""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 Bytes"),
            (1, "1 Bytes"),
            (10, "10 Bytes"),
            (1023, "1023 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1100, "1.07 KB"),
            (1024 * 1024, "1 MB"),
            (100 * 1024 * 1024, "100 MB"),
            (1024**3, "1 GB"),
            (int(2.25 * 1024**3), "2.25 GB"),
        ],
    )
    def test_format(self, size, expected):
        """Test formatting across units."""
        assert format_file_size(size) == expected

    def test_beyond_gigabytes_stays_in_gb(self):
        """Test that sizes over 1 TB are still reported in GB."""
        assert format_file_size(2 * 1024**4) == "2048 GB"
