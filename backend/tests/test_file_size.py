"""
Tests for human-readable file size helpers.
"""

import pytest

from lineage_tracker.utils.file_size import format_file_size, parse_file_size


class TestFormatFileSize:
    """Tests for format_file_size."""

    @pytest.mark.parametrize(
        "num_bytes,expected",
        [
            (0, "0 Bytes"),
            (1, "1 Bytes"),
            (1023, "1023 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1024 * 1024, "1 MB"),
            (1073741824, "1 GB"),
            (1024 ** 4, "1 TB"),
            (1234567, "1.18 MB"),
        ],
    )
    def test_format(self, num_bytes: int, expected: str):
        """Test formatting across units."""
        assert format_file_size(num_bytes) == expected

    def test_largest_unit_is_terabytes(self):
        """Test that sizes beyond TB stay in TB."""
        assert format_file_size(2048 * 1024 ** 4) == "2048 TB"

    def test_negative_rejected(self):
        """Test that negative sizes raise."""
        with pytest.raises(ValueError):
            format_file_size(-1)


class TestParseFileSize:
    """Tests for parse_file_size."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0 Bytes", 0),
            ("1 KB", 1024),
            ("1.5 KB", 1536),
            ("2 gb", 2 * 1024 ** 3),
            ("512MB", 512 * 1024 ** 2),
        ],
    )
    def test_parse(self, text: str, expected: int):
        """Test parsing recognised sizes."""
        assert parse_file_size(text) == expected

    @pytest.mark.parametrize("text", ["", "large", "1.5 XB", "GB 1"])
    def test_parse_unrecognised(self, text: str):
        """Test that unrecognised strings return None."""
        assert parse_file_size(text) is None
