"""
Human-readable file size helpers.

Sizes use base-1024 units; values are rounded to two decimals with
trailing zeros dropped ("1 KB", "1.5 KB", "1.23 MB").
"""

import re
from typing import Optional

SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([A-Za-z]+)\s*$")


def format_file_size(num_bytes: int) -> str:
    """
    Format a byte count using the largest unit whose scaled value is >= 1.

    Args:
        num_bytes: Size in bytes.

    Returns:
        Formatted size, e.g. ``"1.5 KB"``.

    Raises:
        ValueError: If ``num_bytes`` is negative.
    """
    if num_bytes < 0:
        raise ValueError(f"File size cannot be negative: {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"

    exponent = 0
    while exponent < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (exponent + 1):
        exponent += 1

    value = f"{num_bytes / 1024 ** exponent:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[exponent]}"


def parse_file_size(text: str) -> Optional[int]:
    """
    Parse a human-readable size back into bytes.

    Args:
        text: Size string such as ``"1.5 GB"``.

    Returns:
        Size in bytes, or None if the string is not a recognised size.
    """
    match = _SIZE_PATTERN.match(text or "")
    if not match:
        return None

    value, unit = match.groups()
    units = {u.lower(): i for i, u in enumerate(SIZE_UNITS)}
    units["b"] = 0
    exponent = units.get(unit.lower())
    if exponent is None:
        return None
    return int(float(value) * 1024 ** exponent)
