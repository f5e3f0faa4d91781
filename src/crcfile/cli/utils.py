"""Shared utilities for CLI commands."""

import re

from crcfile.byte_range import MAX_U64

_HEX_RE = re.compile(r'0x([0-9a-fA-F]+)')
_DEC_RE = re.compile(r'[0-9]+')


def parse_number(text: str, max_value: int = MAX_U64) -> int:
    """Parse a decimal or `0x`-prefixed hexadecimal number.

    Args:
        text: The number as given on the command line.
        max_value: The largest accepted value.

    Returns:
        The parsed value.

    Raises:
        ValueError: If the text is not a number or is out of range.
    """
    if match := _HEX_RE.fullmatch(text):
        value = int(match.group(1), 16)
    elif _DEC_RE.fullmatch(text):
        value = int(text, 10)
    else:
        raise ValueError(f"Invalid number: '{text}'")

    if value > max_value:
        raise ValueError(f"Number out of range: '{text}' (max {max_value:#x})")
    return value
