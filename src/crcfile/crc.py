import zlib

from crcfile.error import ChecksumMismatchError


def compute_crc(data: bytes, start_value: int = 0) -> int:
    """Compute the CRC-32 (ISO-HDLC, as used by zlib) of the data.

    Passing the previous result as `start_value` continues the computation,
    so feeding a buffer in pieces gives the same value as feeding it whole.
    """
    return zlib.crc32(data, start_value)


def validate_crc(data: bytes, crc: int) -> bool:
    """Check the data against an expected CRC value."""
    return compute_crc(data) == crc


def assert_crc(data: bytes, crc: int) -> None:
    """Assert the data matches an expected CRC value.

    Raises:
        ChecksumMismatchError: If the computed CRC differs.
    """
    if (actual := compute_crc(data)) != crc:
        raise ChecksumMismatchError(crc, actual)


def format_crc(crc: int) -> str:
    return f'{crc:#x}'
