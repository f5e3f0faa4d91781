import logging

from crcfile.byte_range import RangeRequest, read_range
from crcfile.crc import compute_crc, format_crc
from crcfile.error import ChecksumMismatchError

logger = logging.getLogger(__name__)


def compute_checksum(request: RangeRequest) -> int:
    """Compute the CRC-32 of the byte range described by the request.

    Errors raised while reading the range are propagated unchanged.
    """
    data = read_range(request.path, request.offset, request.length)
    crc = compute_crc(data)
    logger.debug(f'CRC of {len(data)} bytes from {request.path}: {format_crc(crc)}')
    return crc


def verify_checksum(request: RangeRequest, expected: int) -> int:
    """Compute the checksum of the range and check it against `expected`.

    Raises:
        ChecksumMismatchError: If the computed checksum differs.
    """
    crc = compute_checksum(request)
    if crc != expected:
        raise ChecksumMismatchError(expected, crc)
    return crc
