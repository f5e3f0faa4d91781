from importlib.metadata import version

__version__ = version("crcfile")

from .byte_range import ByteRange, FileExtent, RangeRequest, read_range
from .crc import compute_crc, format_crc
from .error import (
    ChecksumMismatchError,
    OpenFailedError,
    RangeError,
    RangeErrorKind,
    RangeExceedsFileError,
    ReadFailedError
)
from .service import compute_checksum, verify_checksum

__all__ = [
    'ByteRange',
    'ChecksumMismatchError',
    'FileExtent',
    'OpenFailedError',
    'RangeError',
    'RangeErrorKind',
    'RangeExceedsFileError',
    'RangeRequest',
    'ReadFailedError',
    'compute_checksum',
    'compute_crc',
    'format_crc',
    'read_range',
    'verify_checksum',
    '__version__',
]
