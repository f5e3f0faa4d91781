"""Reading a validated byte range out of a file."""

import logging
from dataclasses import dataclass
from pathlib import Path

from crcfile.error import OpenFailedError, RangeExceedsFileError, ReadFailedError
from crcfile.io.reader import BaseReader, FileReader

logger = logging.getLogger(__name__)

DEFAULT_OFFSET = 0
DEFAULT_LENGTH = 0  # Zero means "to the end of the file"

MAX_U64 = 2**64 - 1


@dataclass(frozen=True, slots=True)
class RangeRequest:
    path: Path | str
    offset: int = DEFAULT_OFFSET
    length: int = DEFAULT_LENGTH

    def __post_init__(self) -> None:
        for name in ('offset', 'length'):
            value = getattr(self, name)
            if not 0 <= value <= MAX_U64:
                raise ValueError(f'{name} must be between 0 and {MAX_U64:#x}, got {value}')


@dataclass(frozen=True, slots=True)
class FileExtent:
    total_size: int


@dataclass(frozen=True, slots=True)
class ByteRange:
    start: int
    count: int

    @property
    def end(self) -> int:
        return self.start + self.count


def resolve_range(offset: int, length: int, extent: FileExtent) -> ByteRange:
    """Validate a requested range against the file extent and resolve it.

    The bound check uses the length exactly as requested, before a zero length
    is expanded to "rest of the file".

    Raises:
        RangeExceedsFileError: If offset + length is past the end of the file.
    """
    if offset + length > extent.total_size:
        raise RangeExceedsFileError(offset, length, extent.total_size)
    count = extent.total_size - offset if length == 0 else length
    return ByteRange(start=offset, count=count)


def read_reader_range(reader: BaseReader, offset: int, length: int) -> bytes:
    """Read the requested range from an already opened reader.

    Raises:
        RangeExceedsFileError: If the range does not fit in the reader.
        ReadFailedError: If seeking or reading fails, or returns too few bytes.
    """
    extent = FileExtent(total_size=reader.size())
    byte_range = resolve_range(offset, length, extent)
    logger.debug(
        f'Resolved range [{byte_range.start}, {byte_range.end}) '
        f'of {extent.total_size} bytes'
    )

    try:
        reader.seek_from_start(byte_range.start)
        data = reader.read(byte_range.count)
    except OSError as e:
        raise ReadFailedError(e.strerror or str(e)) from e

    if len(data) != byte_range.count:
        raise ReadFailedError(
            f'short read: expected {byte_range.count} bytes, got {len(data)}'
        )
    return data


def read_range(path: Path | str, offset: int, length: int) -> bytes:
    """Read `length` bytes at `offset` from a file (length 0 reads to the end).

    Raises:
        OpenFailedError: If the file cannot be opened.
        RangeExceedsFileError: If offset + length is past the end of the file.
        ReadFailedError: If seeking or reading fails.
    """
    try:
        reader = FileReader(path)
    except (OSError, ValueError) as e:
        raise OpenFailedError(str(path), getattr(e, 'strerror', None) or str(e)) from e

    with reader:
        return read_reader_range(reader, offset, length)
