from enum import Enum


class RangeErrorKind(Enum):
    OPEN_FAILED = 'open_failed'
    RANGE_EXCEEDS_FILE = 'range_exceeds_file'
    READ_FAILED = 'read_failed'


class RangeError(Exception):
    """Base exception for all byte range errors."""
    kind: RangeErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OpenFailedError(RangeError):
    """Exception raised when the file cannot be opened for reading.

    The message holds the operating system's error text unchanged.
    """
    kind = RangeErrorKind.OPEN_FAILED

    def __init__(self, path: str, reason: str):
        super().__init__(f'{path}: {reason}')
        self.path = path
        self.reason = reason


class RangeExceedsFileError(RangeError):
    """Exception raised when offset + length goes past the end of the file."""
    kind = RangeErrorKind.RANGE_EXCEEDS_FILE

    def __init__(self, offset: int, length: int, total_size: int):
        super().__init__('offset + length > filesize')
        self.offset = offset
        self.length = length
        self.total_size = total_size


class ReadFailedError(RangeError):
    """Exception raised when seeking or reading fails after validation."""
    kind = RangeErrorKind.READ_FAILED

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ChecksumMismatchError(Exception):
    """Exception raised when a computed CRC differs from the expected one."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f'Invalid CRC: expected {expected:#x}, got {actual:#x}')
        self.expected = expected
        self.actual = actual
