import logging
import os
from abc import ABC, abstractmethod
from io import BufferedReader
from pathlib import Path

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    @abstractmethod
    def read(self, size: int | None = None) -> bytes:
        """Read the next bytes in the reader."""
        ...  # pragma: no cover

    @abstractmethod
    def seek_from_start(self, offset: int) -> int:
        """Seek from the start of the reader."""
        ...  # pragma: no cover

    @abstractmethod
    def tell(self) -> int:
        """Get the current position in the reader."""
        ...  # pragma: no cover

    @abstractmethod
    def size(self) -> int:
        """Get the total number of bytes behind the reader."""
        ...  # pragma: no cover

    @abstractmethod
    def close(self) -> None:
        """Close the reader and release all resources."""
        ...  # pragma: no cover

    def __enter__(self) -> 'BaseReader':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class FileReader(BaseReader):
    def __init__(self, file_path: Path | str):
        # Open the path as given; an empty path must not resolve to the cwd
        self._file: BufferedReader = open(file_path, 'rb')
        self._file_path = Path(file_path).absolute()
        logger.debug(f'Opened {self._file_path}')

    @property
    def path(self) -> Path:
        return self._file_path

    def read(self, size: int | None = None) -> bytes:
        return self._file.read(size)

    def seek_from_start(self, offset: int) -> int:
        return self._file.seek(offset, os.SEEK_SET)

    def tell(self) -> int:
        return self._file.tell()

    def size(self) -> int:
        # Size of the open descriptor, not of whatever the path points to now
        return os.fstat(self._file.fileno()).st_size

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            logger.debug(f'Closed {self._file_path}')

    @property
    def closed(self) -> bool:
        return self._file.closed


class BytesReader(BaseReader):
    def __init__(self, data: bytes):
        self._data = data
        self.position = 0
        self._length = len(data)

    def read(self, size: int | None = None) -> bytes:
        if size is None:
            result = self._data[self.position:]
            self.position = self._length
            return result
        result = self._data[self.position:self.position + size]
        self.position += len(result)
        return result

    def seek_from_start(self, offset: int) -> int:
        self.position = offset
        return self.position

    def tell(self) -> int:
        return self.position

    def size(self) -> int:
        return self._length

    def close(self) -> None:
        pass
