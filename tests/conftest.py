from pathlib import Path

import pytest

SAMPLE_CONTENT = b"A test\nActual content\nMore content\nAnother test"


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_bytes(SAMPLE_CONTENT)
    return path


@pytest.fixture
def sample_content() -> bytes:
    return SAMPLE_CONTENT
