import logging
from pathlib import Path

import pytest

from crcfile.cli.main import main


def test_cli_positional_range(sample_file: Path, capsys) -> None:
    """Test offset and length given as positional arguments."""
    assert main([str(sample_file), "0x0", "10"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "0x672ec9d1"
    assert captured.err == ""


def test_cli_flag_range(sample_file: Path, capsys) -> None:
    """Test offset and length given as flags."""
    assert main(["--offset", "0", "--length", "0xa", str(sample_file)]) == 0
    assert capsys.readouterr().out.strip() == "0x672ec9d1"


def test_cli_short_flags(sample_file: Path, capsys) -> None:
    """Test the short offset and length flags."""
    assert main([str(sample_file), "-o", "0", "-l", "10"]) == 0
    assert capsys.readouterr().out.strip() == "0x672ec9d1"


def test_cli_whole_file_by_default(sample_file: Path, capsys) -> None:
    """Test that the whole file is used by default."""
    assert main([str(sample_file)]) == 0
    assert capsys.readouterr().out.strip() == "0xfcd8a8f2"


def test_cli_offset_at_end_prints_zero(sample_file: Path, sample_content: bytes, capsys) -> None:
    """Test the output for an empty range at the end of the file."""
    assert main([str(sample_file), str(len(sample_content)), "0"]) == 0
    assert capsys.readouterr().out.strip() == "0x0"


def test_cli_over_size(sample_file: Path, capsys) -> None:
    """Test a range longer than the file."""
    assert main([str(sample_file), "0x0", "0x1000"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "offset + length > filesize" in captured.err


def test_cli_could_not_open_file(tmp_path: Path, capsys) -> None:
    """Test a missing file."""
    assert main([str(tmp_path / "file_not_exists.txt"), "0x0", "0x1000"]) == 1
    captured = capsys.readouterr()
    assert "Could not open file" in captured.err
    assert "No such file or directory" in captured.err


def test_cli_empty_path(capsys) -> None:
    """Test that an empty path reports the OS error for that path."""
    assert main(["", "0", "0"]) == 1
    captured = capsys.readouterr()
    assert "No such file or directory" in captured.err
    assert "Is a directory" not in captured.err


def test_cli_missing_file_prints_usage(capsys) -> None:
    """Test that running without a file prints usage."""
    assert main([]) == 0
    assert "usage: crcfile" in capsys.readouterr().out


def test_cli_help(capsys) -> None:
    """Test the help output."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0
    assert "CRC-32" in capsys.readouterr().out


def test_cli_version(capsys) -> None:
    """Test the version output."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("crcfile ")


def test_cli_invalid_number(sample_file: Path, capsys) -> None:
    """Test a malformed number."""
    with pytest.raises(SystemExit) as exc_info:
        main([str(sample_file), "0x12345g", "10"])
    assert exc_info.value.code == 2
    assert "Invalid number" in capsys.readouterr().err


def test_cli_offset_given_twice(sample_file: Path, capsys) -> None:
    """Test giving the offset both positionally and as a flag."""
    with pytest.raises(SystemExit) as exc_info:
        main([str(sample_file), "0", "--offset", "1"])
    assert exc_info.value.code == 2
    assert "offset given both" in capsys.readouterr().err


def test_cli_expect_match(sample_file: Path, capsys) -> None:
    """Test a matching expected checksum."""
    assert main([str(sample_file), "0", "10", "--expect", "0x672ec9d1"]) == 0
    assert capsys.readouterr().out.strip() == "0x672ec9d1"


def test_cli_expect_mismatch(sample_file: Path, capsys) -> None:
    """Test a mismatching expected checksum."""
    assert main([str(sample_file), "0", "10", "--expect", "0xdeadbeef"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "expected 0xdeadbeef, got 0x672ec9d1" in captured.err


def test_cli_expect_rejects_values_over_32_bits(sample_file: Path, capsys) -> None:
    """Test that expected checksums must fit in 32 bits."""
    with pytest.raises(SystemExit) as exc_info:
        main([str(sample_file), "--expect", "0x100000000"])
    assert exc_info.value.code == 2


def test_cli_verbose_logs_range(sample_file: Path, caplog, capsys) -> None:
    """Test that verbose mode logs the resolved range."""
    caplog.set_level(logging.DEBUG, logger="crcfile")
    assert main(["-v", str(sample_file), "0", "10"]) == 0
    assert "Resolved range [0, 10)" in caplog.text
