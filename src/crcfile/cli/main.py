import argparse
import logging
from textwrap import dedent

from rich.console import Console
from rich.markup import escape

from crcfile import __version__
from crcfile.byte_range import DEFAULT_LENGTH, DEFAULT_OFFSET, RangeRequest
from crcfile.cli.utils import parse_number
from crcfile.crc import format_crc
from crcfile.error import ChecksumMismatchError, RangeError, RangeErrorKind
from crcfile.service import compute_checksum, verify_checksum

logger = logging.getLogger(__name__)

MAX_U32 = 0xFFFFFFFF

_ERROR_CONTEXT = {
    RangeErrorKind.OPEN_FAILED: "Could not open file",
    RangeErrorKind.RANGE_EXCEEDS_FILE: "Invalid range",
    RangeErrorKind.READ_FAILED: "Could not read file",
}


def _number(text: str) -> int:
    try:
        return parse_number(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _crc_value(text: str) -> int:
    try:
        return parse_number(text, max_value=MAX_U32)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crcfile",
        description=dedent("""
            Compute the CRC-32 (zlib/gzip/PNG variant) of a byte range of a file.

            OFFSET and LENGTH accept decimal (12345) or hexadecimal (0x3039)
            values. A LENGTH of 0 means "up to the end of the file".
        """),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", metavar="FILE", help="File to checksum.")
    parser.add_argument(
        "offset_arg",
        nargs="?",
        type=_number,
        metavar="OFFSET",
        help="Start of the range in bytes (same as --offset).",
    )
    parser.add_argument(
        "length_arg",
        nargs="?",
        type=_number,
        metavar="LENGTH",
        help="Number of bytes in the range (same as --length).",
    )
    parser.add_argument(
        "-o", "--offset",
        type=_number,
        help=f"Start of the range in bytes (default: {DEFAULT_OFFSET}).",
    )
    parser.add_argument(
        "-l", "--length",
        type=_number,
        help=f"Number of bytes in the range, 0 for the rest of the file (default: {DEFAULT_LENGTH}).",
    )
    parser.add_argument(
        "--expect",
        type=_crc_value,
        metavar="CRC",
        help="Expected checksum. Exit with an error if the range does not match.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log details about the file and the resolved range.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _pick(
    parser: argparse.ArgumentParser,
    name: str,
    positional: int | None,
    flag: int | None,
    default: int,
) -> int:
    if positional is not None and flag is not None:
        parser.error(f"{name} given both as an argument and as --{name}")
    if positional is not None:
        return positional
    if flag is not None:
        return flag
    return default


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.input is None:
        parser.print_usage()
        return 0

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    offset = _pick(parser, "offset", args.offset_arg, args.offset, DEFAULT_OFFSET)
    length = _pick(parser, "length", args.length_arg, args.length, DEFAULT_LENGTH)
    request = RangeRequest(args.input, offset=offset, length=length)
    logger.debug(f"Request: {request}")

    console = Console(stderr=True)
    try:
        if args.expect is None:
            crc = compute_checksum(request)
        else:
            crc = verify_checksum(request, args.expect)
    except RangeError as e:
        console.print(
            f"[bold red]Error:[/bold red] {_ERROR_CONTEXT[e.kind]}: {escape(e.message)}",
            soft_wrap=True,
            highlight=False,
        )
        return 1
    except ChecksumMismatchError as e:
        console.print(
            f"[bold red]Error:[/bold red] {escape(str(e))}",
            soft_wrap=True,
            highlight=False,
        )
        return 1

    print(format_crc(crc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
