"""
Command line entry point for HexGrid.
"""

import sys
import logging
import argparse
from typing import List, Optional

from .core.controller import HexController
from .errors import HexFormatError
from .utils.hex_utils import is_hex_digit, parse_hex_string, parse_offset, strip_whitespace
from .utils.highlight import DumpHighlighter, join_panes

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""

    parser = argparse.ArgumentParser(
        prog="hexgrid",
        description="HexGrid - hex dump, search and nibble patching of binary files"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="cmd")

    dump = sub.add_parser("dump", help="print the offset/hex/ascii grid of a file")
    dump.add_argument("file", help="File to dump")
    dump.add_argument("--no-color", action="store_true", help="Disable highlighting")
    dump.set_defaults(func=cmd_dump)

    find = sub.add_parser("find", help="print the offset of a hex byte pattern")
    find.add_argument("file", help="File to search")
    find.add_argument("pattern", help="hex like 'DE AD BE EF'")
    find.add_argument("-a", "--all", action="store_true", help="Print every match, one per line")
    find.set_defaults(func=cmd_find)

    patch = sub.add_parser("patch", help="type hex digits into a file starting at an offset")
    patch.add_argument("file", help="File to patch")
    patch.add_argument("offset", help="hexadecimal byte offset, e.g. 1A or 0x1A")
    patch.add_argument("digits", help="hex digits to type, e.g. 'CAFE'")
    patch.add_argument(
        "-b", "--bytes",
        action="store_true",
        help="Treat DIGITS as whole bytes, e.g. 'CA FE', instead of typed nibbles"
    )
    patch.add_argument("-o", "--output", help="Write to this file instead of FILE")
    patch.set_defaults(func=cmd_patch)

    return parser


def cmd_dump(args: argparse.Namespace) -> int:
    controller = HexController()
    controller.load(args.file)

    grid = controller.grid
    text = join_panes(grid.offset_text, grid.hex_text, grid.ascii_text)
    sys.stdout.write(DumpHighlighter().highlight(text, color=not args.no_color))
    return 0


def cmd_find(args: argparse.Namespace) -> int:
    controller = HexController()
    controller.load(args.file)

    if args.all:
        positions = controller.find_all(args.pattern)
    else:
        position = controller.find(args.pattern)
        positions = [] if position is None else [position]

    if not positions:
        print(controller.session.status_message, file=sys.stderr)
        return 1

    for position in positions:
        print(f"0x{position:08X}")
    return 0


def _type_digits(controller: HexController, offset: int, text: str) -> None:
    digits = strip_whitespace(text)
    bad = [c for c in digits if not is_hex_digit(c)]
    if bad:
        raise HexFormatError(f"invalid hex digit '{bad[0]}'")

    # the caret stops on the last low nibble, so extra digits would overwrite it
    capacity = (controller.session.get_size() - offset) * 2
    if len(digits) > capacity:
        logger.warning("end of file reached after %d of %d digits", capacity, len(digits))
        digits = digits[:capacity]

    for char in digits:
        controller.handle_key(char)


def cmd_patch(args: argparse.Namespace) -> int:
    controller = HexController()
    controller.load(args.file)

    try:
        offset = parse_offset(args.offset)
        data = parse_hex_string(args.digits) if args.bytes else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not controller.goto(offset):
        print(f"Error: offset 0x{offset:X} is outside the file", file=sys.stderr)
        return 2

    if data is not None:
        written = controller.write_bytes(offset, data)
        if written < len(data):
            logger.warning("end of file reached after %d of %d bytes", written, len(data))
    else:
        try:
            _type_digits(controller, offset, args.digits)
        except HexFormatError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    controller.save(args.output)
    print(controller.session.status_message)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
