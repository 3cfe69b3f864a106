#!/usr/bin/env python3
import argparse
import logging

import Bitwise
from Bitwise.helpers import BYTE_MAX, BYTE_MIN, INT32_MAX, INT32_MIN

# This file provides a _basic_ command-line interface for the Bitwise package.
# The example_use.py file at the root of this project drives it.

logger = logging.getLogger(__name__)


def _parse_int(value, what):
    try:
        return int(value, 0)  # Automatically detects base (e.g., hex, binary)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid {what}: {value}")


def _ranged(value, what, lo, hi):
    ivalue = _parse_int(value, what)
    if lo <= ivalue <= hi:
        return ivalue
    raise argparse.ArgumentTypeError(
        f"{what.capitalize()} must be between {lo} and {hi} (inclusive), but got: {value}"
    )


def valid_byte(value):
    """
    Validates a byte in either the signed (-128..127) or unsigned (0..255) view.
    Accepts 0x/0b/0o prefixes.
    """
    return _ranged(value, "byte", BYTE_MIN, BYTE_MAX)


def valid_position(value):
    """Validates a bit position, 0 (leftmost) to 7 (rightmost)."""
    return _ranged(value, "bit position", 0, 7)


def valid_byte_index(value):
    """Validates a byte index, 0 (least significant) to 3."""
    return _ranged(value, "byte index", 0, 3)


def valid_int32(value):
    return _ranged(value, "32-bit value", INT32_MIN, INT32_MAX)


def parse_cli():
    """Parses commandline args (using argparse) for the Bitwise byte tool."""

    parser = argparse.ArgumentParser(
        description="Inspect and modify the bits of a single byte.\n"
        "Bit 0 is the leftmost (most significant) bit."
    )

    parser.add_argument(
        "-log",
        "--loglevel",
        default="info",
        choices=["notset", "debug", "info", "warning", "error", "critical"],
        help="Provide logging level. Example --loglevel debug, default=info",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Render a byte as binary.")
    show.add_argument("byte", type=valid_byte)

    # test/set/clear/flip take one position, or an inclusive range
    for name, help_text in (
        ("test", "Test whether a bit (or every bit in a range) is set."),
        ("set", "Set a bit or a range of bits."),
        ("clear", "Clear a bit or a range of bits."),
        ("flip", "Flip a bit or a range of bits."),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("byte", type=valid_byte)
        sub.add_argument("pos1", type=valid_position)
        sub.add_argument("pos2", type=valid_position, nargs="?", default=None)

    extract = commands.add_parser(
        "extract", help="Read the unsigned integer held in a range of bits."
    )
    extract.add_argument("byte", type=valid_byte)
    extract.add_argument("pos1", type=valid_position)
    extract.add_argument("pos2", type=valid_position)

    byte_of = commands.add_parser(
        "byte-of", help="Extract one byte (0 = least significant) of a 32-bit value."
    )
    byte_of.add_argument("value", type=valid_int32)
    byte_of.add_argument("index", type=valid_byte_index)

    return parser


def describe_byte(b):
    """Formats a byte as '<binary> (<signed>/<unsigned>, 0x<hex>)'."""
    unsigned = Bitwise.to_unsigned_byte(b)
    return (
        f"{Bitwise.get_byte_as_binary_string(b)} "
        f"({Bitwise.to_signed_byte(b)}/{unsigned}, 0x{unsigned:02X})"
    )


# Single position and range variants for each byte command
_BYTE_COMMANDS = {
    "test": (Bitwise.is_bit_set, Bitwise.are_bits_set),
    "set": (Bitwise.set_bit, Bitwise.set_bits),
    "clear": (Bitwise.clear_bit, Bitwise.clear_bits),
    "flip": (Bitwise.flip_bit, Bitwise.flip_bits),
}


def run(args):
    """Runs the selected command and returns the text to print."""
    logger.debug("Running: %s", args)

    if args.command == "show":
        return describe_byte(args.byte)

    if args.command == "extract":
        value = Bitwise.get_int_from_byte(args.byte, args.pos1, args.pos2)
        return f"{value}"

    if args.command == "byte-of":
        return describe_byte(Bitwise.get_byte_from_int(args.value, args.index))

    single, ranged = _BYTE_COMMANDS[args.command]
    if args.pos2 is None:
        result = single(args.byte, args.pos1)
    else:
        result = ranged(args.byte, args.pos1, args.pos2)

    if args.command == "test":
        return f"{result}"
    logger.info("%s: %s -> %s", args.command, describe_byte(args.byte), describe_byte(result))
    return describe_byte(result)


def main(argv=None):
    parser = parse_cli()
    args = parser.parse_args(argv)

    logging.basicConfig(
        # Set based on cli args
        level=args.loglevel.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    try:
        print(run(args))
    except Bitwise.InvalidArgument as e:
        parser.exit(2, f"{e}\n")


# This allows the cli to be called independently for testing purposes.
if __name__ == "__main__":
    main()
