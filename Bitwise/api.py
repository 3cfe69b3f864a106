#!/usr/bin/env python3

import logging

from .errors import InvalidArgument
from .helpers import (
    BYTE_MASK,
    INT32_MASK,
    POS_MAX,
    POS_MIN,
    check_byte,
    check_byte_index,
    check_int32,
    check_position,
    check_range,
    clear_bit as _clear_field_bit,
    flip_bit as _flip_field_bit,
    get_bit,
    get_bits,
    normalize,
    set_bit as _set_field_bit,
    to_signed_byte,
)

logger = logging.getLogger(__name__)

ALL_BITS_SET = 0xFF


# --- Masks --- #
def get_bit_mask(pos: int) -> int:
    """
    Returns the byte with only the bit at ``pos`` set.

    Position 0 maps to 0x80 and position 7 maps to 0x01.
    """
    check_position(pos, "get_bit_mask")
    return 1 << normalize(pos)


def get_clear_mask(pos: int) -> int:
    """Returns the byte with every bit set except the one at ``pos``."""
    check_position(pos, "get_clear_mask")
    return ~(1 << normalize(pos)) & BYTE_MASK


# --- Testers --- #
def is_bit_set(b: int, pos: int) -> bool:
    """
    Returns whether the bit at ``pos`` is set.

    Args:
        b: The byte to check (-128..255).
        pos: The bit position, 0 (leftmost) to 7 (rightmost).

    Returns:
        True if the bit is 1.

    Raises:
        InvalidArgument: ``pos`` is outside 0..7.
    """
    check_byte(b, "is_bit_set")
    check_position(pos, "is_bit_set")
    if b == 0:
        return False
    return bool(get_bit(b & BYTE_MASK, normalize(pos)))


def are_all_bits_set(b: int) -> bool:
    """Returns whether every bit of the byte is set (-1 signed, 255 unsigned)."""
    check_byte(b, "are_all_bits_set")
    return (b & BYTE_MASK) == ALL_BITS_SET


def are_bits_set(b: int, pos1: int, pos2: int) -> bool:
    """
    Returns whether every bit from ``pos1`` to ``pos2`` (inclusive) is set.

    Raises:
        InvalidArgument: Either position is outside 0..7 or ``pos1 > pos2``.
    """
    check_byte(b, "are_bits_set")
    positions = check_range(pos1, pos2, "are_bits_set")
    if b == 0:
        return False
    return all(is_bit_set(b, pos) for pos in positions)


# --- Setters --- #
def set_bit(b: int, pos: int) -> int:
    """Returns ``b`` with the bit at ``pos`` set to 1, as a signed byte."""
    check_byte(b, "set_bit")
    check_position(pos, "set_bit")
    if are_all_bits_set(b) or is_bit_set(b, pos):
        return to_signed_byte(b)
    return to_signed_byte(_set_field_bit(b & BYTE_MASK, normalize(pos)))


def set_bits(b: int, pos1: int, pos2: int) -> int:
    """Returns ``b`` with every bit from ``pos1`` to ``pos2`` (inclusive) set to 1."""
    check_byte(b, "set_bits")
    positions = check_range(pos1, pos2, "set_bits")
    if are_all_bits_set(b):
        return to_signed_byte(b)
    result = b
    for pos in positions:
        result = set_bit(result, pos)
    return to_signed_byte(result)


def clear_bit(b: int, pos: int) -> int:
    """Returns ``b`` with the bit at ``pos`` cleared to 0, as a signed byte."""
    check_byte(b, "clear_bit")
    check_position(pos, "clear_bit")
    if not is_bit_set(b, pos):
        return to_signed_byte(b)
    return to_signed_byte(_clear_field_bit(b & BYTE_MASK, normalize(pos)))


def clear_bits(b: int, pos1: int, pos2: int) -> int:
    """Returns ``b`` with every bit from ``pos1`` to ``pos2`` (inclusive) cleared to 0."""
    check_byte(b, "clear_bits")
    positions = check_range(pos1, pos2, "clear_bits")
    if b == 0:
        return 0
    result = b
    for pos in positions:
        result = clear_bit(result, pos)
    return to_signed_byte(result)


def flip_bit(b: int, pos: int) -> int:
    """
    Returns ``b`` with the bit at ``pos`` inverted, as a signed byte.

    Flipping the same bit twice gives back the original byte.
    """
    check_byte(b, "flip_bit")
    check_position(pos, "flip_bit")
    return to_signed_byte(_flip_field_bit(b & BYTE_MASK, normalize(pos)))


def flip_bits(b: int, pos1: int, pos2: int) -> int:
    """Returns ``b`` with every bit from ``pos1`` to ``pos2`` (inclusive) inverted."""
    check_byte(b, "flip_bits")
    positions = check_range(pos1, pos2, "flip_bits")
    result = b
    for pos in positions:
        result = flip_bit(result, pos)
    return to_signed_byte(result)


# --- Extraction --- #
def get_int_from_byte(b: int, pos1: int, pos2: int) -> int:
    """
    Returns the unsigned integer held in the bits from ``pos1`` to ``pos2``.

    The bit at ``pos2`` is worth 1 and each bit to its left doubles in
    weight, so ``get_int_from_byte(b, 0, 7)`` is the unsigned value of ``b``.

    Raises:
        InvalidArgument: Either position is outside 0..7 or ``pos1 > pos2``.
    """
    check_byte(b, "get_int_from_byte")
    check_range(pos1, pos2, "get_int_from_byte")
    width = pos2 - pos1 + 1
    shift = normalize(pos2)
    mask = ((1 << width) - 1) << shift
    return get_bits(b & BYTE_MASK, mask, shift)


def get_byte_from_int(value: int, byte_index: int) -> int:
    """
    Returns byte number ``byte_index`` of a 32-bit integer, as a signed byte.

    Args:
        value: A 32-bit integer (-2**31..2**32 - 1).
        byte_index: 0 (least significant byte) to 3 (most significant byte).

    Raises:
        InvalidArgument: ``byte_index`` is outside 0..3 or ``value`` does not fit in 32 bits.
    """
    check_int32(value, "get_byte_from_int")
    check_byte_index(byte_index, "get_byte_from_int")
    return to_signed_byte(((value & INT32_MASK) >> (byte_index * 8)) & BYTE_MASK)


# --- Rendering --- #
def get_byte_as_binary_string(b: int) -> str:
    """Returns the byte as 8 characters of '0'/'1', leftmost character is position 0."""
    check_byte(b, "get_byte_as_binary_string")
    return "".join(
        "1" if is_bit_set(b, pos) else "0" for pos in range(POS_MIN, POS_MAX + 1)
    )


def parse_binary_string(text: str) -> int:
    """Parses 8 characters of '0'/'1' back into a signed byte."""
    if not isinstance(text, str) or len(text) != 8 or set(text) - {"0", "1"}:
        logger.debug("Rejected binary string: %r", text)
        raise InvalidArgument(
            f"Illegal binary string in parse_binary_string(): {text!r}. Expected 8 of '0'/'1'"
        )
    return to_signed_byte(int(text, 2))
