#!/usr/bin/env python3

import logging

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

# Byte layout:
#
# +---+---+---+---+---+---+---+---+
# | 0 | 1 | 2 | 3 | 4 | 5 | 6 | 7 |  Position
# +---+---+---+---+---+---+---+---+
# |128| 64| 32| 16| 8 | 4 | 2 | 1 |  Value
# +---+---+---+---+---+---+---+---+
#
# Position 0 is the leftmost (most significant) bit.

# fmt: off
POS_MIN     = 0
POS_MAX     = 7
BYTE_MASK   = 0xFF
BYTE_MIN    = -0x80
BYTE_MAX    = 0xFF
INDEX_MIN   = 0
INDEX_MAX   = 3
INT32_MASK  = 0xFFFFFFFF
INT32_MIN   = -0x80000000
INT32_MAX   = 0xFFFFFFFF
# fmt: on


# --- Bit Helpers --- #
def get_bit(field: int, bit_position: int) -> int:
    """Gets the value of a single bit, counting from the least significant bit."""
    return (field >> bit_position) & 0x1


def set_bit(field: int, bit_position: int) -> int:
    """Sets a specific bit in a field to 1, counting from the least significant bit."""
    mask = 1 << bit_position
    return (field & ~mask) | mask


def clear_bit(field: int, bit_position: int) -> int:
    """Clears a specific bit in a field to 0, counting from the least significant bit."""
    mask = ~(1 << bit_position)
    return field & mask


def flip_bit(field: int, bit_position: int) -> int:
    """Inverts a specific bit in a field, counting from the least significant bit."""
    return field ^ (1 << bit_position)


def get_bits(field: int, mask: int, shift: int) -> int:
    """Gets the value of a range of bits using a mask and shift."""
    return (field & mask) >> shift


# --- Conversions --- #
def to_unsigned_byte(b: int) -> int:
    """Returns the 0..255 view of a byte."""
    return check_byte(b, "to_unsigned_byte") & BYTE_MASK


def to_signed_byte(b: int) -> int:
    """Returns the -128..127 (two's complement) view of a byte."""
    value = check_byte(b, "to_signed_byte") & BYTE_MASK
    return value - 0x100 if value & 0x80 else value


def normalize(pos: int) -> int:
    """Maps a position (0 = leftmost) to its bit significance (0 = least significant)."""
    return POS_MAX - pos


# --- Validation --- #
def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_byte(b, op: str) -> int:
    if not _is_int(b) or not BYTE_MIN <= b <= BYTE_MAX:
        logger.debug("Rejected byte in %s: %r", op, b)
        raise InvalidArgument(
            f"Illegal byte in {op}(): {b!r}. Min: {BYTE_MIN} Max: {BYTE_MAX}"
        )
    return b


def check_position(pos, op: str) -> int:
    if not _is_int(pos) or not POS_MIN <= pos <= POS_MAX:
        logger.debug("Rejected position in %s: %r", op, pos)
        raise InvalidArgument(
            f"Illegal position in {op}(): {pos!r}. Min: {POS_MIN} Max: {POS_MAX}"
        )
    return pos


def check_range(pos1, pos2, op: str) -> range:
    """Validates an inclusive position range and returns it as a left-to-right range."""
    if (
        not _is_int(pos1)
        or not _is_int(pos2)
        or not POS_MIN <= pos1 <= POS_MAX
        or not POS_MIN <= pos2 <= POS_MAX
        or pos1 > pos2
    ):
        logger.debug("Rejected positions in %s: %r, %r", op, pos1, pos2)
        raise InvalidArgument(f"Illegal positions in {op}(): pos1={pos1!r}, pos2={pos2!r}")
    return range(pos1, pos2 + 1)


def check_byte_index(index, op: str) -> int:
    if not _is_int(index) or not INDEX_MIN <= index <= INDEX_MAX:
        logger.debug("Rejected byte index in %s: %r", op, index)
        raise InvalidArgument(
            f"Illegal byte index in {op}(): {index!r}. Min: {INDEX_MIN} Max: {INDEX_MAX}"
        )
    return index


def check_int32(value, op: str) -> int:
    if not _is_int(value) or not INT32_MIN <= value <= INT32_MAX:
        logger.debug("Rejected 32-bit value in %s: %r", op, value)
        raise InvalidArgument(
            f"Illegal 32-bit value in {op}(): {value!r}. Min: {INT32_MIN} Max: {INT32_MAX}"
        )
    return value
