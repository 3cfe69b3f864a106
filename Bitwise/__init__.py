"""
Bitwise Package
===============

This package provides bit operations on single bytes. Bits are numbered
0 to 7, with bit 0 the leftmost (most significant) bit and bit 7 the
rightmost (least significant) bit.

Byte arguments may be given in the signed (-128..127) or unsigned (0..255)
view. Byte results are always returned in the signed view.

Example Usage:
-------------
from Bitwise import set_bits, clear_bits, get_byte_as_binary_string, to_unsigned_byte

b = set_bits(0, 0, 3)                 # -16
get_byte_as_binary_string(b)          # '11110000'
to_unsigned_byte(clear_bits(b, 2, 3)) # 0xC0

"""

# --- Bit operations ---
from .api import (
    are_all_bits_set,
    are_bits_set,
    clear_bit,
    clear_bits,
    flip_bit,
    flip_bits,
    get_bit_mask,
    get_byte_as_binary_string,
    get_byte_from_int,
    get_clear_mask,
    get_int_from_byte,
    is_bit_set,
    parse_binary_string,
    set_bit,
    set_bits,
)

# --- Byte views ---
from .helpers import to_signed_byte, to_unsigned_byte

# --- Errors ---
from .errors import InvalidArgument

# --- Expose a version number ---
__version__ = "1.0.0"
