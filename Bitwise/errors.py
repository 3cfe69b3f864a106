#!/usr/bin/env python3


class InvalidArgument(ValueError):
    """Raised when a bit position, bit range, byte index or byte value is out of range."""
