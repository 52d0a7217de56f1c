"""Helpers shared by the encoding modules."""


def pad_u32(value: int) -> bytes:
    """Return ``value`` as a 32-byte big-endian word, right aligned.

    Raises OverflowError when ``value`` does not fit in an unsigned 32-bit integer.
    """
    return value.to_bytes(4, "big").rjust(32, b"\x00")