"""Byte-order, comparison and scrubbing helpers on fixed-width words."""

from __future__ import annotations

_U32 = (1 << 32) - 1
_U64 = (1 << 64) - 1


def bswap_64(x: int) -> int:
    """Reverse the byte order of a 64-bit word."""
    return int.from_bytes((x & _U64).to_bytes(8, "little"), "big")


def bit_scan_reverse_vartime(val: int) -> int:
    """Return the position of the highest set bit plus one (0 for 0)."""
    return (val & _U64).bit_length()


def secure_cmp(a: bytes, b: bytes) -> int:
    """Return 1 if the two byte strings are equal, 0 otherwise, without early exit."""
    if len(a) != len(b):
        raise ValueError("secure_cmp needs operands of the same length")
    res = 0
    for x, y in zip(a, b):
        res |= x ^ y
    return int(res == 0)


def secure_cmp32(v1: int, v2: int) -> int:
    """Return 1 if two 32-bit values are equal, 0 otherwise."""
    return int(((v1 ^ v2) & _U32) == 0)


def secure_l32(v1: int, v2: int) -> int:
    """Return 1 if ``v1 < v2`` as unsigned 32-bit values, 0 otherwise."""
    diff = ((v1 & _U32) - (v2 & _U32)) & _U64
    return diff >> 63


def secure_l32_mask(v1: int, v2: int) -> int:
    """Return 0 if ``v1 < v2`` (unsigned 32-bit), all ones otherwise."""
    diff = ((v1 & _U32) - (v2 & _U32)) & _U64
    return ~(diff >> 32) & _U32


def secure_cmpeq64_mask(v1: int, v2: int) -> int:
    """Return an all-ones 64-bit mask if the values are equal, 0 otherwise."""
    a = v1 & _U64
    b = v2 & _U64
    top = (((a - b) & _U64) | ((b - a) & _U64)) >> 63
    return (-(1 - top)) & _U64


def secure_clean(buffer: bytearray | memoryview) -> None:
    """Overwrite a writable buffer with zeros in place."""
    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("secure_clean needs a writable buffer")
    flat = view.cast("B") if view.format != "B" or view.ndim != 1 else view
    flat[:] = bytes(flat.nbytes)