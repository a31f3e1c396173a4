"""Keccak-f[1600] permutation with the SHA3-384 and SHAKE256 functions built on it."""

from __future__ import annotations

import struct
from typing import List, MutableSequence

SHA3_384_RATE = 104
SHAKE256_RATE = 136
SHA3_384_DIGEST_BYTES = 48

NROUNDS = 24
STATE_LANES = 25

_U64 = (1 << 64) - 1

_SHAKE_DOMAIN = 0x1F
_SHA3_DOMAIN = 0x06


def _rc_bit(t: int) -> int:
    """Output bit of the degree-8 LFSR that produces the round constants."""
    t %= 255
    if t == 0:
        return 1
    reg = 1
    for _ in range(t):
        reg <<= 1
        if reg & 0x100:
            reg ^= 0x171
    return reg & 1


def _round_constants() -> tuple[int, ...]:
    constants = []
    for round_index in range(NROUNDS):
        value = 0
        for j in range(7):
            if _rc_bit(j + 7 * round_index):
                value |= 1 << ((1 << j) - 1)
        constants.append(value)
    return tuple(constants)


def _rotation_offsets() -> tuple[int, ...]:
    offsets = [0] * STATE_LANES
    x, y = 1, 0
    for t in range(24):
        offsets[x + 5 * y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    return tuple(offsets)


ROUND_CONSTANTS = _round_constants()
_ROTATIONS = _rotation_offsets()
# Destination lane of each source lane under the pi step.
_PI_TARGET = tuple(y + 5 * ((2 * x + 3 * y) % 5) for y in range(5) for x in range(5))
_PI_SOURCE_ORDER = tuple(x + 5 * y for y in range(5) for x in range(5))


def _rol(value: int, offset: int) -> int:
    return ((value << offset) | (value >> (64 - offset))) & _U64


def keccak_f1600(state: MutableSequence[int]) -> None:
    """Apply the 24-round Keccak-f[1600] permutation to 25 lanes, in place."""
    if len(state) != STATE_LANES:
        raise ValueError(f"Keccak state must hold {STATE_LANES} lanes, got {len(state)}")
    a = [lane & _U64 for lane in state]
    b = [0] * STATE_LANES
    for rc in ROUND_CONSTANTS:
        c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ _rol(c[(x + 1) % 5], 1) for x in range(5)]
        a = [lane ^ d[i % 5] for i, lane in enumerate(a)]

        for src, dst in zip(_PI_SOURCE_ORDER, _PI_TARGET):
            b[dst] = _rol(a[src], _ROTATIONS[src])

        for y in range(0, STATE_LANES, 5):
            row = b[y : y + 5]
            for x in range(5):
                a[y + x] = row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5])

        a[0] ^= rc
    state[:] = a


def _xor_block(state: List[int], block: bytes) -> None:
    lanes = struct.unpack(f"<{len(block) // 8}Q", block)
    for i, lane in enumerate(lanes):
        state[i] ^= lane


def _keccak_absorb(rate: int, data: bytes, domain: int) -> List[int]:
    """Absorb ``data`` into a fresh state and apply the final padding block."""
    state = [0] * STATE_LANES
    view = memoryview(bytes(data))
    full = len(view) - len(view) % rate
    for offset in range(0, full, rate):
        _xor_block(state, bytes(view[offset : offset + rate]))
        keccak_f1600(state)

    tail = bytearray(rate)
    rest = view[full:]
    tail[: len(rest)] = rest
    tail[len(rest)] = domain
    tail[rate - 1] |= 0x80
    _xor_block(state, bytes(tail))
    return state


def _keccak_squeeze(nblocks: int, state: List[int], rate: int) -> bytes:
    if nblocks < 0:
        raise ValueError("number of blocks must not be negative")
    out = bytearray()
    for _ in range(nblocks):
        keccak_f1600(state)
        out += struct.pack(f"<{rate // 8}Q", *state[: rate // 8])
    return bytes(out)


def shake256_absorb(data: bytes) -> List[int]:
    """Absorb ``data`` into a new SHAKE256 state and return that state."""
    return _keccak_absorb(SHAKE256_RATE, data, _SHAKE_DOMAIN)


def shake256_squeeze(nblocks: int, state: List[int]) -> bytes:
    """Squeeze ``nblocks`` full blocks from ``state``, advancing it in place."""
    if len(state) != STATE_LANES:
        raise ValueError(f"Keccak state must hold {STATE_LANES} lanes, got {len(state)}")
    return _keccak_squeeze(nblocks, state, SHAKE256_RATE)


def shake256(data: bytes, outlen: int) -> bytes:
    """Return ``outlen`` bytes of SHAKE256 output for ``data``."""
    if outlen < 0:
        raise ValueError("output length must not be negative")
    state = shake256_absorb(data)
    nblocks = -(-outlen // SHAKE256_RATE)
    return shake256_squeeze(nblocks, state)[:outlen]


def sha3_384(data: bytes) -> bytes:
    """Return the 48-byte SHA3-384 digest of ``data``."""
    state = _keccak_absorb(SHA3_384_RATE, data, _SHA3_DOMAIN)
    return _keccak_squeeze(1, state, SHA3_384_RATE)[:SHA3_384_DIGEST_BYTES]