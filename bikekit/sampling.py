"""Seed generation and sampling of BIKE secret keys and error vectors."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from .bits import sample_error_vec_indices, secure_set_bits
from .params import IDX_BYTES, NUM_OF_SEEDS, SEED_BYTES, BikeParams
from .prf import MAX_PRF_INVOCATION, new_prf
from .utilities import bit_scan_reverse_vartime, secure_cmp32

_U32 = (1 << 32) - 1

# Bytes of randomness drawn for one Fisher-Yates step.
_CWW_RAND_BYTES = 4


class _Prf(Protocol):
    def read(self, length: int) -> bytes: ...


class _ByteSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


class MustBeOdd(enum.IntEnum):
    """Whether a sampled vector is forced to have odd Hamming weight."""

    NO_RESTRICTION = 0
    MUST_BE_ODD = 1


@dataclass(frozen=True)
class SecretKeyPart:
    """One half of a secret key: the padded bit vector and its weight list."""

    bits: bytes
    wlist: Tuple[int, ...]

    @property
    def weight(self) -> int:
        return int.from_bytes(self.bits, "little").bit_count() if hasattr(
            int, "bit_count"
        ) else bin(int.from_bytes(self.bits, "little")).count("1")


def get_seeds(rng: Optional[_ByteSource] = None) -> Tuple[bytes, ...]:
    """Return ``NUM_OF_SEEDS`` fresh seeds of ``SEED_BYTES`` bytes each.

    With no ``rng`` the operating system's randomness is used; otherwise each
    byte is drawn with ``rng.getrandbits(8)``.
    """
    if rng is None:
        return tuple(os.urandom(SEED_BYTES) for _ in range(NUM_OF_SEEDS))
    return tuple(
        bytes(rng.getrandbits(8) for _ in range(SEED_BYTES)) for _ in range(NUM_OF_SEEDS)
    )


def _read_u32(prf: _Prf) -> int:
    raw = prf.read(IDX_BYTES)
    if len(raw) != IDX_BYTES:
        raise ValueError(f"PRF returned {len(raw)} bytes, expected {IDX_BYTES}")
    return int.from_bytes(raw, "little")


def sample_uniform_r_bits(
    prf: _Prf, params: BikeParams, must_be_odd: MustBeOdd = MustBeOdd.NO_RESTRICTION
) -> bytes:
    """Return ``params.r_bits`` pseudorandom bits as ``params.r_bytes`` bytes.

    The unused top bits of the last byte are cleared. With ``MUST_BE_ODD`` an
    even-weight result has its lowest bit flipped.
    """
    must_be_odd = MustBeOdd(must_be_odd)
    r_bytes = params.r_bytes
    raw = prf.read(r_bytes)
    if len(raw) != r_bytes:
        raise ValueError(f"PRF returned {len(raw)} bytes, expected {r_bytes}")
    out = bytearray(raw)
    out[-1] &= (1 << (params.r_bits + 8 - r_bytes * 8)) - 1

    if must_be_odd is MustBeOdd.MUST_BE_ODD:
        weight = sum(bin(b).count("1") for b in out)
        if weight % 2 == 0:
            out[0] ^= 1
    return bytes(out)


def _rand_mod_len(length: int, prf: _Prf) -> int:
    mask = (1 << bit_scan_reverse_vartime(length)) - 1
    while True:
        value = _read_u32(prf) & mask
        if value < length:
            return value


def generate_indices_mod_z(num_indices: int, z: int, prf: _Prf) -> List[int]:
    """Draw ``num_indices`` distinct values below ``z`` by rejection sampling."""
    if num_indices < 0:
        raise ValueError("num_indices must not be negative")
    if z <= 0 or z > _U32:
        raise ValueError("z must be a positive 32-bit value")
    if num_indices > z:
        raise ValueError("cannot draw more distinct indices than z allows")

    out: List[int] = []
    while len(out) < num_indices:
        value = _rand_mod_len(z, prf)
        if value not in out:
            out.append(value)
    return out


def sample_indices_fisher_yates(
    num_indices: int, max_idx_val: int, prf: _Prf
) -> List[int]:
    """Draw ``num_indices`` distinct values below ``max_idx_val`` (Fisher-Yates)."""
    if num_indices < 0:
        raise ValueError("num_indices must not be negative")
    if max_idx_val > _U32:
        raise ValueError("max_idx_val must fit in 32 bits")
    if num_indices > max_idx_val:
        raise ValueError("cannot draw more distinct indices than max_idx_val allows")

    out = [0] * num_indices
    for i in reversed(range(num_indices)):
        rand = _read_u32(prf) * (max_idx_val - i)
        candidate = (i + (rand >> (_CWW_RAND_BYTES * 8))) & _U32

        is_dup = 0
        for later in out[i + 1 :]:
            is_dup |= secure_cmp32(candidate, later)

        mask = (-is_dup) & _U32
        out[i] = (mask & i) ^ (~mask & _U32 & candidate)
    return out


def _sample_sk_wlist(prf: _Prf, params: BikeParams, uniform: bool) -> List[int]:
    if uniform:
        return generate_indices_mod_z(params.d, params.r_bits, prf)
    return sample_indices_fisher_yates(params.d, params.r_bits, prf)


def generate_secret_key(
    seed: bytes, params: BikeParams, uniform: bool = False, use_shake: bool = True
) -> Tuple[SecretKeyPart, SecretKeyPart]:
    """Derive the two sparse halves (h0, h1) of a secret key from ``seed``."""
    with new_prf(seed, MAX_PRF_INVOCATION, use_shake) as prf:
        parts = []
        for _ in range(2):
            wlist = _sample_sk_wlist(prf, params, uniform)
            bits = secure_set_bits(0, wlist, params.r_padded)
            parts.append(SecretKeyPart(bits=bits, wlist=tuple(wlist)))
    return parts[0], parts[1]


def _clean_padding(vector: bytes, params: BikeParams) -> bytes:
    out = bytearray(vector)
    r_bytes = params.r_bytes
    out[r_bytes - 1] &= params.last_r_byte_mask
    out[r_bytes:] = bytes(len(out) - r_bytes)
    return bytes(out)


def generate_error_vector(
    seed: bytes, params: BikeParams, uniform: bool = False, use_shake: bool = True
) -> Tuple[bytes, bytes]:
    """Derive the padded error vector halves (e0, e1) of weight ``params.t``.

    e0 holds bits 0..r_bits-1 of the error and e1 bits r_bits..2*r_bits-1.
    """
    with new_prf(seed, MAX_PRF_INVOCATION, use_shake) as prf:
        if uniform:
            wlist = sample_error_vec_indices(prf, params)
        else:
            wlist = sample_indices_fisher_yates(params.t, params.n_bits, prf)

    e0 = secure_set_bits(0, wlist, params.r_padded)
    e1 = secure_set_bits(params.r_bits, wlist, params.r_padded)
    return _clean_padding(e0, params), _clean_padding(e1, params)