"""Setting bits from a weight list, and sampling the indices of an error vector."""

from __future__ import annotations

from typing import Iterable, List, Protocol

from .params import IDX_BYTES, BikeParams
from .utilities import bit_scan_reverse_vartime, secure_cmp32, secure_l32

# Marks an index slot of an error vector that holds no valid index.
IDX_INVALID_VAL = 0xFFFFFFFF

_U32 = (1 << 32) - 1


class _Prf(Protocol):
    def read(self, length: int) -> bytes: ...


def _as_int32(value: int) -> int:
    value &= _U32
    return value - (1 << 32) if value & 0x80000000 else value


def secure_set_bits(first_pos: int, wlist: Iterable[int], padded_bits: int) -> bytes:
    """Return a little-endian bit vector of ``padded_bits`` bits from a weight list.

    Every index ``w`` of ``wlist`` sets bit ``w - first_pos`` of the result.
    Differences that are negative as 32-bit signed values, or that fall beyond
    the vector, set nothing.
    """
    if padded_bits < 0 or padded_bits % 64 != 0:
        raise ValueError("padded_bits must be a non-negative multiple of 64")
    first_pos = int(first_pos)
    if first_pos < 0:
        raise ValueError("first_pos must not be negative")

    value = 0
    for index in wlist:
        rel = _as_int32(int(index) - first_pos)
        if 0 <= rel < padded_bits:
            value |= 1 << rel
    return value.to_bytes(padded_bits // 8, "little")


def sample_error_vec_indices(prf: _Prf, params: BikeParams) -> List[int]:
    """Draw ``params.t`` distinct indices below ``params.n_bits`` from ``prf``.

    A fixed number (``params.max_rand_indices_t``) of values is always drawn;
    the first ``t`` that are valid and new are kept. Slots that stay unfilled
    hold ``IDX_INVALID_VAL``.
    """
    n_bits = params.n_bits
    bit_mask = (1 << bit_scan_reverse_vartime(n_bits)) - 1
    out = [IDX_INVALID_VAL] * params.t
    ctr = 0

    for _ in range(params.max_rand_indices_t):
        raw = prf.read(IDX_BYTES)
        if len(raw) != IDX_BYTES:
            raise ValueError(f"PRF returned {len(raw)} bytes, expected {IDX_BYTES}")
        idx = int.from_bytes(raw, "little") & bit_mask

        is_dup = 0
        for slot, current in enumerate(out):
            is_dup |= secure_cmp32(idx, current)
            if secure_cmp32(slot, ctr):
                out[slot] = idx

        is_valid = secure_l32(idx, n_bits)
        ctr += (1 - is_dup) & is_valid

    return out