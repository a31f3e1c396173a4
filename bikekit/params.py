"""BIKE parameter sets and the size arithmetic derived from them."""

from __future__ import annotations

from dataclasses import dataclass

N0 = 2
NUM_OF_SEEDS = 2

M_BITS = 256
M_BYTES = M_BITS // 8

SS_BITS = 256
SS_BYTES = SS_BITS // 8

SEED_BYTES = 256 // 8

# Parameter of the BGF decoder.
DELTA = 3

BYTES_IN_QWORD = 0x8
BYTES_IN_XMM = 0x10
BYTES_IN_YMM = 0x20
BYTES_IN_ZMM = 0x40
ALIGN_BYTES = BYTES_IN_ZMM

# Size in bytes of one index of a sparse (weight list) representation.
IDX_BYTES = 4

DEFAULT_LEVEL = 1


def _mask(length: int) -> int:
    return (1 << length) - 1


def divide_and_ceil(x: int, divider: int) -> int:
    """Divide ``x`` by ``divider`` and round up to the next integer."""
    if divider <= 0:
        raise ValueError("divider must be positive")
    if x < 0:
        raise ValueError("x must not be negative")
    return (x + divider - 1) // divider


def log2_msb(v: int) -> int:
    """Return the number of bits needed to hold ``v``; defined for 0 <= v < 512."""
    if not 0 <= v < 512:
        raise ValueError("log2_msb is defined only for 0 <= v < 512")
    return v.bit_length()


@dataclass(frozen=True)
class BikeParams:
    """One BIKE security level together with its derived sizes."""

    level: int
    r_bits: int
    d: int
    t: int
    threshold_coeff0: float
    threshold_coeff1: float
    threshold_min: int
    max_rand_indices_t: int
    block_bits: int

    @property
    def n0(self) -> int:
        return N0

    @property
    def n_bits(self) -> int:
        return self.r_bits * N0

    @property
    def r_bytes(self) -> int:
        return divide_and_ceil(self.r_bits, 8)

    @property
    def r_qwords(self) -> int:
        return divide_and_ceil(self.r_bits, 8 * BYTES_IN_QWORD)

    @property
    def r_blocks(self) -> int:
        return divide_and_ceil(self.r_bits, self.block_bits)

    @property
    def r_padded(self) -> int:
        return self.r_blocks * self.block_bits

    @property
    def r_padded_bytes(self) -> int:
        return self.r_padded // 8

    @property
    def r_padded_qwords(self) -> int:
        return self.r_padded // 64

    @property
    def last_r_qword_lead(self) -> int:
        return self.r_bits & _mask(6)

    @property
    def last_r_qword_trail(self) -> int:
        return 64 - self.last_r_qword_lead

    @property
    def last_r_qword_mask(self) -> int:
        return _mask(self.last_r_qword_lead)

    @property
    def last_r_byte_lead(self) -> int:
        return self.r_bits & _mask(3)

    @property
    def last_r_byte_trail(self) -> int:
        return 8 - self.last_r_byte_lead

    @property
    def last_r_byte_mask(self) -> int:
        return _mask(self.last_r_byte_lead)

    @property
    def slices(self) -> int:
        """Number of bit slices the decoder's counters need."""
        return log2_msb(self.d) + 1

    @property
    def syndrome_qwords(self) -> int:
        """Quadwords of a syndrome kept as three copies for fast rotation."""
        return 3 * self.r_qwords

    @property
    def public_key_bytes(self) -> int:
        return self.r_bytes

    @property
    def secret_key_bytes(self) -> int:
        wlists = N0 * self.d * IDX_BYTES
        return wlists + N0 * self.r_bytes + self.public_key_bytes + M_BYTES

    @property
    def ciphertext_bytes(self) -> int:
        return self.r_bytes + M_BYTES

    @property
    def shared_secret_bytes(self) -> int:
        return SS_BYTES


_LEVELS = {
    1: BikeParams(
        level=1,
        r_bits=12323,
        d=71,
        t=134,
        threshold_coeff0=13.530,
        threshold_coeff1=0.0069722,
        threshold_min=36,
        max_rand_indices_t=271,
        block_bits=16384,
    ),
    3: BikeParams(
        level=3,
        r_bits=24659,
        d=103,
        t=199,
        threshold_coeff0=15.2588,
        threshold_coeff1=0.005265,
        threshold_min=52,
        max_rand_indices_t=373,
        block_bits=32768,
    ),
    5: BikeParams(
        level=5,
        r_bits=40973,
        d=137,
        t=264,
        threshold_coeff0=17.8785,
        threshold_coeff1=0.00402312,
        threshold_min=69,
        max_rand_indices_t=605,
        block_bits=65536,
    ),
}


def params_for_level(level: int = DEFAULT_LEVEL) -> BikeParams:
    """Return the parameter set of security level 1, 3 or 5."""
    try:
        return _LEVELS[level]
    except (KeyError, TypeError):
        raise ValueError(f"bad level {level!r}, choose one of 1/3/5") from None