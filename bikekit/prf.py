"""Pseudorandom functions seeded by a 32-byte seed: SHAKE256 and AES-256-CTR."""

from __future__ import annotations

from typing import List, Optional, Union

from .aes import AES256_BLOCK_BYTES, AES256_KEY_BYTES, Aes256
from .errors import BikeError, ErrorCode
from .keccak import SHAKE256_RATE, STATE_LANES, shake256_absorb, shake256_squeeze
from .params import SEED_BYTES

MAX_PRF_INVOCATION = (1 << 32) - 1

_U64 = (1 << 64) - 1


def _check_seed(seed: bytes) -> bytes:
    seed = bytes(seed)
    if len(seed) != SEED_BYTES:
        raise ValueError(f"seed must be {SEED_BYTES} bytes, got {len(seed)}")
    return seed


def _check_length(length: int) -> int:
    if length < 0:
        raise ValueError("length must not be negative")
    return length


class ShakePrf:
    """A SHAKE256 stream that squeezes one block per invocation."""

    def __init__(self, seed: bytes, max_invocations: int = MAX_PRF_INVOCATION) -> None:
        seed = _check_seed(seed)
        if max_invocations <= 0:
            raise BikeError(ErrorCode.SHAKE_PRF_INIT_FAIL)
        self._state: List[int] = shake256_absorb(seed)
        self._buffer = bytearray(SHAKE256_RATE)
        self._pos = SHAKE256_RATE
        self.remaining_invocations = max_invocations

    def read(self, length: int) -> bytes:
        """Return ``length`` bytes (at most one block) of output."""
        length = _check_length(length)
        if length > SHAKE256_RATE:
            raise ValueError(f"at most {SHAKE256_RATE} bytes can be read at once")
        if self.remaining_invocations == 0:
            raise BikeError(ErrorCode.SHAKE_OVER_USED)

        if length + self._pos <= SHAKE256_RATE:
            out = bytes(self._buffer[self._pos : self._pos + length])
            self._pos += length
            return out

        # What is left of the current block is dropped.
        self._buffer[:] = shake256_squeeze(1, self._state)
        self._pos = length
        self.remaining_invocations -= 1
        return bytes(self._buffer[:length])

    def clean(self) -> None:
        """Wipe the state; the object cannot produce output afterwards."""
        self._state[:] = [0] * STATE_LANES
        self._buffer[:] = bytes(SHAKE256_RATE)
        self._pos = 0
        self.remaining_invocations = 0

    def __enter__(self) -> "ShakePrf":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clean()


class AesCtrPrf:
    """An AES-256 counter-mode stream keyed by the seed."""

    def __init__(self, seed: bytes, max_invocations: int = MAX_PRF_INVOCATION) -> None:
        seed = _check_seed(seed)
        if max_invocations <= 0:
            raise BikeError(ErrorCode.AES_CTR_PRF_INIT_FAIL)
        if len(seed) != AES256_KEY_BYTES:
            raise BikeError(ErrorCode.AES_CTR_PRF_INIT_FAIL)
        self._cipher: Optional[Aes256] = Aes256(seed)
        self._ctr_low = 0
        self._ctr_high = 0
        self._buffer = bytearray(AES256_BLOCK_BYTES)
        self._pos = AES256_BLOCK_BYTES
        self.remaining_invocations = max_invocations

    def _counter_block(self) -> bytes:
        return self._ctr_low.to_bytes(8, "little") + self._ctr_high.to_bytes(8, "little")

    def _perform_aes(self) -> bytes:
        if self.remaining_invocations == 0 or self._cipher is None:
            raise BikeError(ErrorCode.AES_OVER_USED)
        block = self._cipher.encrypt_block(self._counter_block())
        self._ctr_low = (self._ctr_low + 1) & _U64
        self.remaining_invocations -= 1
        return block

    def read(self, length: int) -> bytes:
        """Return the next ``length`` bytes of the key stream."""
        length = _check_length(length)
        if length + self._pos <= AES256_BLOCK_BYTES:
            out = bytes(self._buffer[self._pos : self._pos + length])
            self._pos += length
            return out

        out = bytearray(self._buffer[self._pos :])
        self._pos = 0
        while length - len(out) >= AES256_BLOCK_BYTES:
            out += self._perform_aes()

        self._buffer[:] = self._perform_aes()
        self._pos = length - len(out)
        out += self._buffer[: self._pos]
        return bytes(out)

    def clean(self) -> None:
        """Drop the key schedule and wipe the counter and buffer."""
        self._cipher = None
        self._ctr_low = 0
        self._ctr_high = 0
        self._buffer[:] = bytes(AES256_BLOCK_BYTES)
        self._pos = 0
        self.remaining_invocations = 0

    def __enter__(self) -> "AesCtrPrf":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clean()


Prf = Union[ShakePrf, AesCtrPrf]


def new_prf(
    seed: bytes, max_invocations: int = MAX_PRF_INVOCATION, use_shake: bool = True
) -> Prf:
    """Create the SHAKE256 PRF, or the AES-CTR one when ``use_shake`` is false."""
    if use_shake:
        return ShakePrf(seed, max_invocations)
    return AesCtrPrf(seed, max_invocations)