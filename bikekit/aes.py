"""AES-256 block encryption of single 16-byte blocks."""

from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import BikeError, ErrorCode

AES256_KEY_BYTES = 32
AES256_KEY_BITS = AES256_KEY_BYTES * 8
AES256_BLOCK_BYTES = 16
AES256_ROUNDS = 14


class Aes256:
    """An expanded AES-256 key that encrypts one block at a time."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != AES256_KEY_BYTES:
            raise ValueError(f"AES-256 key must be {AES256_KEY_BYTES} bytes, got {len(key)}")
        try:
            self._encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
        except UnsupportedAlgorithm as exc:
            raise BikeError(ErrorCode.EXTERNAL_LIB_ERROR_OPENSSL) from exc

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt exactly one 16-byte block."""
        block = bytes(block)
        if len(block) != AES256_BLOCK_BYTES:
            raise ValueError(
                f"AES block must be {AES256_BLOCK_BYTES} bytes, got {len(block)}"
            )
        out = self._encryptor.update(block)
        if len(out) != AES256_BLOCK_BYTES:
            raise BikeError(ErrorCode.EXTERNAL_LIB_ERROR_OPENSSL)
        return out