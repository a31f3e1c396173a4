"""Error codes and the exception raised for them."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Reasons an operation can fail."""

    DECODING_FAILURE = 1
    AES_CTR_PRF_INIT_FAIL = 2
    AES_OVER_USED = 3
    EXTERNAL_LIB_ERROR_OPENSSL = 4
    SHAKE_PRF_INIT_FAIL = 5
    SHAKE_OVER_USED = 6


_DEFAULT_MESSAGES = {
    ErrorCode.DECODING_FAILURE: "decoding failed",
    ErrorCode.AES_CTR_PRF_INIT_FAIL: "AES-CTR PRF could not be initialised",
    ErrorCode.AES_OVER_USED: "AES-CTR PRF invocation limit reached",
    ErrorCode.EXTERNAL_LIB_ERROR_OPENSSL: "cryptographic backend error",
    ErrorCode.SHAKE_PRF_INIT_FAIL: "SHAKE PRF could not be initialised",
    ErrorCode.SHAKE_OVER_USED: "SHAKE PRF invocation limit reached",
}


class BikeError(Exception):
    """Raised when a BIKE operation fails; ``code`` tells why."""

    def __init__(self, code: ErrorCode | int, message: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.message = message if message is not None else _DEFAULT_MESSAGES[self.code]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"BikeError({self.code.name}, {self.message!r})"