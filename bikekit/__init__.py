"""Hashing, pseudorandom functions and sampling primitives of the BIKE key encapsulation mechanism."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "bits",
    "errors",
    "keccak",
    "params",
    "prf",
    "sampling",
    "sha384",
    "utilities",
]