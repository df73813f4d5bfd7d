"""
aes_bytes.py — small byte helpers shared by the block cipher and its modes.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import secrets

from aes_errors import InvalidBlockLength

BLOCK_SIZE = 16

_BYTES_LIKE = (bytes, bytearray, memoryview)


def as_bytes(data, name: str = "data") -> bytes:
    """Return an immutable copy of a bytes-like argument."""
    if not isinstance(data, _BYTES_LIKE):
        raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")
    return bytes(data)

def require_block(data, name: str = "block") -> bytes:
    block = as_bytes(data, name)
    if len(block) != BLOCK_SIZE:
        raise InvalidBlockLength(f"{name} must be {BLOCK_SIZE} bytes, got {len(block)}")
    return block

def xor_bytes(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise ValueError(f"xor operands differ in length ({len(a)} != {len(b)})")
    return bytes(x ^ y for x, y in zip(a, b))

def random_iv() -> bytes:
    """Fresh unpredictable IV; callers must never reuse one under the same key."""
    return secrets.token_bytes(BLOCK_SIZE)
