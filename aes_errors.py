"""
aes_errors.py — exception hierarchy shared by the cipher core and its modes.

All failures are local and detected up front; nothing here is retriable.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations


class AESError(Exception):
    """Base class for all cipher-core errors."""

class InvalidKey(AESError):
    """Raised when a key is not 16, 24, or 32 bytes long."""

class InvalidBlockLength(AESError):
    """Raised when a block or IV is not exactly one block (16 bytes)."""

class InvalidCiphertextLength(AESError):
    """Raised when a mode's ciphertext is too short or not block-aligned."""

class PaddingError(AESError):
    """Raised when the decrypted pad is malformed (corrupt data or wrong key)."""
