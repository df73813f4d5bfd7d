"""
aes_cbc.py — CBC mode with PKCS#7 padding and the IV carried in front.

Algorithm per NIST SP 800-38A sec. 6.2.

Wire layout
-----------
  iv(16) || E(p1 ^ iv) || E(p2 ^ c1) || ... || E(pad_block ^ c_n-1)

A block-aligned message still gains a full pad block, so an empty message
encrypts to exactly two blocks. Decrypt failures are never truncated into
garbage plaintext: a malformed pad raises PaddingError.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from typing import Union

from aes_bytes import BLOCK_SIZE, as_bytes, require_block, xor_bytes
from aes_cipher import AESCipher
from aes_errors import InvalidCiphertextLength, PaddingError


# =========================
# Padding
# =========================

def pkcs7_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    if not 1 <= block_size <= 255:
        raise ValueError("block_size must be 1..255")
    data = as_bytes(data)
    pad_len = block_size - (len(data) % block_size)
    return data + bytes([pad_len]) * pad_len

def pkcs7_unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    data = as_bytes(data)
    if not data or len(data) % block_size:
        raise PaddingError(f"padded length {len(data)} is not a positive multiple of {block_size}")
    pad_len = data[-1]
    if not 1 <= pad_len <= block_size:
        raise PaddingError(f"pad length {pad_len} outside 1..{block_size}")
    if data[-pad_len:] != bytes([pad_len]) * pad_len:
        raise PaddingError("pad bytes are inconsistent")
    return data[:-pad_len]


# =========================
# Mode
# =========================

class CBCMode:
    """Cipher block chaining over an AESCipher; holds no per-message state."""

    __slots__ = ("_cipher",)

    def __init__(self, key_or_cipher: Union[bytes, AESCipher]) -> None:
        if isinstance(key_or_cipher, AESCipher):
            self._cipher = key_or_cipher
        else:
            self._cipher = AESCipher(key_or_cipher)

    @property
    def cipher(self) -> AESCipher:
        return self._cipher

    def encrypt(self, iv: bytes, message: bytes) -> bytes:
        chain = require_block(iv, "iv")
        padded = pkcs7_pad(message)
        out = bytearray(chain)
        encrypt_block = self._cipher.encrypt
        for off in range(0, len(padded), BLOCK_SIZE):
            chain = encrypt_block(xor_bytes(padded[off:off + BLOCK_SIZE], chain))
            out += chain
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        ct = as_bytes(ciphertext, "ciphertext")
        if len(ct) % BLOCK_SIZE or len(ct) <= BLOCK_SIZE:
            raise InvalidCiphertextLength(
                f"ciphertext must be a multiple of {BLOCK_SIZE} bytes and longer than "
                f"one block, got {len(ct)}"
            )
        chain = ct[:BLOCK_SIZE]
        padded = bytearray()
        decrypt_block = self._cipher.decrypt
        for off in range(BLOCK_SIZE, len(ct), BLOCK_SIZE):
            block = ct[off:off + BLOCK_SIZE]
            padded += xor_bytes(decrypt_block(block), chain)
            chain = block
        return pkcs7_unpad(bytes(padded))
