"""
aes_ctr.py — CTR mode with the initial counter block carried in front.

Algorithm per NIST SP 800-38A sec. 6.5. The keystream block for position i is
E(iv + i), with the 16-byte counter incremented as one big-endian integer
(mod 2^128). No padding: len(ciphertext) == 16 + len(message).

Encrypt and decrypt are the same XOR, so both go through _apply_keystream().

Wraparound after 2^128 blocks silently repeats the keystream; keeping
(key, iv) pairs unique and messages short of that is the caller's job.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from typing import Union

from aes_bytes import BLOCK_SIZE, as_bytes, require_block, xor_bytes
from aes_cipher import AESCipher
from aes_errors import InvalidCiphertextLength

_COUNTER_MOD = 1 << (8 * BLOCK_SIZE)


def increment_block(block: bytes) -> bytes:
    """Return block + 1 as a new block; ff..ff wraps to 00..00."""
    block = require_block(block, "counter")
    n = (int.from_bytes(block, "big") + 1) % _COUNTER_MOD
    return n.to_bytes(BLOCK_SIZE, "big")


class CTRMode:
    """Counter mode over an AESCipher; holds no per-message state."""

    __slots__ = ("_cipher",)

    def __init__(self, key_or_cipher: Union[bytes, AESCipher]) -> None:
        if isinstance(key_or_cipher, AESCipher):
            self._cipher = key_or_cipher
        else:
            self._cipher = AESCipher(key_or_cipher)

    @property
    def cipher(self) -> AESCipher:
        return self._cipher

    def _apply_keystream(self, counter: bytes, data: bytes) -> bytes:
        out = bytearray()
        encrypt_block = self._cipher.encrypt
        for off in range(0, len(data), BLOCK_SIZE):
            chunk = data[off:off + BLOCK_SIZE]
            # final chunk may be short; use only the leading keystream bytes
            out += xor_bytes(chunk, encrypt_block(counter)[:len(chunk)])
            counter = increment_block(counter)
        return bytes(out)

    def encrypt(self, iv: bytes, message: bytes) -> bytes:
        iv = require_block(iv, "iv")
        return iv + self._apply_keystream(iv, as_bytes(message, "message"))

    def decrypt(self, ciphertext: bytes) -> bytes:
        ct = as_bytes(ciphertext, "ciphertext")
        if len(ct) < BLOCK_SIZE:
            raise InvalidCiphertextLength(
                f"ciphertext must hold at least the {BLOCK_SIZE}-byte iv, got {len(ct)}"
            )
        return self._apply_keystream(ct[:BLOCK_SIZE], ct[BLOCK_SIZE:])
