"""
aes_key_schedule.py — key expansion for 128, 192, and 256 bit keys.

Algorithm per FIPS-197 sec. 5.2. The schedule is returned as an immutable
tuple of Nb*(Nr+1) four-byte words; words 4n..4n+3 form the key of round n.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

from aes_bytes import as_bytes, xor_bytes
from aes_errors import InvalidKey
from aes_state import NB
from aes_tables import S_BOX, RCON

WORD_SIZE = 4

Word = bytes
RoundKeySchedule = Tuple[Word, ...]


class AESVariant(Enum):
    """Supported key sizes: value is (key bytes, rounds)."""

    AES128 = (16, 10)
    AES192 = (24, 12)
    AES256 = (32, 14)

    def __init__(self, key_length: int, rounds: int) -> None:
        self.key_length = key_length
        self.rounds = rounds

    @property
    def nk(self) -> int:
        """Words in the cipher key."""
        return self.key_length // WORD_SIZE

    @property
    def nr(self) -> int:
        return self.rounds

    @property
    def schedule_words(self) -> int:
        return NB * (self.rounds + 1)


KEY_SIZES = tuple(v.key_length for v in AESVariant)


def select_variant(key_length: int) -> Optional[AESVariant]:
    for variant in AESVariant:
        if variant.key_length == key_length:
            return variant
    return None

def sub_word(word: bytes) -> bytes:
    """S-box each byte of a word; the argument is left untouched."""
    return bytes(word).translate(S_BOX)

def rot_word(word: bytes) -> bytes:
    """Cyclic one-byte left rotation [a0,a1,a2,a3] -> [a1,a2,a3,a0]."""
    word = bytes(word)
    return word[1:] + word[:1]

def expand_key(key: bytes) -> RoundKeySchedule:
    key = as_bytes(key, "key")
    variant = select_variant(len(key))
    if variant is None:
        raise InvalidKey(f"key must be one of {KEY_SIZES} bytes, got {len(key)}")
    nk = variant.nk

    w = [key[WORD_SIZE * i:WORD_SIZE * (i + 1)] for i in range(nk)]
    for i in range(nk, variant.schedule_words):
        temp = w[i - 1]
        if i % nk == 0:
            temp = xor_bytes(sub_word(rot_word(temp)), bytes((RCON[i // nk], 0, 0, 0)))
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        w.append(xor_bytes(w[i - nk], temp))
    return tuple(w)
