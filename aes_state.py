"""
aes_state.py — the 4x4 byte State and its round transformations.

A State owns a private 16-byte buffer laid out column-major, exactly as the
block is read in and written out (FIPS-197 sec. 3.4)::

  0  4  8 12
  1  5  9 13
  2  6 10 14
  3  7 11 15

so byte (row r, column c) lives at index r + 4*c. Every transformation mutates
the owning State in place and returns it, so rounds read as a chain. A State is
created per block operation and never shared between calls.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from typing import Sequence

from aes_bytes import BLOCK_SIZE, require_block
from aes_field import MUL
from aes_tables import S_BOX, INV_S_BOX

NB = 4  # columns in the State (fixed for AES)


class State:
    """Opaque working state for one 16-byte block."""

    __slots__ = ("_b",)

    def __init__(self, block: bytes) -> None:
        self._b = bytearray(require_block(block, "block"))

    @classmethod
    def from_block(cls, block: bytes) -> "State":
        return cls(block)

    def to_bytes(self) -> bytes:
        return bytes(self._b)

    __bytes__ = to_bytes

    def hex(self) -> str:
        return self._b.hex()

    def __eq__(self, other):
        if isinstance(other, State):
            return self._b == other._b
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"State({self._b.hex()})"

    # =========================
    # SubBytes (sec. 5.1.1 / 5.3.2)
    # =========================

    def sub_bytes(self) -> "State":
        self._b[:] = self._b.translate(S_BOX)
        return self

    def inv_sub_bytes(self) -> "State":
        self._b[:] = self._b.translate(INV_S_BOX)
        return self

    # =========================
    # ShiftRows (sec. 5.1.2 / 5.3.1)
    # =========================

    def shift_rows(self) -> "State":
        b = self._b
        for r in range(1, NB):
            # b[r::NB] is row r, columns 0..3
            row = b[r::NB]
            b[r::NB] = row[r:] + row[:r]
        return self

    def inv_shift_rows(self) -> "State":
        b = self._b
        for r in range(1, NB):
            row = b[r::NB]
            b[r::NB] = row[-r:] + row[:-r]
        return self

    # =========================
    # MixColumns (sec. 5.1.3 / 5.3.3)
    # =========================

    def mix_columns(self) -> "State":
        b = self._b
        m2, m3 = MUL[2], MUL[3]
        for c in range(0, BLOCK_SIZE, NB):
            s0, s1, s2, s3 = b[c:c + NB]
            b[c:c + NB] = bytes((
                m2[s0] ^ m3[s1] ^ s2 ^ s3,
                s0 ^ m2[s1] ^ m3[s2] ^ s3,
                s0 ^ s1 ^ m2[s2] ^ m3[s3],
                m3[s0] ^ s1 ^ s2 ^ m2[s3],
            ))
        return self

    def inv_mix_columns(self) -> "State":
        b = self._b
        m9, mb, md, me = MUL[9], MUL[11], MUL[13], MUL[14]
        for c in range(0, BLOCK_SIZE, NB):
            s0, s1, s2, s3 = b[c:c + NB]
            b[c:c + NB] = bytes((
                me[s0] ^ mb[s1] ^ md[s2] ^ m9[s3],
                m9[s0] ^ me[s1] ^ mb[s2] ^ md[s3],
                md[s0] ^ m9[s1] ^ me[s2] ^ mb[s3],
                mb[s0] ^ md[s1] ^ m9[s2] ^ me[s3],
            ))
        return self

    # =========================
    # AddRoundKey (sec. 5.1.4)
    # =========================

    def add_round_key(self, words: Sequence[bytes]) -> "State":
        """XOR round-key word c into column c (its own inverse)."""
        if len(words) != NB:
            raise ValueError(f"round key must be {NB} words, got {len(words)}")
        b = self._b
        for c, word in enumerate(words):
            base = NB * c
            for r in range(NB):
                b[base + r] ^= word[r]
        return self
