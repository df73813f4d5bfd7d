"""
aes_cipher.py — AES block cipher (FIPS-197), one 16-byte block at a time.

Public API
----------
AESCipher(key)                 # key: 16, 24, or 32 bytes, else InvalidKey
AESCipher.encrypt(block)       # 16 bytes in, 16 bytes out
AESCipher.decrypt(block)       # 16 bytes in, 16 bytes out
AESCipher.info()               # small diagnostics dict

The key schedule is expanded once in the constructor and never mutated, so a
single instance can serve any number of threads. Each call works on its own
State.

Env:
  AES_TRACE_ROUNDS=1   log every intermediate State at DEBUG (FIPS-197 app. B
                       layout); read once at import.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import logging
import os
from typing import Tuple

from aes_bytes import BLOCK_SIZE, as_bytes, require_block
from aes_errors import InvalidKey
from aes_key_schedule import KEY_SIZES, AESVariant, RoundKeySchedule, expand_key, select_variant
from aes_state import NB, State

log = logging.getLogger(__name__)

TRACE_ROUNDS = os.getenv("AES_TRACE_ROUNDS", "").strip().lower() in ("1", "true", "yes", "on")


def _trace(state: State, rnd: int, step: str) -> None:
    if TRACE_ROUNDS and log.isEnabledFor(logging.DEBUG):
        log.debug("round[%2d].%-9s %s", rnd, step, state.hex())


class AESCipher:
    """Block cipher bound to one key."""

    __slots__ = ("_variant", "_w", "_round_keys")

    def __init__(self, key: bytes) -> None:
        key = as_bytes(key, "key")
        variant = select_variant(len(key))
        if variant is None:
            raise InvalidKey(f"key must be one of {KEY_SIZES} bytes, got {len(key)}")
        self._variant = variant
        self._w = expand_key(key)
        assert len(self._w) == variant.schedule_words
        self._round_keys: Tuple[RoundKeySchedule, ...] = tuple(
            self._w[i:i + NB] for i in range(0, len(self._w), NB)
        )
        log.debug("expanded %s key into %d round-key words", variant.name, len(self._w))

    # =========================
    # Introspection
    # =========================

    @property
    def variant(self) -> AESVariant:
        return self._variant

    @property
    def rounds(self) -> int:
        return self._variant.rounds

    @property
    def key_size(self) -> int:
        return self._variant.key_length

    @property
    def round_keys(self) -> RoundKeySchedule:
        """The full expanded schedule as 4-byte words."""
        return self._w

    def round_key(self, rnd: int) -> RoundKeySchedule:
        return self._round_keys[rnd]

    def info(self) -> dict:
        return {
            "name": self._variant.name,
            "key_bits": 8 * self._variant.key_length,
            "rounds": self._variant.rounds,
            "block_size": BLOCK_SIZE,
            "round_key_words": len(self._w),
        }

    # =========================
    # Cipher (sec. 5.1)
    # =========================

    def encrypt(self, block: bytes) -> bytes:
        state = State(require_block(block, "block"))
        nr = self._variant.rounds
        keys = self._round_keys

        _trace(state, 0, "input")
        state.add_round_key(keys[0])
        for rnd in range(1, nr):
            _trace(state, rnd, "start")
            state.sub_bytes()
            _trace(state, rnd, "s_box")
            state.shift_rows()
            _trace(state, rnd, "s_row")
            state.mix_columns()
            _trace(state, rnd, "m_col")
            state.add_round_key(keys[rnd])
        _trace(state, nr, "start")
        state.sub_bytes().shift_rows().add_round_key(keys[nr])
        _trace(state, nr, "output")
        return state.to_bytes()

    # =========================
    # Inverse cipher (sec. 5.3)
    # =========================

    def decrypt(self, block: bytes) -> bytes:
        state = State(require_block(block, "block"))
        nr = self._variant.rounds
        keys = self._round_keys

        _trace(state, 0, "iinput")
        state.add_round_key(keys[nr])
        for rnd in range(nr - 1, 0, -1):
            _trace(state, nr - rnd, "istart")
            state.inv_shift_rows()
            _trace(state, nr - rnd, "is_row")
            state.inv_sub_bytes()
            _trace(state, nr - rnd, "is_box")
            state.add_round_key(keys[rnd])
            _trace(state, nr - rnd, "ik_add")
            state.inv_mix_columns()
        _trace(state, nr, "istart")
        state.inv_shift_rows().inv_sub_bytes().add_round_key(keys[0])
        _trace(state, nr, "ioutput")
        return state.to_bytes()

    def __repr__(self) -> str:
        return f"AESCipher({self._variant.name})"
