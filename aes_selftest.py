#!/usr/bin/env python3
"""
aes_selftest.py — known-answer self-test for AESCipher and its two modes.

- FIPS-197 app. C single-block vectors for 128/192/256-bit keys (both ways).
- CBC and CTR vectors: unaligned, aligned, and empty messages.
- Random round trips for every key size over boundary message lengths.
- Rejection checks: bad key length, short/unaligned CBC ciphertext.
- Treats the cipher class as a black box: any AESCipher subclass will do,
  so patched or instrumented ciphers can be checked the same way.

Usage:
    import aes_selftest
    report = aes_selftest.run_self_test()
    assert report["all_passed"]

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import secrets
from typing import Any, Dict, Type

from aes_cbc import CBCMode
from aes_cipher import AESCipher
from aes_ctr import CTRMode
from aes_errors import InvalidCiphertextLength, InvalidKey

_h = bytes.fromhex

# FIPS-197 appendix C: (key, plaintext, ciphertext)
BLOCK_VECTORS = {
    "aes128": (
        _h("000102030405060708090a0b0c0d0e0f"),
        _h("00112233445566778899aabbccddeeff"),
        _h("69c4e0d86a7b0430d8cdb78070b4c55a"),
    ),
    "aes192": (
        _h("000102030405060708090a0b0c0d0e0f1011121314151617"),
        _h("00112233445566778899aabbccddeeff"),
        _h("dda97ca4864cdfe06eaf70a0ec0d7191"),
    ),
    "aes256": (
        _h("000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"),
        _h("00112233445566778899aabbccddeeff"),
        _h("8ea2b7ca516745bfeafc49904b496089"),
    ),
}

MODE_KEY = _h("2b7e151628aed2a6abf7158809cf4f3c")
MODE_IV = _h("3243f6a8885a308d313198a2e0370734")

MESSAGE_UNALIGNED = b"This is a message. It will be encrypted. Yay!"
MESSAGE_ALIGNED = b"This is another message. Yippee!"

# name -> (message, ciphertext)
CBC_VECTORS = {
    "unaligned": (MESSAGE_UNALIGNED, _h(
        "3243f6a8885a308d313198a2e0370734993a3e74628b7e6209de5cfb7aa5bc0b"
        "65c83f5e7e8028588f4e7c7e1e72223308267cecf16b0424a6c0c00fbabf086d")),
    "aligned": (MESSAGE_ALIGNED, _h(
        "3243f6a8885a308d313198a2e037073464ade8df7c6ef2959a6301242b160856"
        "b32e464233d5d8727a1760b6b081cb56e1d844049d57df1f921f1b8a15f0d5fc")),
    "empty": (b"", _h(
        "3243f6a8885a308d313198a2e0370734f6c7cfe173c8a95054e5f36b0a498d77")),
}

CTR_VECTORS = {
    "unaligned": (MESSAGE_UNALIGNED, _h(
        "3243f6a8885a308d313198a2e03707346d4ded6e22b57adbbd31e8f26a196a55"
        "558c7d2328b5aa8b556b78d335df15562b6873dc1d278e5162345b22f5")),
    "aligned": (MESSAGE_ALIGNED, _h(
        "3243f6a8885a308d313198a2e03707346d4ded6e22b57adbbd7feae3710f7912"
        "5dc72e193df2b8cc195e31c1209a1519")),
    "empty": (b"", MODE_IV),
}

ROUND_TRIP_LENGTHS = (0, 1, 15, 16, 17, 31, 32, 33, 100)


def _ok(why: str = "") -> Dict[str, Any]:
    return {"ok": True, "why": why}

def _fail(why: str) -> Dict[str, Any]:
    return {"ok": False, "why": why}

def _expect_error(fn, exc_type) -> Dict[str, Any]:
    try:
        fn()
    except exc_type:
        return _ok()
    except Exception as e:
        return _fail(f"unexpected {type(e).__name__}: {e}")
    return _fail(f"expected {exc_type.__name__}, call succeeded")


def run_self_test(cipher_cls: Type[AESCipher] = AESCipher) -> Dict[str, Any]:
    tests: Dict[str, Dict[str, Any]] = {}

    # 1) Single-block known answers
    for name, (key, pt, ct) in BLOCK_VECTORS.items():
        try:
            cipher = cipher_cls(key)
            if cipher.encrypt(pt) != ct:
                tests[f"block_{name}"] = _fail("encrypt mismatch")
            elif cipher.decrypt(ct) != pt:
                tests[f"block_{name}"] = _fail("decrypt mismatch")
            else:
                tests[f"block_{name}"] = _ok()
        except Exception as e:
            tests[f"block_{name}"] = _fail(f"exception: {e}")

    # 2) Mode known answers
    cipher = cipher_cls(MODE_KEY)
    for mode_name, mode, vectors in (("cbc", CBCMode(cipher), CBC_VECTORS),
                                     ("ctr", CTRMode(cipher), CTR_VECTORS)):
        for name, (msg, ct) in vectors.items():
            try:
                if mode.encrypt(MODE_IV, msg) != ct:
                    tests[f"{mode_name}_{name}"] = _fail("encrypt mismatch")
                elif mode.decrypt(ct) != msg:
                    tests[f"{mode_name}_{name}"] = _fail("decrypt mismatch")
                else:
                    tests[f"{mode_name}_{name}"] = _ok()
            except Exception as e:
                tests[f"{mode_name}_{name}"] = _fail(f"exception: {e}")

    # 3) Random round trips
    try:
        bad = []
        for key_len in (16, 24, 32):
            c = cipher_cls(secrets.token_bytes(key_len))
            for mode in (CBCMode(c), CTRMode(c)):
                for n in ROUND_TRIP_LENGTHS:
                    msg = secrets.token_bytes(n)
                    iv = secrets.token_bytes(16)
                    if mode.decrypt(mode.encrypt(iv, msg)) != msg:
                        bad.append(f"{type(mode).__name__}/{key_len}/{n}")
        tests["round_trip"] = _ok() if not bad else _fail("mismatch: " + ", ".join(bad))
    except Exception as e:
        tests["round_trip"] = _fail(f"exception: {e}")

    # 4) Rejections
    tests["reject_key_length"] = _expect_error(lambda: cipher_cls(bytes(20)), InvalidKey)
    cbc = CBCMode(cipher)
    tests["reject_cbc_one_block"] = _expect_error(lambda: cbc.decrypt(MODE_IV), InvalidCiphertextLength)
    tests["reject_cbc_unaligned"] = _expect_error(lambda: cbc.decrypt(MODE_IV + b"\x00" * 17),
                                                  InvalidCiphertextLength)

    return {
        "engine": cipher_cls.__name__,
        "all_passed": all(t["ok"] for t in tests.values()),
        "tests": tests,
    }


if __name__ == "__main__":  # pragma: no cover
    rep = run_self_test()
    print(f"Engine: {rep['engine']}")
    print("All passed:", rep["all_passed"])
    for name, r in rep["tests"].items():
        status = "OK " if r["ok"] else "FAIL"
        why = ("" if r["ok"] else f"  ({r['why']})")
        print(f" - {name:22s}: {status}{why}")
