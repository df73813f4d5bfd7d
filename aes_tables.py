"""
aes_tables.py — fixed substitution boxes and round constants.

S_BOX and INV_S_BOX are embedded literals (FIPS-197 fig. 7 and fig. 14);
derive_sboxes() rebuilds both from the field so the literals can be checked.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from typing import Tuple

from aes_field import multiply, multiply_by_two

# =========================
# Substitution boxes
# =========================

S_BOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d8311504c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f8453d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa851a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d197360814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df8ca1890dbfe6426841992d0fb054bb16"
)

INV_S_BOX = bytes.fromhex(
    "52096ad53036a538bf40a39e81f3d7fb7ce339829b2fff87348e4344c4dee9cb"
    "547b9432a6c2233dee4c950b42fac34e082ea16628d924b2765ba2496d8bd125"
    "72f8f66486689816d4a45ccc5d65b6926c704850fdedb9da5e154657a78d9d84"
    "90d8ab008cbcd30af7e45805b8b34506d02c1e8fca3f0f02c1afbd0301138a6b"
    "3a9111414f67dcea97f2cfcef0b4e67396ac7422e7ad3585e2f937e81c75df6e"
    "47f11a711d29c5896fb7620eaa18be1bfc563e4bc6d279209adbc0fe78cd5af4"
    "1fdda8338807c731b11210592780ec5f60517fa919b54a0d2de57a9f93c99cef"
    "a0e03b4dae2af5b0c8ebbb3c83539961172b047eba77d626e169146355210c7d"
)


def substitute(b: int) -> int:
    return S_BOX[b]

def inv_substitute(b: int) -> int:
    return INV_S_BOX[b]


# =========================
# Round constants
# =========================

def _round_constants() -> Tuple[int, ...]:
    # Index 0 is never referenced; entry i is x^(i-1) in the field.
    rcon = [0x00]
    x = 0x01
    for _ in range(10):
        rcon.append(x)
        x = multiply_by_two(x)
    return tuple(rcon)

RCON = _round_constants()


# =========================
# Derivation (verification only)
# =========================

def _rotl8(x: int, n: int) -> int:
    return ((x << n) | (x >> (8 - n))) & 0xFF

def _affine(v: int) -> int:
    return v ^ _rotl8(v, 1) ^ _rotl8(v, 2) ^ _rotl8(v, 3) ^ _rotl8(v, 4) ^ 0x63

def derive_sboxes() -> Tuple[bytes, bytes]:
    """
    Rebuild (S_BOX, INV_S_BOX) from multiplicative inverses and the affine map.

    {03} generates the multiplicative group and {F6} is its inverse, so walking
    both powers in lockstep visits every nonzero p together with p^-1.
    """
    fwd = bytearray(256)
    inv = bytearray(256)
    fwd[0] = 0x63
    inv[0x63] = 0
    p = q = 1
    for _ in range(255):
        p = multiply(0x03, p)
        q = multiply(0xF6, q)
        v = _affine(q)
        fwd[p] = v
        inv[v] = p
    return bytes(fwd), bytes(inv)
