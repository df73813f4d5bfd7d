"""
aes_field.py — arithmetic in GF(2^8) modulo x^8 + x^4 + x^3 + x + 1.

Bytes are field elements; addition is XOR. Multiplication is built from
repeated doubling (xtime), FIPS-197 sec. 4.2.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from typing import Dict

# Low byte of the reduction polynomial 0x11B
REDUCTION = 0x1B


def multiply_by_two(a: int) -> int:
    """xtime(): multiply by {02}, reducing when the high bit shifts out."""
    a <<= 1
    if a & 0x100:
        a ^= REDUCTION
    return a & 0xFF

def multiply(a: int, b: int) -> int:
    """Russian-peasant multiplication over the 8 bits of b."""
    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        a = multiply_by_two(a)
        b >>= 1
    return product


# Lookup tables for the constants used by (Inv)MixColumns
MUL: Dict[int, bytes] = {
    n: bytes(multiply(n, x) for x in range(256))
    for n in (2, 3, 9, 11, 13, 14)
}
