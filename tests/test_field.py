# test_field.py -- unit tests for aes_field.py

import unittest

from aes_field import MUL, multiply, multiply_by_two


class TestMultiplyByTwo(unittest.TestCase):

    def test_doubling_chain(self):
        # FIPS-197 sec. 4.2.1
        chain = [0x57]
        for _ in range(4):
            chain.append(multiply_by_two(chain[-1]))
        self.assertEqual(chain, [0x57, 0xae, 0x47, 0x8e, 0x07])

    def test_no_reduction_below_high_bit(self):
        self.assertEqual(multiply_by_two(0x01), 0x02)
        self.assertEqual(multiply_by_two(0x7f), 0xfe)

    def test_reduction_on_overflow(self):
        self.assertEqual(multiply_by_two(0x80), 0x1b)

    def test_result_is_a_byte(self):
        for a in range(256):
            self.assertLess(multiply_by_two(a), 256)


class TestMultiply(unittest.TestCase):

    def test_published_products(self):
        self.assertEqual(multiply(0x57, 0x83), 0xc1)
        self.assertEqual(multiply(0x57, 0x13), 0xfe)

    def test_identity_and_zero(self):
        for a in (0x00, 0x01, 0x53, 0xff):
            self.assertEqual(multiply(a, 1), a)
            self.assertEqual(multiply(a, 0), 0)

    def test_commutative(self):
        for a, b in ((0x57, 0x83), (0x02, 0xca), (0xff, 0x0e)):
            self.assertEqual(multiply(a, b), multiply(b, a))

    def test_known_inverse_pair(self):
        self.assertEqual(multiply(0x53, 0xca), 0x01)
        self.assertEqual(multiply(0x03, 0xf6), 0x01)

    def test_two_matches_doubling(self):
        for a in range(256):
            self.assertEqual(multiply(2, a), multiply_by_two(a))


class TestMulTables(unittest.TestCase):

    def test_tables_match_multiply(self):
        for n, table in MUL.items():
            self.assertEqual(len(table), 256)
            for x in (0x00, 0x01, 0x57, 0x80, 0xff):
                self.assertEqual(table[x], multiply(n, x))


if __name__ == "__main__":
    unittest.main()
