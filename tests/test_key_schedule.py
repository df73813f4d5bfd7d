# test_key_schedule.py -- unit tests for aes_key_schedule.py

import unittest

from aes_errors import InvalidKey
from aes_key_schedule import AESVariant, expand_key, rot_word, select_variant, sub_word

# FIPS-197 appendix A: (cipher key, full expanded schedule)
EXPANSIONS = {
    128: (
        "2b7e151628aed2a6abf7158809cf4f3c",
        "2b7e151628aed2a6abf7158809cf4f3ca0fafe1788542cb123a339392a6c7605f2c295f27a96b9435935807a"
        "7359f67f3d80477d4716fe3e1e237e446d7a883bef44a541a8525b7fb671253bdb0bad00d4d1c6f87c839d87"
        "caf2b8bc11f915bc6d88a37a110b3efddbf98641ca0093fd4e54f70e5f5fc9f384a64fb24ea6dc4fead27321"
        "b58dbad2312bf5607f8d292fac7766f319fadc2128d12941575c006ed014f9a8c9ee2589e13f0cc8b6630ca6",
    ),
    192: (
        "8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b",
        "8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7bfe0c91f72402f5a5ec12068e6c827f6b0e7a95b9"
        "5c56fec24db7b4bd69b5411885a74796e92538fde75fad44bb095386485af05721efb14fa448f6d94d6dce24"
        "aa326360113b30e6a25e7ed583b1cf9a27f939436a94f767c0a69407d19da4e1ec1786eb6fa64971485f7032"
        "22cb8755e26d135233f0b7b340beeb282f18a2596747d26b458c553ea7e1466c9411f1df821f750aad07d753"
        "ca4005388fcc5006282d166abc3ce7b5e98ba06f448c773c8ecc720401002202",
    ),
    256: (
        "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4",
        "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff49ba354118e6925afa51a8b5f"
        "2067fcdea8b09c1a93d194cdbe49846eb75d5b9ad59aecb85bf3c917fee94248de8ebe96b5a9328a2678a647"
        "983122292f6c79b3812c81addadf48ba24360af2fab8b46498c5bfc9bebd198e268c3ba709e0421468007bac"
        "b2df331696e939e46c518d80c814e20476a9fb8a5025c02d59c58239de1369676ccc5a71fa2563959674ee15"
        "5886ca5d2e2f31d77e0af1fa27cf73c3749c47ab18501ddae2757e4f7401905acafaaae3e4d59b349adf6ace"
        "bd10190dfe4890d1e6188d0b046df344706c631e",
    ),
}


class TestExpandKey(unittest.TestCase):

    def test_published_expansions(self):
        for bits, (key_hex, schedule_hex) in EXPANSIONS.items():
            with self.subTest(bits=bits):
                words = expand_key(bytes.fromhex(key_hex))
                self.assertEqual(b"".join(words).hex(), schedule_hex)

    def test_word_counts(self):
        for bits, count in ((128, 44), (192, 52), (256, 60)):
            words = expand_key(bytes(bits // 8))
            self.assertEqual(len(words), count)
            self.assertTrue(all(len(w) == 4 for w in words))

    def test_schedule_is_immutable(self):
        words = expand_key(bytes(16))
        self.assertIsInstance(words, tuple)
        self.assertIsInstance(words[0], bytes)

    def test_accepts_bytearray(self):
        key = bytes.fromhex(EXPANSIONS[128][0])
        self.assertEqual(expand_key(bytearray(key)), expand_key(key))

    def test_rejects_bad_lengths(self):
        for n in (0, 1, 15, 17, 20, 31, 33, 64, 512):
            with self.subTest(n=n):
                with self.assertRaises(InvalidKey):
                    expand_key(bytes(n))

    def test_rejects_non_bytes(self):
        with self.assertRaises(TypeError):
            expand_key("2b7e151628aed2a6abf7158809cf4f3c")


class TestVariants(unittest.TestCase):

    def test_select_variant(self):
        self.assertIs(select_variant(16), AESVariant.AES128)
        self.assertIs(select_variant(24), AESVariant.AES192)
        self.assertIs(select_variant(32), AESVariant.AES256)
        self.assertIsNone(select_variant(64))
        self.assertIsNone(select_variant(512))

    def test_parameters(self):
        self.assertEqual((AESVariant.AES128.nk, AESVariant.AES128.nr), (4, 10))
        self.assertEqual((AESVariant.AES192.nk, AESVariant.AES192.nr), (6, 12))
        self.assertEqual((AESVariant.AES256.nk, AESVariant.AES256.nr), (8, 14))
        self.assertEqual(AESVariant.AES256.schedule_words, 60)


class TestWordHelpers(unittest.TestCase):

    def test_sub_word_is_pure(self):
        before = bytearray(b"\x32\xab\x97\xa1")
        snapshot = bytes(before)
        after = sub_word(before)
        self.assertEqual(after, b"\x23\x62\x88\x32")
        self.assertEqual(before, snapshot)
        self.assertIsNot(after, before)

    def test_rot_word_is_pure(self):
        before = bytearray([10, 14, 0xfd, 6])
        snapshot = bytes(before)
        after = rot_word(before)
        self.assertEqual(after, bytes([14, 0xfd, 6, 10]))
        self.assertEqual(before, snapshot)


if __name__ == "__main__":
    unittest.main()
