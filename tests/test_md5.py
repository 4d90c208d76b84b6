import hashlib
import unittest

from . import _test_module_init
from gash import md5


class TestMD5(unittest.TestCase):
    # RFC 1321, appendix A.5
    vectors = (
        (b"", "d41d8cd98f00b204e9800998ecf8427e"),
        (b"a", "0cc175b9c0f1b6a831c399e269772661"),
        (b"abc", "900150983cd24fb0d6963f7d28e17f72"),
        (b"message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
        (b"abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
        (
            b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
            "d174ab98d277d9f5a5611c2c9f419d9f",
        ),
        (
            b"1234567890" * 8,
            "57edf4a22be3c955ac49da2e2107b67a",
        ),
    )

    def test_vectors(self):
        for (data, expected) in self.vectors:
            with self.subTest(data=data):
                self.assertEqual(md5.new(data).hexdigest(), expected)

    def test_digest(self):
        data = b"The quick brown fox jumps over the lazy dog"
        self.assertEqual(md5.new(data).digest(), hashlib.md5(data).digest())

    def test_words(self):
        self.assertEqual(
            md5.new(b"abc").as_array(),
            [0x90015098, 0x3CD24FB0, 0xD6963F7D, 0x28E17F72],
        )

    def test_block_boundaries(self):
        for length in (55, 56, 57, 63, 64, 65, 119, 120, 128):
            data = bytes(i & 0xFF for i in range(length))
            with self.subTest(length=length):
                self.assertEqual(
                    md5.new(data).hexdigest(), hashlib.md5(data).hexdigest()
                )

    def test_padding(self):
        h = md5.MD5()
        self.assertEqual(len(h.padding(0)), 64)
        self.assertEqual(len(h.padding(55)), 9)
        self.assertEqual(len(h.padding(56)), 72)
        self.assertEqual(h.padding(3)[-8:], b"\x18\x00\x00\x00\x00\x00\x00\x00")

    def test_padding_large_length(self):
        # Lengths past 2^32 bits keep their high word
        h = md5.MD5()
        self.assertEqual(h.padding(2 ** 32)[-8:], (2 ** 35).to_bytes(8, "little"))

    def test_byteswap(self):
        self.assertEqual(md5.byteswap(0x01234567), 0x67452301)

    def test_module_init(self):
        self.assertTrue(_test_module_init(md5))
