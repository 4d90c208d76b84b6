import hashlib
import unittest

from . import _test_module_init
from gash import sha256


class TestSHA256(unittest.TestCase):
    vectors = (
        (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
        (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
        (
            b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
            "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1",
        ),
    )

    def test_vectors(self):
        for (data, expected) in self.vectors:
            with self.subTest(data=data):
                self.assertEqual(sha256.new(data).hexdigest(), expected)

    def test_digest(self):
        data = b"The quick brown fox jumps over the lazy dog"
        self.assertEqual(sha256.new(data).digest(), hashlib.sha256(data).digest())

    def test_block_boundaries(self):
        for length in (55, 56, 57, 63, 64, 65, 119, 120, 128):
            data = bytes((i * 7) & 0xFF for i in range(length))
            with self.subTest(length=length):
                self.assertEqual(
                    sha256.new(data).hexdigest(), hashlib.sha256(data).hexdigest()
                )

    def test_padding(self):
        h = sha256.SHA256()
        self.assertEqual(len(h.padding(0)), 64)
        self.assertEqual(len(h.padding(55)), 9)
        self.assertEqual(len(h.padding(56)), 72)
        self.assertEqual(h.padding(3)[-8:], b"\x00\x00\x00\x00\x00\x00\x00\x18")

    def test_message_schedule(self):
        block = b"abc" + sha256.SHA256().padding(3)
        w = sha256.message_schedule(block)
        self.assertEqual(len(w), 64)
        self.assertEqual(w[0], 0x61626380)
        self.assertEqual(w[15], 0x00000018)
        self.assertEqual(w[16], 0x61626380)
        self.assertEqual(w[17], 0x000F0000)

    def test_functions(self):
        self.assertEqual(sha256.ch(0xFFFFFFFF, 0x12345678, 0x9ABCDEF0), 0x12345678)
        self.assertEqual(sha256.ch(0, 0x12345678, 0x9ABCDEF0), 0x9ABCDEF0)
        self.assertEqual(sha256.maj(0xFFFFFFFF, 0, 0x12345678), 0x12345678)
        self.assertEqual(sha256.small_sigma0(0x80000000), 0x11002000)

    def test_module_init(self):
        self.assertTrue(_test_module_init(sha256))
