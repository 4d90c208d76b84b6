import unittest

from . import _test_module_init
from gash import elf


class TestELF(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(elf.new(b"").hexdigest(), "00000000")

    def test_single(self):
        self.assertEqual(elf.new(b"a").hexdigest(), "00000061")
        self.assertEqual(elf.new(b"ab").hexdigest(), "00000672")

    def test_symbol(self):
        self.assertEqual(elf.new(b"printf").hexdigest(), "077905a6")

    def test_high_nibble(self):
        # The 7th byte pushes bits into the top nibble, which is folded
        # back in and cleared
        self.assertEqual(elf.new(b"printfs").hexdigest(), "07905aa3")

    def test_top_nibble_clear(self):
        h = elf.new(bytes(range(256)) * 4)
        self.assertEqual(h.as_array()[0] & 0xF0000000, 0)

    def test_module_init(self):
        self.assertTrue(_test_module_init(elf))
