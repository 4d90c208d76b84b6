# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

"""MD5 message digest, per RFC 1321"""

import struct
import sys

from .hash_abstract import MASK32, BlockHash, hash_main, rotl

digest_size = 16

# Chaining variables A, B, C, D
INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# floor(2^32 * abs(sin(i))), i = 1..64
STEP_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

ROUND_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)


def F(b, c, d):
    return (b & c) | (~b & d)


def G(b, c, d):
    return (b & d) | (c & ~d)


def H(b, c, d):
    return b ^ c ^ d


def I(b, c, d):
    return (c ^ (b | ~d)) & MASK32


# (function, message word index for step i of the round)
ROUNDS = (
    (F, lambda i: i),
    (G, lambda i: (5 * i + 1) % 16),
    (H, lambda i: (3 * i + 5) % 16),
    (I, lambda i: (7 * i) % 16),
)

# Message word order for all 64 steps
MESSAGE_ORDER = tuple(
    word_index(i) for (_f, word_index) in ROUNDS for i in range(16)
)


def byteswap(word):
    return int.from_bytes(word.to_bytes(4, "little"), "big")


class MD5(BlockHash):
    name = "md5"
    digest_size = 16
    length_byteorder = "little"
    initial_state = INITIAL_STATE

    def _compress(self, block):
        x = struct.unpack("<16I", block)
        (a, b, c, d) = self._state

        for step in range(64):
            round_num = step // 16
            func = ROUNDS[round_num][0]
            shift = ROUND_SHIFTS[round_num][step % 4]
            t = a + func(b, c, d) + x[MESSAGE_ORDER[step]] + STEP_CONSTANTS[step]
            (a, b, c, d) = (d, (b + rotl(t, shift)) & MASK32, b, c)

        self._state = [
            (s + v) & MASK32 for (s, v) in zip(self._state, (a, b, c, d))
        ]

    def _output(self):
        # A..D are little-endian on the wire; words are read big-endian
        return [byteswap(word) for word in self._state]


def new(buf=None):
    return MD5(buf)


def main(argv=None):
    return hash_main(new, argv)


def module_init():
    if __name__ == "__main__":
        sys.exit(main(sys.argv))


module_init()
