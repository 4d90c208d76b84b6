# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

import sys

from .hash_abstract import MessageHash, hash_main

digest_size = 4
MOD_ADLER = 65521


class Adler32(MessageHash):
    name = "adler32"
    digest_size = 4
    block_size = 1

    def _start(self):
        self._a = 1
        self._b = 0

    def _update(self, buf):
        a = self._a
        b = self._b
        for v in buf:
            a = (a + v) % MOD_ADLER
            b = (b + a) % MOD_ADLER
        self._a = a
        self._b = b

    def _finish(self, length):
        self._digest.words[0] = (self._b << 16) | self._a


def new(buf=None):
    return Adler32(buf)


def main(argv=None):
    return hash_main(new, argv)


def module_init():
    if __name__ == "__main__":
        sys.exit(main(sys.argv))


module_init()
