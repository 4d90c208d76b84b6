# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

"""ELF hash, as used for symbol lookup in System V ELF objects"""

import sys

from .hash_abstract import MessageHash, hash_main

digest_size = 4


class ELF(MessageHash):
    name = "elf"
    digest_size = 4
    block_size = 1

    def _start(self):
        self._h = 0

    def _update(self, buf):
        h = self._h
        for v in buf:
            h = ((h << 4) + v) & 0xFFFFFFFF
            top = h & 0xF0000000
            if top:
                h ^= top >> 24
            h &= ~top
        self._h = h

    def _finish(self, length):
        self._digest.words[0] = self._h


def new(buf=None):
    return ELF(buf)


def main(argv=None):
    return hash_main(new, argv)


def module_init():
    if __name__ == "__main__":
        sys.exit(main(sys.argv))


module_init()
