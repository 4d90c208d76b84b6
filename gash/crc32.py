# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

import sys

from .hash_abstract import MessageHash, hash_main

digest_size = 4
POLYNOMIAL = 0xEDB88320


def make_table(polynomial=POLYNOMIAL):
    """Build the 256-entry table for a bit-reversed CRC-32 polynomial"""
    table = []
    for i in range(256):
        value = i
        for _j in range(8):
            if value & 1:
                value = (value >> 1) ^ polynomial
            else:
                value >>= 1
        table.append(value)
    return tuple(table)


CRC_TABLE = make_table()


class CRC32(MessageHash):
    name = "crc32"
    digest_size = 4
    block_size = 1
    table = CRC_TABLE

    def _start(self):
        self._crc = 0xFFFFFFFF

    def _update(self, buf):
        crc = self._crc
        table = self.table
        for v in buf:
            crc = (crc >> 8) ^ table[(crc & 0xFF) ^ v]
        self._crc = crc

    def _finish(self, length):
        self._digest.words[0] = ~self._crc & 0xFFFFFFFF


def new(buf=None):
    return CRC32(buf)


def main(argv=None):
    return hash_main(new, argv)


def module_init():
    if __name__ == "__main__":
        sys.exit(main(sys.argv))


module_init()
