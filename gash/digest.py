# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

import copy
import sys

from .utils import _, npack


class Digest:
    """Fixed-width digest value

    Holds the result of a hash as a list of 32-bit words.  The number of
    words is fixed by reset() and only the values change afterwards.
    """

    def __init__(self, bits=32):
        self.words = []
        self.little_endian = None
        self.reset(bits)

    def __repr__(self):
        return "<Digest: {} bits, {}>".format(self.bits, self.hexdigest())

    def __str__(self):
        return self.hexdigest()

    def __eq__(self, other):
        if not isinstance(other, Digest):
            return NotImplemented
        return self.words == other.words

    def __ne__(self, other):
        r = self.__eq__(other)
        if r is NotImplemented:
            return r
        return not r

    def __len__(self):
        return len(self.words)

    @property
    def bits(self):
        return len(self.words) * 32

    def reset(self, bits):
        """Zero the digest, sized to the given number of bits"""
        if bits <= 0 or bits % 32:
            raise ValueError(_("Digest size must be a positive multiple of 32 bits"))
        self.words = [0] * (bits // 32)
        if self.little_endian is None:
            self.little_endian = sys.byteorder == "little"

    def copy(self):
        c = copy.copy(self)
        c.words = list(self.words)
        return c

    def hexdigest(self):
        return "".join("{:08x}".format(word) for word in self.words)

    as_string = hexdigest

    def as_array(self, store=None):
        """Copy the words to store, in digest order

        If store is None, a new list is returned.
        """
        if store is None:
            return list(self.words)
        if len(store) < len(self.words):
            raise ValueError(
                _("Store must hold at least {} words").format(len(self.words))
            )
        store[: len(self.words)] = self.words
        return store

    def digest(self):
        return npack(self.words)
