# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

import copy
import io
import logging
import sys

from .digest import Digest
from .utils import _

MASK32 = 0xFFFFFFFF


def rotl(value, shift):
    """32-bit left circular shift"""
    value &= MASK32
    return ((value << shift) | (value >> (32 - shift))) & MASK32


def rotr(value, shift):
    """32-bit right circular shift"""
    value &= MASK32
    return ((value >> shift) | (value << (32 - shift))) & MASK32


class MessageHash:
    """Base class for the message digest algorithms

    Subclasses implement _start(), _update() and _finish().  compute()
    accepts bytes-like objects, str, or a readable binary file object,
    and always starts from a zeroed digest.
    """

    name = None
    digest_size = 4
    block_size = 64
    read_size = io.DEFAULT_BUFFER_SIZE

    def __init__(self, data=None):
        self.logger = logging.getLogger()
        self._digest = Digest(self.digest_size * 8)
        if data is not None:
            self.compute(data)

    def __repr__(self):
        return "<{}: {}>".format(self.__class__.__name__, self.hexdigest())

    def __str__(self):
        return self.hexdigest()

    def __eq__(self, other):
        if not isinstance(other, MessageHash):
            return NotImplemented
        return self._digest == other._digest

    def __ne__(self, other):
        r = self.__eq__(other)
        if r is NotImplemented:
            return r
        return not r

    @property
    def bits(self):
        return self.digest_size * 8

    @property
    def value(self):
        return self._digest

    def compute(self, data):
        if isinstance(data, str):
            return self.compute_text(data)
        if hasattr(data, "read"):
            return self.compute_file(data)
        return self.compute_bytes(data)

    def compute_text(self, text, encoding="utf-8"):
        return self.compute_bytes(text.encode(encoding))

    def compute_bytes(self, data):
        if isinstance(data, str):
            raise TypeError(_("Text must be passed to compute_text()"))
        data = bytes(memoryview(data))
        self._digest.reset(self.bits)
        self._start()
        self._update(data)
        self._finish(len(data))
        return self._digest

    def compute_file(self, file):
        """Hash a binary file object from its current position to EOF

        If the file cannot be read, the all-zero digest is returned
        instead of raising.  Either way, the file is rewound to the
        beginning afterwards, if it is seekable.
        """
        self._digest.reset(self.bits)
        self._start()
        length = 0
        try:
            while True:
                buf = file.read(self.read_size)
                if not buf:
                    break
                if isinstance(buf, str):
                    raise ValueError(_("File is not opened in binary mode"))
                self._update(buf)
                length += len(buf)
        except (OSError, ValueError) as e:
            self.logger.debug("Could not read {!r}, using zero digest: {}".format(file, e))
            self._digest.reset(self.bits)
            return self._digest
        finally:
            self._rewind(file)
        self.logger.debug("Read {} bytes from {!r}".format(length, file))
        self._finish(length)
        return self._digest

    def _rewind(self, file):
        try:
            file.seek(0)
        except (OSError, ValueError) as e:
            self.logger.debug("Could not rewind {!r}: {}".format(file, e))

    def _start(self):
        raise NotImplementedError()

    def _update(self, buf):
        raise NotImplementedError()

    def _finish(self, length):
        raise NotImplementedError()

    def clear(self):
        self._digest.reset(self.bits)

    def copy(self):
        c = copy.copy(self)
        c._digest = self._digest.copy()
        return c

    def as_array(self, store=None):
        return self._digest.as_array(store)

    def digest(self):
        return self._digest.digest()

    def hexdigest(self):
        return self._digest.hexdigest()


class BlockHash(MessageHash):
    """Merkle-Damgard hash over 512-bit blocks

    The message is followed by 0x80, zero bytes up to 56 mod 64, and
    the 64-bit message length in bits, in length_byteorder.
    """

    block_size = 64
    length_byteorder = "big"
    initial_state = ()

    def _start(self):
        self._state = list(self.initial_state)
        self._buffer = bytearray()

    def _update(self, buf):
        self._buffer += buf
        full = len(self._buffer) - (len(self._buffer) % self.block_size)
        for i in range(0, full, self.block_size):
            self._compress(self._buffer[i : i + self.block_size])
        del self._buffer[:full]

    def _finish(self, length):
        self._update(self.padding(length))
        # Padding always ends on a block boundary
        assert not self._buffer
        self._digest.words[:] = self._output()
        self._state = None

    def padding(self, length):
        """Return the padding for a message of length bytes"""
        zeros = (self.block_size - 9 - length) % self.block_size
        bit_length = (length * 8) & 0xFFFFFFFFFFFFFFFF
        return b"\x80" + bytes(zeros) + bit_length.to_bytes(8, self.length_byteorder)

    def _compress(self, block):
        raise NotImplementedError()

    def _output(self):
        return self._state


def hash_main(new, argv=None):
    """Print the hex digest and name of each file in argv[1:]

    Standard input is used if no files are given, or for "-".
    """
    if argv is None:
        argv = sys.argv

    files = argv[1:]
    if len(files) == 0:
        files = ["-"]

    for file in files:
        h = new()
        if file == "-":
            h.compute_file(sys.stdin.buffer)
        else:
            with open(file, "rb") as f:
                h.compute_file(f)
        print("{}\t{}".format(h.hexdigest(), file))

    return 0
