# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

from . import adler32, crc32, elf, md5, sha256
from .utils import _

# name: (hash class, display label)
algorithm_map = {
    "md5": (md5.MD5, "MD5"),
    "sha256": (sha256.SHA256, "SHA-256"),
    "crc32": (crc32.CRC32, "CRC-32"),
    "crc": (crc32.CRC32, "CRC-32"),
    "elf": (elf.ELF, "ELF"),
    "adler32": (adler32.Adler32, "Adler-32"),
}

default_algorithm = "md5"


def lookup(name):
    """Return (hash class, display label) for an algorithm name"""
    try:
        return algorithm_map[name.lower()]
    except KeyError:
        raise ValueError(_("Unknown algorithm: {}").format(name)) from None


def label(name):
    return lookup(name)[1]


def new(name, data=None):
    return lookup(name)[0](data)
