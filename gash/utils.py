# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

import gettext
import platform
import sys

try:
    import distro
except ImportError as e:
    distro = e


_ = gettext.translation("gash", fallback=True).gettext


def npack(words, minimum=1):
    """Pack 32-bit words to network bytes

    Takes an iterable of ints and packs each to 4 network (big-endian)
    bytes, in order.  If minimum is specified, bytes output is padded
    with zero'd bytes at the front.
    """
    out = bytearray()
    for word in words:
        out += (word & 0xFFFFFFFF).to_bytes(4, "big")
    out_len = len(out)
    if out_len < minimum:
        out = bytearray(minimum - out_len) + out
    return bytes(out)


def open_file(filename):
    """Open a file for hashing

    Returns a binary file object.  "-" is standard input.  OSError is
    raised if the file cannot be opened.
    """
    if filename == "-":
        return sys.stdin.buffer
    return open(filename, "rb")


def platform_info():
    """Return a string containing platform/OS information"""
    platform_name = platform.system()
    platform_machine = platform.machine()
    platform_info = "{} {}".format(platform_name, platform_machine)
    distro_name = ""
    distro_version = ""
    distro_info = ""
    if not isinstance(distro, ImportError):
        if hasattr(distro, "name"):
            distro_name = distro.name()
        if hasattr(distro, "version"):
            distro_version = distro.version()
    if distro_name:
        distro_info = distro_name
        if distro_version:
            distro_info += " " + distro_version
        return "{} ({})".format(platform_info, distro_info)
    else:
        return platform_info
