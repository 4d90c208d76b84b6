# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

import logging
import sys

from . import __version__, algorithms
from .args import parse_args
from .utils import _, open_file, platform_info


version_string = "Gash {} - {}".format(__version__, platform_info())

credits_text = _(
    """Gash {version}

Message digests:
    Adler-32, CRC-32, ELF hash, MD5 (RFC 1321), SHA-256 (FIPS 180-2)

Based on the gash C++ hashing library by Gary Hammock, PE."""
)


class Gash:
    def __init__(self, args):
        self.args = args

        self.logger = logging.getLogger()

        (self.hash_class, self.hash_label) = algorithms.lookup(self.args.algorithm)

    def print_out(self, *args, **kwargs):
        print(*args, **kwargs)

    def print_err(self, *args, **kwargs):
        print(*args, file=sys.stderr, **kwargs)

    def print_credits(self):
        self.print_out(credits_text.format(version=__version__))

    def hash_file(self, filename):
        """Hash one file and print the result

        Returns False if the file could not be opened.
        """
        try:
            f = open_file(filename)
        except OSError as e:
            self.logger.debug("{}: {}".format(filename, e))
            self.print_err(_('Error: could not open file "{}".').format(filename))
            return False

        h = self.hash_class()
        try:
            h.compute_file(f)
        finally:
            if f is not sys.stdin.buffer:
                f.close()

        if self.args.verbose:
            self.print_out(_("File: {}").format(filename))
        self.print_out("{}: {}".format(self.hash_label, h.hexdigest()))
        return True

    def run(self):
        self.logger.debug(version_string)

        if self.args.credits:
            self.print_credits()
            return 0

        ret = 0
        for filename in self.args.file:
            if not self.hash_file(filename):
                ret = 1
        return ret


def main(argv=None):
    if argv is None:
        argv = sys.argv

    args = parse_args(argv)
    t = Gash(args)

    if t.args.debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    return t.run()


def module_init():
    if __name__ == "__main__":
        sys.exit(main(sys.argv))


module_init()
