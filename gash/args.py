# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

import argparse
import os
import sys

from . import __version__, algorithms
from .utils import _


def parse_args(argv=None):
    if argv is None:
        argv = sys.argv

    parser = argparse.ArgumentParser(
        description="Gash ({})".format(__version__),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        prog=os.path.basename(argv[0]),
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=__version__,
        help=_("report the program version"),
    )

    # Positionals
    parser.add_argument(
        "file",
        type=str,
        default=None,
        nargs="*",
        help=_("file to hash, or - for standard input"),
    )

    # Algorithm selection
    hash_group = parser.add_argument_group(title=_("hash algorithms"))
    hash_exclusive = hash_group.add_mutually_exclusive_group()
    hash_exclusive.add_argument(
        "--algorithm",
        "-a",
        dest="algorithm",
        type=str.lower,
        default=algorithms.default_algorithm,
        choices=sorted(algorithms.algorithm_map.keys()),
        help=_("hash algorithm"),
        metavar="NAME",
    )
    for (name, (hash_class, hash_label)) in algorithms.algorithm_map.items():
        # -md5 etc. are accepted for compatibility with the original tool
        hash_exclusive.add_argument(
            "--{}".format(name),
            "-{}".format(name),
            dest="algorithm",
            action="store_const",
            const=name,
            default=argparse.SUPPRESS,
            help=_("{} digest").format(hash_label),
        )

    # Other options
    parser.add_argument(
        "--credits", "-c", action="store_true", help=_("display the credits")
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help=_("verbose mode")
    )
    parser.add_argument("--debug", action="store_true", help=_("debug mode"))

    args = parser.parse_args(args=argv[1:])

    if (not args.file) and (not args.credits):
        parser.print_help()
        parser.exit()

    if args.debug:
        args.verbose = True

    return args
