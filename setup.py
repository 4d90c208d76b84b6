#!/usr/bin/env python3

import os
import sys

from setuptools import setup


__version__ = "1.0.0"
assert sys.version_info > (3, 5)


def read(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding="utf-8") as f:
        return f.read()


setup(
    name="gash",
    description="gash - a message digest calculator",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    version=__version__,
    license="MPL-2.0",
    platforms=["Unix"],
    author="Gary Hammock",
    packages=["gash"],
    extras_require={
        "distro": ["distro"],
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Security :: Cryptography",
        "Topic :: Utilities",
    ],
    entry_points={"console_scripts": ["gash = gash.cli:main"]},
)
