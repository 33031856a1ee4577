#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

TREEPATCH_PATH = HERE / "treepatch"


def get_version(path):
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"$', f.read(), re.M)
    return match.group(1)


VERSION = get_version(TREEPATCH_PATH / '_version.py')

if __name__ == '__main__':
    setup(
      version=VERSION,
      )
