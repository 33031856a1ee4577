# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import io
import json
import os

from treepatch import patch
from treepatch.tree import values_equal


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


def load_test_suite(filename):
    "Load a list of test cases in the json-patch-tests format from tests/files."
    with io.open(pjoin(testspath(), "files", filename), encoding="utf8") as f:
        return json.load(f)


def check_patch(doc, operations, expected):
    "Check that patching doc gives expected and leaves doc untouched."
    original = copy.deepcopy(doc)
    result = patch(doc, operations)
    assert values_equal(result, expected), (result, expected)
    assert values_equal(doc, original)
    return result
