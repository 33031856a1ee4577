# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture

from .utils import testspath


schema_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory, with no user config in the Jupyter path."""
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmpdir.join('jupyter')))
    monkeypatch.setenv('JUPYTER_NO_CONFIG', '1')
    monkeypatch.chdir(str(tmpdir))
    return tmpdir


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)
