# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .patching import patch
from .patch_format import (
    PatchError, PatchSyntaxError, PatchPathError, PatchTestFailed,
    ErrorKind, status_code,
)
from .pointer import split_path
from .tree import get_value_at_path, remove_value_at_path, add_value_at_path


__all__ = [
    "__version__",
    "patch", "status_code", "ErrorKind",
    "PatchError", "PatchSyntaxError", "PatchPathError", "PatchTestFailed",
    "split_path",
    "get_value_at_path", "remove_value_at_path", "add_value_at_path",
    ]
