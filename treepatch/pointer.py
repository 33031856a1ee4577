# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON Pointer (RFC 6901) handling.

A pointer such as "/foo/0/a~1b" is split into the tokens
["foo", 0, "a/b"]. Tokens that look like array indices become
integers, everything else stays a string. The special token "-"
is kept as a string, its meaning depends on the tree operation.
"""

import re

from .patch_format import PatchPathError


__all__ = ["split_path", "join_path", "escape_token", "unescape_token"]


# Array indices with leading zeros are invalid, so don't convert them
r_is_index = re.compile(r"^[1-9][0-9]*$")


def unescape_token(token):
    "Decode the ~1 and ~0 escapes of a pointer segment, in that order."
    return token.replace("~1", "/").replace("~0", "~")


def escape_token(token):
    "Encode a key so it can be used as a pointer segment."
    return str(token).replace("~", "~0").replace("/", "~1")


def _convert_token(segment):
    if segment == "0":
        return 0
    if r_is_index.match(segment):
        return int(segment)
    return unescape_token(segment)


def split_path(path):
    """Split a JSON Pointer on the form '/foo/2/bar' into ['foo', 2, 'bar'].

    The empty string denotes the whole document and gives [].
    Raises PatchPathError for null, non-string or relative pointers.
    """
    if path is None:
        raise PatchPathError("null is not valid value for 'path'")
    if not isinstance(path, str):
        raise PatchPathError(
            "JSON Pointer should be a string, not {}".format(type(path).__name__))
    if path == "":
        return []
    if not path.startswith("/"):
        raise PatchPathError("JSON Pointer should start with a slash")
    return [_convert_token(segment) for segment in path[1:].split("/")]


def join_path(tokens):
    "Join tokens on the form ['foo', 2, 'bar'] into the pointer '/foo/2/bar'."
    return "".join("/" + escape_token(t) for t in tokens)
