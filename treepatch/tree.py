# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Reading and editing values in a document tree at a JSON Pointer.

None of the functions here modify their input. An edit returns a new
container for every node on the path from the root to the edit point,
all other subtrees are shared with the original document.
"""

from .patch_format import PatchPathError
from .pointer import split_path


__all__ = [
    "get_value_at_path", "remove_value_at_path", "add_value_at_path",
    "values_equal",
    ]


# Sentinel returned when a node should be dropped from its parent
Removed = object()


def _out_of_bounds(index):
    return PatchPathError("out-of-bounds index {}".format(index))


def _last_index(data):
    "Resolve the '-' token of a read or remove to the last array index."
    if not data:
        raise PatchPathError("can't use index '-' with empty array")
    return len(data) - 1


def _array_index(data, key):
    "Validate an existing-element array index for read and remove."
    if key == "-":
        return _last_index(data)
    if not isinstance(key, int):
        raise PatchPathError("can't index into array with string {}".format(key))
    if key >= len(data):
        raise _out_of_bounds(key)
    return key


def _get(data, tokens):
    for key in tokens:
        if isinstance(data, list):
            data = data[_array_index(data, key)]
        elif isinstance(data, dict):
            key = str(key)
            if key not in data:
                raise PatchPathError("missing key {}".format(key))
            data = data[key]
        else:
            raise PatchPathError("can't index into value {}".format(data))
    return data


def get_value_at_path(data, path):
    """Return the value at the JSON Pointer `path` in `data`.

    Raises PatchPathError if the path does not resolve.
    """
    return _get(data, split_path(path))


def _remove(data, tokens):
    if not tokens:
        return Removed

    key, rest = tokens[0], tokens[1:]
    if isinstance(data, list):
        index = _array_index(data, key)
        value = _remove(data[index], rest)
        if value is Removed:
            return data[:index] + data[index+1:]
        return data[:index] + [value] + data[index+1:]
    elif isinstance(data, dict):
        key = str(key)
        if key not in data:
            raise PatchPathError("missing key {}".format(key))
        value = _remove(data[key], rest)
        newobj = dict(data)
        if value is Removed:
            del newobj[key]
        else:
            newobj[key] = value
        return newobj
    else:
        raise PatchPathError("can't index into value {}".format(data))


def remove_value_at_path(data, path):
    """Return a copy of `data` with the value at `path` removed.

    Later array elements shift down to fill the gap. Removing
    the whole document (path "") gives None.
    """
    value = _remove(data, split_path(path))
    if value is Removed:
        return None
    return value


def _add(data, tokens, value):
    if not tokens:
        return value

    key, rest = tokens[0], tokens[1:]
    if isinstance(data, list):
        if key == "-" and not rest:
            return data + [value]
        if not isinstance(key, int):
            # Includes '-' followed by more tokens, there is no
            # element past the end to descend into
            raise PatchPathError("can't index into array with string {}".format(key))
        if key > len(data):
            raise _out_of_bounds(key)
        if not rest:
            return data[:key] + [value] + data[key:]
        # One past the end has no element to descend into, which
        # fails below like any other missing container
        child = data[key] if key < len(data) else None
        return data[:key] + [_add(child, rest, value)] + data[key+1:]
    elif isinstance(data, dict):
        key = str(key)
        newobj = dict(data)
        if rest:
            newobj[key] = _add(data.get(key), rest, value)
        else:
            newobj[key] = value
        return newobj
    else:
        raise PatchPathError("can't index into value {!r}".format(data))


def add_value_at_path(data, path, value):
    """Return a copy of `data` with `value` added at `path`.

    An array index inserts before the element currently at that
    index (an index equal to the array length, or '-', appends).
    An object key is set, replacing any existing value.
    """
    return _add(data, split_path(path), value)


def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_equal(a, b):
    """Structural equality of two document values.

    Object key order is irrelevant, array order is significant.
    Numbers compare by value (1 == 1.0), but booleans never
    equal numbers.
    """
    if isinstance(a, dict):
        if not isinstance(b, dict) or a.keys() != b.keys():
            return False
        return all(values_equal(a[k], b[k]) for k in a)
    elif isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    elif is_number(a):
        return is_number(b) and a == b
    elif isinstance(b, (dict, list)) or is_number(b):
        return False
    return type(a) is type(b) and a == b
