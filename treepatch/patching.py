# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from collections import namedtuple
from collections.abc import Mapping

from .log import debug
from .patch_format import (
    PatchOp, PatchError, PatchPathError, PatchSyntaxError, PatchTestFailed,
    validate_operation, DEFAULT_REPLACEMENT_CHARACTER, DEFAULT_JOINER,
)
from .tree import (
    get_value_at_path, remove_value_at_path, add_value_at_path,
    values_equal, is_number,
)


__all__ = ["patch", "patch_operation", "substitute_token"]


# Fallback values for optional operation fields
PatchDefaults = namedtuple("PatchDefaults", ["replacement_character", "joiner"])


def patch_test(doc, e, defaults):
    if not values_equal(get_value_at_path(doc, e["path"]), e["value"]):
        raise PatchTestFailed("test failed")
    return doc


def patch_add(doc, e, defaults):
    return add_value_at_path(doc, e["path"], e["value"])


def patch_remove(doc, e, defaults):
    return remove_value_at_path(doc, e["path"])


def patch_replace(doc, e, defaults):
    doc = remove_value_at_path(doc, e["path"])
    return add_value_at_path(doc, e["path"], e["value"])


def patch_move(doc, e, defaults):
    value = get_value_at_path(doc, e["from"])
    doc = remove_value_at_path(doc, e["from"])
    return add_value_at_path(doc, e["path"], value)


def patch_copy(doc, e, defaults):
    value = get_value_at_path(doc, e["from"])
    return add_value_at_path(doc, e["path"], copy.deepcopy(value))


def substitute_token(operations, token, replacement):
    """Replace every occurrence of token in the pointers of operations.

    Rewrites `path`, `from` (a pointer or a list of pointers) and,
    recursively, nested `sub_operations`. Returns new operation
    dicts and leaves the input untouched. Entries that are not
    operations are passed through for validation to reject.
    """
    def sub(value):
        if isinstance(value, str):
            return value.replace(token, replacement)
        elif isinstance(value, list):
            return [sub(v) for v in value]
        return value

    result = []
    for e in operations:
        if not isinstance(e, Mapping):
            result.append(e)
            continue
        e = dict(e)
        for key in ("path", "from"):
            if key in e:
                e[key] = sub(e[key])
        if isinstance(e.get("sub_operations"), list):
            e["sub_operations"] = substitute_token(
                e["sub_operations"], token, replacement)
        result.append(e)
    return result


def patch_iterate(doc, e, defaults):
    """Apply sub_operations once for each element of the array at path.

    On pass i the replacement token in the sub-operations' pointers
    is replaced by i. Every pass sees the document produced by the
    previous one, the number of passes is fixed up front.
    """
    array = get_value_at_path(doc, e["path"])
    if not isinstance(array, list):
        raise PatchPathError("can't iterate over value {!r}".format(array))
    token = e.get("replacement_character", defaults.replacement_character)
    if not token:
        raise PatchSyntaxError("`replacement_character` must not be empty")

    for i in range(len(array)):
        sub_operations = substitute_token(e["sub_operations"], token, str(i))
        doc = _patch(doc, sub_operations, defaults)
    return doc


def _as_text(value):
    if isinstance(value, str):
        return value
    elif is_number(value):
        return str(value)
    raise PatchPathError("can't join value {!r}".format(value))


def patch_join(doc, e, defaults):
    joiner = e.get("joiner", defaults.joiner)
    values = [get_value_at_path(doc, p) for p in e["from"]]
    return add_value_at_path(doc, e["path"], joiner.join(_as_text(v) for v in values))


def patch_sum(doc, e, defaults):
    total = 0
    for p in e["from"]:
        value = get_value_at_path(doc, p)
        if not is_number(value):
            raise PatchPathError("can't sum value {!r}".format(value))
        total += value
    return add_value_at_path(doc, e["path"], total)


_operations = {
    PatchOp.TEST: patch_test,
    PatchOp.ADD: patch_add,
    PatchOp.REMOVE: patch_remove,
    PatchOp.REPLACE: patch_replace,
    PatchOp.MOVE: patch_move,
    PatchOp.COPY: patch_copy,
    PatchOp.ITERATE: patch_iterate,
    PatchOp.JOIN: patch_join,
    PatchOp.SUM: patch_sum,
}


def patch_operation(doc, e, defaults=None):
    """Apply a single operation to doc and return the new document.

    Raises a PatchError subclass on failure, without the
    operation position in its description.
    """
    if defaults is None:
        defaults = PatchDefaults(DEFAULT_REPLACEMENT_CHARACTER, DEFAULT_JOINER)
    validate_operation(e)
    debug("Applying %s operation at %r", e["op"], e["path"])
    return _operations[e["op"]](doc, e, defaults)


def _patch(doc, operations, defaults):
    if not isinstance(operations, list):
        raise PatchSyntaxError("patch must be a list of operations")
    for i, e in enumerate(operations):
        try:
            doc = patch_operation(doc, e, defaults)
        except PatchError as err:
            raise err.augmented(i, e) from None
    return doc


def patch(doc, operations,
          replacement_character=DEFAULT_REPLACEMENT_CHARACTER,
          joiner=DEFAULT_JOINER):
    """Produce a patched version of doc with the given list of operations.

    Operations follow RFC 6902 (test, add, remove, replace, move,
    copy) with the extensions iterate, join and sum. They are
    applied in order, each to the document produced by the one
    before. doc itself is never modified, untouched parts of it are
    shared with the returned document.

    The first failing operation aborts the patch with a PatchError
    subclass whose description ends with the position and content
    of that operation, e.g. "test failed (patches[1], {...})".

    replacement_character and joiner are used by iterate and join
    operations that don't specify their own.
    """
    return _patch(doc, operations, PatchDefaults(replacement_character, joiner))
