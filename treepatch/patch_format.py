# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping


class ErrorKind:
    "Collection of valid values for the kind of a patch error."
    SYNTAX_ERROR = "syntax_error"
    PATH_ERROR = "path_error"
    TEST_FAILED = "test_failed"


_status_codes = {
    None: 200,
    ErrorKind.TEST_FAILED: 409,
    ErrorKind.PATH_ERROR: 422,
    ErrorKind.SYNTAX_ERROR: 400,
}


def status_code(kind=None):
    """Map an error kind to an HTTP status code.

    `kind` can be an error kind string, a PatchError instance,
    or None for a successfully applied patch:

    * 200 OK (success)
    * 400 Bad Request (the syntax of the patch was invalid)
    * 409 Conflict (a `test` operation inside the patch did not succeed)
    * 422 Unprocessable Entity (the patch refers to an invalid or nonexistent path)

    Unrecognized kinds map to 400.
    """
    if isinstance(kind, PatchError):
        if kind.kind is None:
            return 400
        kind = kind.kind
    return _status_codes.get(kind, 400)


class PatchError(ValueError):
    """Base class for all errors raised while applying a patch.

    The message is available as `description`, the error
    category as `kind`.
    """
    kind = None

    def __init__(self, description):
        super(PatchError, self).__init__(description)
        self.description = description

    @property
    def status_code(self):
        return status_code(self)

    def augmented(self, index, operation):
        "Return a copy of this error with the failing operation appended to the description."
        return self.__class__(
            "{} (patches[{}], {!r})".format(self.description, index, operation))


class PatchSyntaxError(PatchError):
    "The operation descriptor itself is malformed."
    kind = ErrorKind.SYNTAX_ERROR


class PatchPathError(PatchError):
    "A pointer cannot be resolved against the current document."
    kind = ErrorKind.PATH_ERROR


class PatchTestFailed(PatchError):
    "A `test` operation's value comparison did not hold."
    kind = ErrorKind.TEST_FAILED


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    TEST = "test"
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    ITERATE = "iterate"
    JOIN = "join"
    SUM = "sum"


DEFAULT_REPLACEMENT_CHARACTER = "$?"
DEFAULT_JOINER = ","


def op_test(path, value):
    "Create an operation checking that the value at path equals value."
    return {"op": PatchOp.TEST, "path": path, "value": value}

def op_add(path, value):
    "Create an operation adding value at path."
    return {"op": PatchOp.ADD, "path": path, "value": value}

def op_remove(path):
    "Create an operation removing the value at path."
    return {"op": PatchOp.REMOVE, "path": path}

def op_replace(path, value):
    "Create an operation replacing the value at path with value."
    return {"op": PatchOp.REPLACE, "path": path, "value": value}

def op_move(from_path, path):
    "Create an operation moving the value at from_path to path."
    return {"op": PatchOp.MOVE, "from": from_path, "path": path}

def op_copy(from_path, path):
    "Create an operation copying the value at from_path to path."
    return {"op": PatchOp.COPY, "from": from_path, "path": path}

def op_iterate(path, sub_operations, replacement_character=None):
    """Create an operation applying sub_operations once per element
    of the array at path."""
    entry = {"op": PatchOp.ITERATE, "path": path, "sub_operations": sub_operations}
    if replacement_character is not None:
        entry["replacement_character"] = replacement_character
    return entry

def op_join(from_paths, path, joiner=None):
    "Create an operation joining the values at from_paths into a string at path."
    entry = {"op": PatchOp.JOIN, "from": from_paths, "path": path}
    if joiner is not None:
        entry["joiner"] = joiner
    return entry

def op_sum(from_paths, path):
    "Create an operation summing the values at from_paths into path."
    return {"op": PatchOp.SUM, "from": from_paths, "path": path}


# Required fields beyond op and path, checked in this order
_required_fields = {
    PatchOp.TEST: ("value",),
    PatchOp.ADD: ("value",),
    PatchOp.REMOVE: (),
    PatchOp.REPLACE: ("value",),
    PatchOp.MOVE: ("from",),
    PatchOp.COPY: ("from",),
    PatchOp.ITERATE: ("sub_operations",),
    PatchOp.JOIN: ("from",),
    PatchOp.SUM: ("from",),
}

# Fields that must hold a list of values for the given op
_list_fields = {
    PatchOp.ITERATE: "sub_operations",
    PatchOp.JOIN: "from",
    PatchOp.SUM: "from",
}

# Optional fields that must be strings when present
_string_fields = {
    PatchOp.ITERATE: "replacement_character",
    PatchOp.JOIN: "joiner",
}


def validate_operation(e, deep=False):
    """Check that e is a well formed patch operation.

    Raises a PatchSyntaxError if not well formed. Pointer syntax
    is not checked here, bad pointers are reported as path errors
    once the operation is applied.
    """
    if not isinstance(e, Mapping):
        raise PatchSyntaxError("operation must be an object, not {!r}".format(e))
    if "op" not in e:
        raise PatchSyntaxError("missing `op`")
    if "path" not in e:
        raise PatchSyntaxError("missing `path`")

    op = e["op"]
    if not isinstance(op, str) or op not in _required_fields:
        raise PatchSyntaxError("not implemented: {}".format(op))

    for name in _required_fields[op]:
        if name not in e:
            raise PatchSyntaxError("missing `{}`".format(name))

    name = _list_fields.get(op)
    if name is not None and not isinstance(e[name], list):
        raise PatchSyntaxError("missing `{}`".format(name))

    name = _string_fields.get(op)
    if name is not None and name in e and not isinstance(e[name], str):
        raise PatchSyntaxError("`{}` must be a string".format(name))

    if deep and op == PatchOp.ITERATE:
        # Nested operations are checked recursively only on request
        # since iterate validates them again on every pass
        validate_patch(e["sub_operations"], deep=deep)


def validate_patch(patch, deep=False):
    """Check whether a patch (list of operations) is well formed.

    Raises a PatchSyntaxError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchSyntaxError("patch must be a list of operations")
    for e in patch:
        validate_operation(e, deep=deep)


def is_valid_patch(patch, deep=False):
    """Checks whether a patch (list of operations) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch, deep=deep)
    except PatchSyntaxError:
        return False
    return True
