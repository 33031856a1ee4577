# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

import colorama

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    add_patch_args, add_output_args,
)
from .patch_format import PatchError
from .patching import patch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams
from . import log


_description = "Apply a JSON patch (RFC 6902, with extensions) to a JSON document."


def _report_error(err, use_color):
    if use_color:
        prefix = colorama.Fore.RED + colorama.Style.BRIGHT
        suffix = colorama.Style.RESET_ALL
    else:
        prefix = suffix = ''
    print("{}{}: {}{}".format(prefix, err.kind, err.description, suffix),
          file=sys.stderr)


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_json(base_filename, on_null='empty')
    operations = read_json(patch_filename, on_null='null')
    if operations is None:
        operations = []

    try:
        after = patch(
            before, operations,
            replacement_character=args.replacement_character,
            joiner=args.joiner)
    except PatchError as err:
        log.debug("Patch failed with status %d", err.status_code)
        _report_error(err, getattr(args, 'use_color', True))
        return 1

    if output_filename:
        write_json(after, output_filename, indent=args.indent, sort_keys=args.sort_keys)
        log.info("Patched document written to %s", output_filename)
    else:
        write_json(after, sys.stdout, indent=args.indent, sort_keys=args.sort_keys)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the treepatch command."""
    parser = ConfigBackedParser(
        prog=prog or 'treepatch',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["base", "patch"])
    add_patch_args(parser)
    add_output_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
