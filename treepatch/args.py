# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_treepatch_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_treepatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_treepatch_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        elif v is None:
            output[k] = '<unset>'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = modify_config_for_print(build_config(parser.prog, True))
        print('%s:' % header, file=sys.stderr)
        for k, v in sorted(config.items()):
            print('  %s: %s' % (k, v), file=sys.stderr)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all treepatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_patch_args(parser):
    """Adds the defaults used by the iterate and join extension operations.
    """
    parser.add_argument(
        '--replacement-character',
        default='$?',
        help="token replaced by the element index in iterate sub-operations "
             "that don't set their own `replacement_character`.")
    parser.add_argument(
        '--joiner',
        default=',',
        help="separator for join operations that don't set their own `joiner`.")


def add_output_args(parser):
    """Adds optional arguments controlling the JSON output.
    """
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    parser.add_argument(
        '--indent',
        default=None,
        type=int,
        help="indentation of the JSON output. Default is compact output.")
    parser.add_argument(
        '--sort-keys',
        action="store_true",
        default=False,
        help="sort object keys in the JSON output.")
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for error output")
    )


filename_help = {
    "base":  "The JSON document filename.",
    "patch": "The JSON patch filename, a list of operations.",
    }


def add_filename_args(parser, names):
    """Add the base and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])
