# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import sys

from ._version import __version__
from .config import ClassDiff, load_settings
from .log import LOG_LEVELS


class SettingsParser(argparse.ArgumentParser):
    """Argument parser with defaults taken from ClassDiff settings.

    Options whose dest matches a setting name default to its
    configured value.
    """

    def __init__(self, settings=None, **kwargs):
        super(SettingsParser, self).__init__(**kwargs)
        if settings is None:
            settings = load_settings()
        self.settings = settings
        self.set_defaults(**settings.settings())


class ShowSettingsAction(argparse.Action):
    "Print the effective settings to stderr and exit."

    def __init__(self, option_strings, dest, help=None):
        super(ShowSettingsAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_settings, PrettyPrintConfig

        pretty_print_settings(
            type(parser.settings).__name__,
            parser.settings.settings(),
            config=PrettyPrintConfig(out=sys.stderr, use_color=False),
        )
        parser.exit(1)


def add_generic_args(parser):
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the settings and their current effective values",
        action=ShowSettingsAction,
    )
    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        help="set the log level by name.",
    )


def add_diff_args(parser):
    parser.add_argument(
        '-a', '--atomic',
        dest='atomic_paths',
        action='append',
        metavar='PATH',
        help="compare the value at PATH (e.g. /slots/base) as a whole, "
             "without splitting it into classes. Can be given several times.",
    )


def add_prettyprint_args(parser):
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        '--color',
        dest='color',
        action='store_true',
        help="use colors in the printed diff.",
    )
    color.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        help="do not use colors in the printed diff.",
    )


def settings_from_args(args):
    """Return ClassDiff settings holding the parsed option values.

    Raises TraitError for invalid values.
    """
    values = {}
    for name in ClassDiff.class_trait_names(config=True):
        value = getattr(args, name, None)
        if value is not None:
            values[name] = value
    return ClassDiff(**values)
