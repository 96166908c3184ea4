# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

import colorama
from traitlets import TraitError

from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args,
    SettingsParser, settings_from_args,
    )
from .diffing import diff
from .log import debug, error, init_logging
from .prettyprint import PrettyPrintConfig, pretty_print_tree_diff
from .utils import EXPLICIT_MISSING_FILE, read_tree


_description = ("Show which classes and values of an original configuration "
                "tree are changed or missing in an updated one.")


def main_diff(args):
    """Main handler of diff CLI"""
    try:
        settings = settings_from_args(args)
    except TraitError as e:
        init_logging()
        error("%s", e)
        return 1
    init_logging(settings.log_level)

    original, updated = args.original, args.updated
    for fn in (original, updated):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            error("Missing file %s", fn)
            return 1

    try:
        a = read_tree(original)
        b = read_tree(updated)
    except ValueError as e:
        # Also covers ClassDiffFormatError and invalid JSON
        error("%s", e)
        return 1

    debug("Diffing %r against %r", original, updated)
    d = diff(a, b, config=settings.diff_config())

    output = getattr(args, 'out', None)
    if output:
        with open(output, "w") as df:
            json.dump(d, df, indent=2, separators=(",", ": "))
    else:
        # Print with print() so capsys picks up the output
        class Printer:
            def write(self, text):
                print(text, end="")
        pp_config = PrettyPrintConfig(out=Printer(), use_color=settings.color)
        pretty_print_tree_diff(original, updated, d, pp_config)

    return 0


def _build_arg_parser(prog='classdiff', settings=None):
    """Creates an argument parser for the classdiff command."""
    parser = SettingsParser(
        settings=settings,
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "original", help="the original tree filename (JSON).",
    )
    parser.add_argument(
        "updated", help="the updated tree filename (JSON).",
    )

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file as JSON. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    colorama.just_fix_windows_console()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
