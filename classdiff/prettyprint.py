# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import pprint
import sys

import colorama

from .diff_format import Undefined
from .utils import iter_leaf_paths


# Indentation offset in pretty-print
IND = "  "

# Max line width for values formatted by pprint
MAXWIDTH = 78

HEADING_COLOR = colorama.Fore.BLUE + colorama.Style.BRIGHT
REMOVED_COLOR = colorama.Fore.RED


class PrettyPrintConfig:
    "Where a diff is printed, and whether with colors."

    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    def paint(self, color, text):
        if not self.use_color:
            return text
        return "%s%s%s" % (color, text, colorama.Style.RESET_ALL)

    def write_line(self, text, color=None):
        if color is not None:
            text = self.paint(color, text)
        self.out.write(text + "\n")

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format a reported value for printing. Uses pprint for anything but strings."
    if v is Undefined:
        return "undefined"
    if not isinstance(v, str):
        return pprint.pformat(v, width=MAXWIDTH)
    return v


def pretty_print_removed(value, config=DefaultConfig):
    "Print a reported value as removed lines."
    if isinstance(value, str):
        # Class diffs are space separated, one class per line
        lines = value.split() or [value]
    else:
        lines = format_value(value).splitlines() or [""]
    for line in lines:
        config.write_line("-  " + line, REMOVED_COLOR)


def pretty_print_diff(di, path="", config=DefaultConfig):
    """Pretty-print a classdiff diff tree.

    Each reported leaf is printed as a heading with its path
    followed by the removed classes or value.
    """
    if not di:
        return
    for leaf_path, value in iter_leaf_paths(di, path):
        config.write_line("## removed %s:" % leaf_path, HEADING_COLOR)
        pretty_print_removed(value, config)


def pretty_print_tree_diff(afn, bfn, di, config=DefaultConfig):
    """Pretty-print what the original tree file has that the updated lacks

    Parameters
    ----------

    afn: str
        Filename of the original tree
    bfn: str
        Filename of the updated tree
    di: dict or None
        The diff tree returned by diff()
    config: PrettyPrintConfig
        Config object determining how and where the diff gets printed
    """
    if di:
        config.write_line("classdiff: changed or missing in updated tree")
        config.write_line("original: %s" % afn)
        config.write_line("updated:  %s" % bfn)
        pretty_print_diff(di, "", config)


def pretty_print_settings(section, settings, config=DefaultConfig):
    """Print settings as a section with one JSON value per line:

        ClassDiff:
          color: true
          log_level: "INFO"
    """
    config.write_line("%s:" % section)
    for name in sorted(settings):
        config.write_line("%s%s: %s" % (IND, name, json.dumps(settings[name])))
