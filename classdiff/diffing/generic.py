# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import (
    Missing, Shape, child_path, classify, is_missing, is_plain_object,
    sequence_types,
)
from ..log import debug

from .classes import normalize_classes, class_diff
from .config import DiffConfig

__all__ = ["diff", "diff_values", "arrays_equal", "strict_equal"]


def strict_equal(a, b):
    """Compare two values without coercion between booleans and numbers.

    Otherwise a plain == comparison, so 1 and 1.0 are equal
    while True and 1 are not.
    """
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def arrays_equal(a, b, path="", config=None):
    """Deep equality of two generic (non-class) arrays.

    Dicts inside the arrays are equal when diff() finds nothing to report
    between them, nested arrays are compared recursively, and all other
    items are compared with strict_equal.
    """
    if config is None:
        config = DiffConfig()

    if len(a) != len(b):
        return False

    subpath = child_path(path, "*")
    for aval, bval in zip(a, b):
        if is_plain_object(aval) and is_plain_object(bval):
            if diff(aval, bval, path=subpath, config=config) is not None:
                return False
        elif isinstance(aval, sequence_types) and isinstance(bval, sequence_types):
            if not arrays_equal(aval, bval, path=subpath, config=config):
                return False
        elif not strict_equal(aval, bval):
            return False

    return True


def diff_values(avalue, bvalue, path="", config=None):
    """Compute the diff entry for a pair of sibling values.

    Returns the part of avalue to report, or Missing if
    there is nothing to report.
    """
    if config is None:
        config = DiffConfig()

    if config.is_atomic(path):
        return Missing if strict_equal(avalue, bvalue) else avalue

    ashape = classify(avalue)
    shape = ashape if ashape == classify(bvalue) else None

    if shape == Shape.OBJECT:
        d = diff(avalue, bvalue, path=path, config=config)
        return Missing if d is None else d
    elif shape == Shape.CLASSES:
        d = class_diff(normalize_classes(avalue), normalize_classes(bvalue))
        return Missing if d is None else d
    elif shape == Shape.ARRAY:
        return Missing if arrays_equal(avalue, bvalue, path=path, config=config) else avalue
    else:
        # Primitives, or values of different shapes
        return Missing if strict_equal(avalue, bvalue) else avalue


def diff(a, b, path="", config=None):
    """Compute what of tree a is changed or missing in tree b.

    Walks the keys of a only. A key missing from b is reported with its
    full value from a. Nested dicts are diffed recursively, class values
    (strings, or lists of strings) report the classes of a that b lacks,
    and any other value is reported whole when it differs.

    Returns a dict holding only the differing keys, or None if there
    are no differences. Keys added in b are never reported.

    If a or b is None (or Undefined), a is returned as is.
    The trees must not be cyclic.
    """
    if config is None:
        config = DiffConfig()

    if is_missing(a) or is_missing(b):
        return a

    if a is b:
        return None

    d = {}
    for key, avalue in a.items():
        if key not in b:
            d[key] = avalue
            continue

        subpath = child_path(path, key)
        entry = diff_values(avalue, b[key], path=subpath, config=config)
        if entry is not Missing:
            d[key] = entry

    if not d:
        return None

    debug("Found %d differing key(s) at %s", len(d), path or "/")
    return d
