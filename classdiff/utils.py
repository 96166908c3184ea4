# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from .diff_format import child_path
from .log import ClassDiffFormatError

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_tree(f, on_empty=None):
    """Read and return a JSON object tree from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
            The null filename gives an empty tree.
        on_empty: What to return when the file holds only whitespace
            None: Raise an error
            "empty": return empty dict
    """
    if f == EXPLICIT_MISSING_FILE:
        return {}

    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            text = fo.read()
    else:
        text = f.read()

    if not text.strip():
        if on_empty is None:
            raise ClassDiffFormatError('File %r is empty.' % (_name_of(f),))
        elif on_empty == 'empty':
            return {}
        else:
            raise ValueError(
                'Not valid value for `on_empty`: %r. Valid values '
                'are None or "empty"' % (on_empty,))

    tree = json.loads(text)
    if not isinstance(tree, dict):
        raise ClassDiffFormatError(
            'Expected a JSON object in %r, got %s.' % (
                _name_of(f), type(tree).__name__))
    return tree


def _name_of(f):
    return f if isinstance(f, str) else getattr(f, 'name', repr(f))


def iter_leaf_paths(tree, path=""):
    """Yield (path, value) for each leaf of a nested dict tree.

    Non-empty dicts are descended into, all other values are leaves.
    Paths are built the same way diff() builds them.
    """
    for key, value in tree.items():
        subpath = child_path(path, key)
        if isinstance(value, dict) and value:
            for item in iter_leaf_paths(value, subpath):
                yield item
        else:
            yield subpath, value
