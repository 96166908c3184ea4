# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import Undefined, Shape, classify
from .diffing import diff, arrays_equal, normalize_classes, class_diff, DiffConfig


__all__ = [
    "__version__",
    "diff", "arrays_equal",
    "normalize_classes", "class_diff",
    "classify", "Shape", "Undefined",
    "DiffConfig",
    ]
