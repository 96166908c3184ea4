# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .classes import normalize_classes, class_diff
from .config import DiffConfig
from .generic import diff, arrays_equal

__all__ = ["diff", "arrays_equal", "normalize_classes", "class_diff", "DiffConfig"]
