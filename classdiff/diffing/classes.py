# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import is_missing, sequence_types

__all__ = ["normalize_classes", "class_diff"]


def _split_classes(text):
    # str.split() without separator drops the empty fragments
    return text.split()


def normalize_classes(value):
    """Normalize a class value into an ordered set of individual classes.

    Handles both space separated strings and lists of class strings.
    The set is returned as a dict with the classes as keys, which keeps
    first-seen order.

    Returns None if value is not class-like.

    >>> list(normalize_classes('flex  items-center flex'))
    ['flex', 'items-center']
    >>> list(normalize_classes(['flex items-center', 'gap-2']))
    ['flex', 'items-center', 'gap-2']
    """
    if is_missing(value) or value == "":
        return {}

    if isinstance(value, str):
        return dict.fromkeys(_split_classes(value))

    if isinstance(value, sequence_types):
        classes = {}
        for item in value:
            if isinstance(item, str):
                classes.update(dict.fromkeys(_split_classes(item)))
        return classes

    return None


def class_diff(original_classes, updated_classes):
    """Compute the classes of original_classes missing from updated_classes.

    The result is a space separated string in original order,
    or None if every original class is still present.
    """
    removed = [cls for cls in original_classes if cls not in updated_classes]
    if not removed:
        return None
    return " ".join(removed)
