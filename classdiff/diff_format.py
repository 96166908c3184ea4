# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class _UndefinedType(object):
    """Type of the Undefined sentinel.

    Marks a key that is present in a tree but carries no value, as
    trees coming from JavaScript sources may. It is distinct from None.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_UndefinedType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Undefined"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_UndefinedType, ())


# Sentinel to allow None as a reported value
Missing = object()

# Sentinel for an explicitly undefined value, distinct from None
Undefined = _UndefinedType()


class Shape:
    "Collection of value shapes recognized by the differ."
    OBJECT = "object"
    CLASSES = "classes"
    ARRAY = "array"
    PRIMITIVE = "primitive"


# Types treated as arrays (ordered sequences) in input trees
sequence_types = (list, tuple)


def is_plain_object(value):
    "Return True for key-value containers (dicts)."
    return isinstance(value, dict)


def is_class_value(value):
    """Return True for values eligible for class-token comparison.

    Any string is eligible, and so is any list or tuple made only of
    strings (the empty list included).
    """
    if isinstance(value, str):
        return True
    if isinstance(value, sequence_types):
        return all(isinstance(item, str) for item in value)
    return False


def classify(value):
    """Return the Shape of value.

    Precedence is object, then class list, then generic array,
    with everything else being a primitive.
    """
    if is_plain_object(value):
        return Shape.OBJECT
    if is_class_value(value):
        return Shape.CLASSES
    if isinstance(value, sequence_types):
        return Shape.ARRAY
    return Shape.PRIMITIVE


def is_missing(value):
    "Return True for None and Undefined."
    return value is None or value is Undefined


def child_path(path, key):
    """Return the path of key inside the value at path.

    The root is the empty path, so the top-level key "slots" has
    path "/slots" and its "base" entry "/slots/base". Keys are
    joined as they are, empty keys included.
    """
    return "%s/%s" % (path, key)
