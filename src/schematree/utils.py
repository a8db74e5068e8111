"""schematree utility functions.

argument checks and the ignore policy shared by the builder modules live here.
"""

__all__ = ("register", "is_name", "is_finite", "enforce_tuple", "ignore", "writable", "attachable", "entries")

import logging
import math
import numbers
from functools import singledispatch as register

from . import exceptions

logger = logging.getLogger(__name__)

# the general floating point format numeric bounds are rendered with
NUMBER_FORMAT = "%g"

NAMES = (str, bytes, bytearray, memoryview)


def is_name(x):
    """a non-empty string, or a non-empty utf-8 buffer the arena can copy"""
    if not isinstance(x, NAMES) or not len(x):
        return False
    if not isinstance(x, str):
        try:
            bytes(x).decode("utf-8")
        except UnicodeDecodeError:
            return False
    return True


def is_finite(x):
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        return False
    # ints beyond the float range have no %g rendering
    try:
        return math.isfinite(float(x))
    except OverflowError:
        return False


def enforce_tuple(x):
    """make sure the input is a tuple of entries.

    >>> enforce_tuple("city")
    ('city',)
    >>> enforce_tuple(None)
    ()
    """
    if x is None:
        return ()
    if isinstance(x, NAMES):
        return (x,)
    return tuple(x)


def ignore(arena, op, reason):
    """drop a builder call.

    the call is logged and nothing is mutated. strict arenas raise instead."""
    logger.debug("%s ignored: %s", op, reason)
    if getattr(arena, "strict", False):
        raise exceptions.InvalidArgument(f"{op}: {reason}")


def writable(arena, node, op):
    """true when ``node`` is an object node the builder may mutate."""
    from .values import Object

    if arena is None:
        ignore(arena, op, "no arena")
        return False
    if not isinstance(node, Object):
        ignore(arena, op, f"expected an object node, got {type(node).__name__}")
        return False
    return True


def attachable(arena, parent, schema, op, key=None):
    """true when ``schema`` may become a child of ``parent`` without a cycle.

    with ``key`` the schema lands in the container ``parent[key]``, which
    must not be reachable from the schema either."""
    from .values import Node, reaches

    if not isinstance(schema, Node):
        ignore(arena, op, "a schema node is required")
        return False
    if reaches(schema, parent):
        ignore(arena, op, "the schema already contains its parent")
        return False
    container = None if key is None else parent.scan(key)
    if container is not None and reaches(schema, container):
        ignore(arena, op, f"the schema already contains {key}")
        return False
    return True


def entries(arena, x, op):
    """the entries of a list argument, or None when ``x`` is not iterable."""
    try:
        return enforce_tuple(x)
    except TypeError:
        ignore(arena, op, f"expected a list, got {type(x).__name__}")
