__all__ = "array_min_items", "array_max_items", "array_unique"

import operator

from . import utils


def _count(arena, node, key, n, op):
    if not utils.writable(arena, node, op):
        return
    try:
        n = operator.index(n)
    except TypeError:
        return utils.ignore(arena, op, f"{n!r} is not an integer")
    # the vocabulary only allows non-negative item counts
    if n < 0:
        return utils.ignore(arena, op, f"{n} is negative")
    node.set(key, arena.number(n))


def array_min_items(arena, node, n):
    _count(arena, node, "minItems", n, "array_min_items")


def array_max_items(arena, node, n):
    _count(arena, node, "maxItems", n, "array_max_items")


def array_unique(arena, node, on=True):
    if utils.writable(arena, node, "array_unique"):
        node.set("uniqueItems", arena.boolean(on))
