"""numeric bounds for number and integer schemas.

>>> from schematree import Arena, number, stringify
>>> arena = Arena()
>>> node = number(arena)
>>> number_min(arena, node, 0)
>>> number_max(arena, node, 1.5, exclusive=True)
>>> stringify(arena, node)
'{"type":"number","minimum":0,"exclusiveMaximum":1.5}'
"""

__all__ = "number_min", "number_max"

from . import utils


def _bound(arena, node, key, value, op):
    if not utils.writable(arena, node, op):
        return
    if not utils.is_finite(value):
        return utils.ignore(arena, op, f"{value!r} is not a finite number")
    node.set(key, arena.decimal(utils.NUMBER_FORMAT, value))


def number_min(arena, node, value, exclusive=False):
    """set ``minimum``, or ``exclusiveMinimum`` when ``exclusive``"""
    key = "exclusiveMinimum" if exclusive else "minimum"
    _bound(arena, node, key, value, "number_min")


def number_max(arena, node, value, exclusive=False):
    """set ``maximum``, or ``exclusiveMaximum`` when ``exclusive``"""
    key = "exclusiveMaximum" if exclusive else "maximum"
    _bound(arena, node, key, value, "number_max")
