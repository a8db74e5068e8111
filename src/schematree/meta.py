"""annotations that describe a schema without constraining it"""

__all__ = "title", "description", "default_str"

from . import utils


def _annotate(arena, node, key, value, op):
    # an empty string is still an annotation
    if not utils.writable(arena, node, op):
        return
    if not isinstance(value, str):
        return utils.ignore(arena, op, f"a {key} string is required")
    node.set(key, arena.string(value))


def title(arena, node, value):
    _annotate(arena, node, "title", value, "title")


def description(arena, node, value):
    _annotate(arena, node, "description", value, "description")


def default_str(arena, node, value):
    """set a string ``default``"""
    _annotate(arena, node, "default", value, "default_str")
