"""string vocabulary. formats and patterns are stored verbatim, the builder
checks neither format names nor regular expression syntax."""

__all__ = "string_format", "string_pattern", "string_enum"

import re

from . import utils


def _set_text(arena, node, key, value, op):
    if not utils.writable(arena, node, op):
        return
    if not utils.is_name(value):
        return utils.ignore(arena, op, f"a {key} is required")
    node.set(key, arena.string(value))


def string_format(arena, node, format):
    """set ``format``, e.g. ``email``, ``date``, ``time`` or ``uri``"""
    _set_text(arena, node, "format", format, "string_format")


def string_pattern(arena, node, pattern):
    """set ``pattern`` from a regex string or a compiled pattern.

    >>> from schematree import Arena, string, stringify
    >>> arena = Arena()
    >>> node = string(arena)
    >>> string_pattern(arena, node, re.compile("^[a-z]+$"))
    >>> stringify(arena, node)
    '{"type":"string","pattern":"^[a-z]+$"}'
    """
    if isinstance(pattern, re.Pattern):
        pattern = pattern.pattern
    _set_text(arena, node, "pattern", pattern, "string_pattern")


def string_enum(arena, node, values):
    """replace ``enum`` with ``values`` in order.

    empty entries are skipped, duplicates are kept."""
    if not utils.writable(arena, node, "string_enum"):
        return
    values = utils.entries(arena, values, "string_enum")
    if values is None:
        return
    array = arena.array()
    for value in values:
        if utils.is_name(value):
            array.append(arena.string(value))
    node.set("enum", array)
