"""definitions, identifiers and anchors.

the node graph stays acyclic. recursive schemas register a definition once
under ``$defs`` and point at it by name through ``$ref``, or through an
anchor with ``$dynamicRef``.

>>> from schematree import Arena, array, object_, prop, ref, stringify
>>> arena = Arena()
>>> root, node = object_(arena), object_(arena)
>>> prop(arena, node, "children", array(arena, ref(arena, defs_pointer("node"))))
>>> defs_set(arena, root, "node", node)
>>> prop(arena, root, "root", ref(arena, defs_pointer("node")))
>>> stringify(arena, root)
'{"type":"object","$defs":{"node":{"type":"object","properties":{"children":{"type":"array","items":{"$ref":"#/$defs/node"}}}}},"properties":{"root":{"$ref":"#/$defs/node"}}}'
"""

__all__ = (
    "DRAFT_2020_12",
    "defs_ensure",
    "defs_add",
    "defs_set",
    "defs_pointer",
    "set_id",
    "set_schema",
    "anchor",
    "dynamic_anchor",
)

from . import utils
from .values import Object

DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"


def defs_ensure(arena, root):
    """the ``$defs`` object of ``root``, created when missing"""
    if utils.writable(arena, root, "defs_ensure"):
        return root.ensure("$defs", Object)


def defs_set(arena, root, name, schema):
    """replace or add ``$defs[name]``"""
    if not utils.writable(arena, root, "defs_set"):
        return
    if not utils.is_name(name):
        return utils.ignore(arena, "defs_set", "a definition name is required")
    if utils.attachable(arena, root, schema, "defs_set", "$defs"):
        defs_ensure(arena, root).set(name, schema, copy_key=True)


defs_add = defs_set


def defs_pointer(name):
    """the local reference to ``$defs[name]``.

    >>> defs_pointer("a/b~c")
    '#/$defs/a~1b~0c'
    """
    import jsonpointer

    return "#" + jsonpointer.JsonPointer.from_parts(["$defs", name]).path


def _set_uri(arena, node, key, value, op):
    if not utils.writable(arena, node, op):
        return
    if not utils.is_name(value):
        return utils.ignore(arena, op, f"a value for {key} is required")
    node.set(key, arena.string(value))


def set_id(arena, node, uri):
    _set_uri(arena, node, "$id", uri, "set_id")


def set_schema(arena, node, uri=DRAFT_2020_12):
    _set_uri(arena, node, "$schema", uri, "set_schema")


def anchor(arena, node, name):
    _set_uri(arena, node, "$anchor", name, "anchor")


def dynamic_anchor(arena, node, name):
    _set_uri(arena, node, "$dynamicAnchor", name, "dynamic_anchor")
