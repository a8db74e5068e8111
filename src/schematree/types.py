"""primitive schema constructors.

every constructor allocates a fresh object node from the arena. without an
arena there is nothing to allocate from and the constructors return None,
which the rest of the builder ignores.

>>> from schematree.values import Arena, dumps
>>> arena = Arena()
>>> dumps(array(arena, string(arena)))
'{"type":"array","items":{"type":"string"}}'
>>> dumps(ref(arena, ""))
'{}'
"""

__all__ = (
    "object_",
    "array",
    "string",
    "number",
    "integer",
    "boolean",
    "null",
    "ref",
    "dynamic_ref",
)

from . import utils
from .values import Node

# the json schema names of the primitive types
TYPES = "object", "array", "string", "number", "integer", "boolean", "null"


def primitive(arena, type):
    """``{"type": type}``"""
    if arena is None:
        return utils.ignore(arena, type, "no arena")
    node = arena.object()
    node.set("type", arena.string(type))
    return node


def object_(arena):
    return primitive(arena, "object")


def array(arena, items=None):
    """an array schema, with ``items`` when a sub-schema is given"""
    node = primitive(arena, "array")
    if node is not None and isinstance(items, Node):
        node.set("items", items)
    return node


def string(arena):
    return primitive(arena, "string")


def number(arena):
    return primitive(arena, "number")


def integer(arena):
    return primitive(arena, "integer")


def boolean(arena):
    return primitive(arena, "boolean")


def null(arena):
    return primitive(arena, "null")


def reference(arena, key, target):
    if arena is None:
        return utils.ignore(arena, key, "no arena")
    node = arena.object()
    # a reference without a target is the empty schema
    if utils.is_name(target):
        node.set(key, arena.string(target))
    return node


def ref(arena, target):
    """``{"$ref": target}``"""
    return reference(arena, "$ref", target)


def dynamic_ref(arena, target):
    """``{"$dynamicRef": target}``, resolved late against ``$dynamicAnchor``"""
    return reference(arena, "$dynamicRef", target)
