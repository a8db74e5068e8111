"""object vocabulary: properties, required and additionalProperties.

``prop`` always replaces inside ``properties`` while ``prop_required`` also
appends to ``required``. ``required`` overwrites the whole list at once.

>>> from schematree import Arena, object_, string, stringify
>>> arena = Arena()
>>> person = object_(arena)
>>> prop_required(arena, person, "name", string(arena))
>>> prop_required(arena, person, "name", string(arena))
>>> stringify(arena, person)
'{"type":"object","properties":{"name":{"type":"string"}},"required":["name","name"]}'
"""

__all__ = "prop", "prop_required", "required", "additional_properties"

from . import utils
from .values import Array, Object


def _prop(arena, parent, name, schema, op):
    if not utils.writable(arena, parent, op):
        return False
    if not utils.is_name(name):
        utils.ignore(arena, op, "a property name is required")
        return False
    if not utils.attachable(arena, parent, schema, op, "properties"):
        return False
    parent.ensure("properties", Object).set(name, schema, copy_key=True)
    return True


def prop(arena, parent, name, schema):
    """set ``properties[name]`` on ``parent``, replacing an earlier value"""
    _prop(arena, parent, name, schema, "prop")


def prop_required(arena, parent, name, schema):
    """``prop`` and append ``name`` to ``required``.

    the required list is appended to, never deduplicated."""
    if _prop(arena, parent, name, schema, "prop_required"):
        parent.ensure("required", Array).append(arena.string(name))


def required(arena, parent, names):
    """replace ``required`` with ``names`` in order, skipping empty names"""
    if not utils.writable(arena, parent, "required"):
        return
    names = utils.entries(arena, names, "required")
    if names is None:
        return
    array = arena.array()
    for name in names:
        if utils.is_name(name):
            array.append(arena.string(name))
    parent.set("required", array)


def additional_properties(arena, parent, allowed):
    if utils.writable(arena, parent, "additional_properties"):
        parent.set("additionalProperties", arena.boolean(allowed))
