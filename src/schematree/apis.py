"""serializing built schemas and handing them to other apis."""

__all__ = "stringify", "response_format", "check"

from . import exceptions, utils, values


def stringify(arena, schema):
    """the compact json text of a schema, or None without one"""
    if not isinstance(schema, values.Node):
        return utils.ignore(arena, "stringify", "a schema node is required")
    return values.dumps(schema)


def response_format(arena, name, schema, strict=True):
    """wrap a schema in the ``json_schema`` response format of structured output apis.

    >>> from schematree import Arena, object_
    >>> arena = Arena()
    >>> stringify(arena, response_format(arena, "weather", object_(arena)))
    '{"type":"json_schema","name":"weather","schema":{"type":"object"},"strict":true}'
    """
    if arena is None:
        return utils.ignore(arena, "response_format", "no arena")
    if not utils.is_name(name):
        return utils.ignore(arena, "response_format", "a format name is required")
    if not isinstance(schema, values.Node):
        return utils.ignore(arena, "response_format", "a schema node is required")
    node = arena.object()
    node.set("type", arena.string("json_schema"))
    node.set("name", arena.string(name))
    node.set("schema", schema)
    node.set("strict", arena.boolean(strict))
    return node


def check(schema):
    """validate a built schema against the draft 2020-12 meta-schema.

    this checks the schema document itself, instances are never validated."""
    import jsonschema

    try:
        jsonschema.Draft202012Validator.check_schema(values.ravel(schema))
    except jsonschema.SchemaError as error:
        raise exceptions.InvalidSchema.from_error(error) from error
    return schema
