"""logical composition of schemas.

each combinator wraps its sub-schemas in a fresh node holding exactly one key,
the inputs are not mutated.
"""

__all__ = "any_of", "one_of", "all_of"

from . import utils
from .values import Node


def combine(arena, keyword, schemas):
    if arena is None:
        return utils.ignore(arena, keyword, "no arena")
    if isinstance(schemas, Node):
        schemas = (schemas,)
    schemas = utils.entries(arena, schemas, keyword)
    if schemas is None:
        return None
    node, array = arena.object(), arena.array()
    for schema in schemas:
        # missing sub-schemas are skipped
        if isinstance(schema, Node):
            array.append(schema)
    node.set(keyword, array)
    return node


def any_of(arena, schemas):
    return combine(arena, "anyOf", schemas)


def one_of(arena, schemas):
    return combine(arena, "oneOf", schemas)


def all_of(arena, schemas):
    return combine(arena, "allOf", schemas)
