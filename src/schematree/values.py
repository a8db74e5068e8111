"""the value store under the schema builder.

an ``Arena`` owns every json node allocated from it. nodes are never freed one
at a time; releasing the arena drops them all together.

>>> with Arena() as arena:
...     node = arena.object()
...     node.set("type", arena.string("string"))
...     dumps(node)
'{"type":"string"}'
"""

__all__ = (
    "Arena",
    "Node",
    "Object",
    "Array",
    "String",
    "Number",
    "Decimal",
    "Bool",
    "Null",
    "dumps",
    "ravel",
    "children",
    "reaches",
    "is_acyclic",
)

import json
import logging

from . import exceptions
from .utils import register

logger = logging.getLogger(__name__)


class Arena:
    """an allocation scope for json nodes.

    ``strict`` arenas raise ``InvalidArgument`` for builder calls that are
    otherwise ignored."""

    def __init__(self, name=None, *, strict=False):
        self.name = name
        self.strict = strict
        self.nodes = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, type, exception, traceback):
        self.release()

    def __len__(self):
        return len(self.nodes)

    def __contains__(self, node):
        return isinstance(node, Node) and node.arena is self

    def __repr__(self):
        state = "released" if self.closed else f"{len(self)} nodes"
        return f"<Arena {self.name or hex(id(self))} {state}>"

    def release(self):
        if self.closed:
            return
        logger.debug("releasing %r", self)
        self.nodes.clear()
        self.closed = True

    def check(self):
        if self.closed:
            raise exceptions.ArenaClosed(f"{self!r} was released")

    def new(self, cls, *args):
        self.check()
        node = cls(self, *args)
        self.nodes.append(node)
        return node

    def strdup(self, x):
        """copy a caller supplied string into storage the arena owns"""
        self.check()
        if isinstance(x, (bytes, bytearray, memoryview)):
            return bytes(x).decode("utf-8")
        return str(x)

    def object(self):
        return self.new(Object)

    def array(self):
        return self.new(Array)

    def string(self, value):
        return self.new(String, self.strdup(value))

    def number(self, value):
        return self.new(Number, int(value))

    def decimal(self, format, value):
        """a number kept as preformatted text, ``format % value``"""
        return self.new(Decimal, format % value)

    def boolean(self, value):
        return self.new(Bool, bool(value))

    def true(self):
        return self.boolean(True)

    def false(self):
        return self.boolean(False)

    def null(self):
        return self.new(Null)


class Node:
    __slots__ = ("arena",)

    def __init__(self, arena):
        self.arena = arena

    def __repr__(self):
        if self.arena.closed:
            return f"<{type(self).__name__} released>"
        return f"<{type(self).__name__} {dumps(self)}>"


class Object(Node):
    """an ordered mapping of string keys to nodes.

    writing an existing key replaces its value in place."""

    __slots__ = ("data",)

    def __init__(self, arena):
        super().__init__(arena)
        self.data = {}

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __contains__(self, key):
        return key in self.data

    def __getitem__(self, key):
        return self.data[key]

    def scan(self, key):
        """the child at ``key`` or None when the key is absent"""
        return self.data.get(key)

    def set(self, key, value, copy_key=False):
        # static literal keys are referenced, caller keys are copied
        if copy_key:
            key = self.arena.strdup(key)
        self.data[key] = value

    def ensure(self, key, kind):
        """get the child of ``kind`` at ``key``, creating it on first use"""
        child = self.scan(key)
        if not isinstance(child, kind):
            child = self.arena.new(kind)
            self.set(key, child)
        return child


class Array(Node):
    __slots__ = ("data",)

    def __init__(self, arena):
        super().__init__(arena)
        self.data = []

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def append(self, value):
        self.data.append(value)


class String(Node):
    __slots__ = ("value",)

    def __init__(self, arena, value):
        super().__init__(arena)
        self.value = value


class Number(Node):
    __slots__ = ("value",)

    def __init__(self, arena, value):
        super().__init__(arena)
        self.value = value


class Decimal(Node):
    __slots__ = ("text",)

    def __init__(self, arena, text):
        super().__init__(arena)
        self.text = text


class Bool(Node):
    __slots__ = ("value",)

    def __init__(self, arena, value):
        super().__init__(arena)
        self.value = value


class Null(Node):
    __slots__ = ()


def _string(x):
    return json.dumps(x, ensure_ascii=False)


@register
def dump(node):
    raise TypeError(f"cannot serialize {type(node).__name__} as a json node")


@dump.register
def dump_object(node: Object):
    return "{" + ",".join(_string(k) + ":" + dump(v) for k, v in node.data.items()) + "}"


@dump.register
def dump_array(node: Array):
    return "[" + ",".join(map(dump, node.data)) + "]"


@dump.register
def dump_string(node: String):
    return _string(node.value)


@dump.register
def dump_number(node: Number):
    return str(node.value)


@dump.register
def dump_decimal(node: Decimal):
    return node.text


@dump.register
def dump_bool(node: Bool):
    return "true" if node.value else "false"


@dump.register
def dump_null(node: Null):
    return "null"


def dumps(node):
    """the canonical json text of a node: insertion order, no whitespace"""
    if isinstance(node, Node) and node.arena is not None:
        node.arena.check()
    return dump(node)


@register
def ravel(node):
    """convert a node tree into plain python json values"""
    raise TypeError(f"cannot ravel {type(node).__name__}")


@ravel.register
def ravel_object(node: Object):
    return {k: ravel(v) for k, v in node.data.items()}


@ravel.register
def ravel_array(node: Array):
    return list(map(ravel, node.data))


@ravel.register(String)
@ravel.register(Number)
@ravel.register(Bool)
def ravel_scalar(node):
    return node.value


@ravel.register
def ravel_decimal(node: Decimal):
    return json.loads(node.text)


@ravel.register
def ravel_null(node: Null):
    return None


def children(node):
    if isinstance(node, (Object, Array)):
        return tuple(node.data.values() if isinstance(node, Object) else node.data)
    return ()


def reaches(node, target):
    """true when ``target`` is ``node`` or one of its descendants"""
    seen, stack = set(), [node]
    while stack:
        x = stack.pop()
        if x is target:
            return True
        if id(x) in seen:
            continue
        seen.add(id(x))
        stack.extend(children(x))
    return False


def is_acyclic(node):
    """true when no node in the tree is its own ancestor.

    shared nodes are walked once, so a deep DAG stays linear."""
    visiting, done = set(), set()
    stack = [(node, iter(children(node)))]
    visiting.add(id(node))
    while stack:
        parent, rest = stack[-1]
        for child in rest:
            if id(child) in visiting:
                return False
            if id(child) not in done:
                visiting.add(id(child))
                stack.append((child, iter(children(child))))
                break
        else:
            stack.pop()
            visiting.discard(id(parent))
            done.add(id(parent))
    return True
