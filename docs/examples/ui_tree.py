"""print a recursive ui tree schema as a structured output response format"""
from schematree import *


def ui_tree(arena):
    root = object_(arena)
    set_schema(arena, root)
    set_id(arena, root, "https://example.com/schemas/ui.json")

    node = object_(arena)
    dynamic_anchor(arena, node, "Node")
    kind = string(arena)
    string_enum(arena, kind, ["div", "button", "header", "section", "field", "form"])
    prop_required(arena, node, "type", kind)
    prop_required(arena, node, "label", string(arena))
    prop_required(arena, node, "children", array(arena, dynamic_ref(arena, "#Node")))
    additional_properties(arena, node, False)

    defs_set(arena, root, "node", node)
    prop_required(arena, root, "root", ref(arena, defs_pointer("node")))
    additional_properties(arena, root, False)
    return check(root)


if __name__ == "__main__":
    with Arena("ui") as arena:
        print(stringify(arena, response_format(arena, "ui", ui_tree(arena))))
