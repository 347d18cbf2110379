from __future__ import annotations

from .node import ConfigNode, NodeKind

_BRACKETS = {
    NodeKind.ARRAY: ("[", "]"),
    NodeKind.LIST: ("(", ")"),
}


def format_value(node: ConfigNode) -> str:
    """Render a single setting as text.

    Groups and unknown kinds render as the empty string; groups are expanded
    by the resolver instead.
    """
    kind = node.kind
    if kind is NodeKind.INTEGER:
        return str(int(node.value))
    if kind is NodeKind.FLOAT:
        return "%f" % node.value
    if kind is NodeKind.BOOLEAN:
        return str(int(node.value))
    if kind is NodeKind.STRING:
        return node.value
    if kind in _BRACKETS:
        opening, closing = _BRACKETS[kind]
        return opening + ",".join(_format_element(item) for item in node.children) + closing
    return ""


def _format_element(node: ConfigNode) -> str:
    # Only numeric elements are rendered; anything else leaves an empty segment.
    if node.kind is NodeKind.INTEGER:
        return str(int(node.value))
    if node.kind is NodeKind.FLOAT:
        return "%g" % node.value
    return ""
