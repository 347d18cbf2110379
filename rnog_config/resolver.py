from __future__ import annotations

from loguru import logger

from .errors import Resolution, SettingLookupError
from .formatter import format_value
from .node import ConfigNode, NodeKind
from .printer import format_error


def format_group(node: ConfigNode, *, expand_nested: bool = True) -> str:
    """Render a group as ``{\\nname = value, \\n...\\n}`` in member order.

    With ``expand_nested`` disabled, member groups render as the empty string
    (one level only, the legacy output).
    """
    entries = []
    for member in node.children:
        if member.kind is NodeKind.GROUP and expand_nested:
            value = format_group(member, expand_nested=True)
        else:
            value = format_value(member)
        entries.append(f"{member.name} = {value}")
    if not entries:
        return ""
    return "{\n" + ", \n".join(entries) + "\n}"


def resolve(tree: ConfigNode, path: str, *, expand_nested: bool = True, query: str | None = None) -> Resolution:
    """Look up ``path`` in ``tree`` and render it.

    Lookup failures are logged once and returned as a failed Resolution with
    an empty value; they never raise.
    """
    query = path if query is None else query
    try:
        node = tree.lookup(path)
    except SettingLookupError as exc:
        logger.warning(format_error(exc))
        return Resolution.failure(query, exc, path=path)

    if node.kind is NodeKind.GROUP:
        value = format_group(node, expand_nested=expand_nested)
    else:
        value = format_value(node)
    logger.debug(f"Resolved {path} ({node.kind.value})")
    return Resolution.success(query, path, value)
