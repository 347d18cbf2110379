from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional

from loguru import logger

from .errors import Resolution, UnknownAlias
from .node import ConfigNode
from .printer import format_error
from .resolver import resolve

# Mnemonic -> dotted setting path. Read-only for the life of the process.
COMMON_SETTINGS: Mapping[str, str] = MappingProxyType({
    "rf0_enabled": "radiant.trigger.RF0.enabled",
    "rf1_enabled": "radiant.trigger.RF1.enabled",
    "scalers_use_pps": "radiant.scalers.use_pps",
})


class AliasTable(Mapping[str, str]):
    """Immutable alias table seeded with COMMON_SETTINGS."""

    def __init__(self, extra: Optional[Mapping[str, str]] = None):
        data: Dict[str, str] = dict(COMMON_SETTINGS)
        data.update(extra or {})
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AliasTable({self._data!r})"

    def expand(self, alias: str) -> str:
        """Return the dotted path for ``alias``; dotted input is returned as is."""
        if "." in alias:
            return alias
        try:
            return self._data[alias]
        except KeyError:
            raise UnknownAlias(alias) from None

    def resolve(self, tree: ConfigNode, alias: str, *, expand_nested: bool = True) -> Resolution:
        try:
            path = self.expand(alias)
        except UnknownAlias as exc:
            logger.warning(format_error(exc))
            return Resolution.failure(alias, exc)
        return resolve(tree, path, expand_nested=expand_nested, query=alias)


DEFAULT_ALIASES = AliasTable()


def resolve_alias(
    tree: ConfigNode,
    alias: str,
    table: Optional[AliasTable] = None,
    *,
    expand_nested: bool = True,
) -> Resolution:
    table = DEFAULT_ALIASES if table is None else table
    return table.resolve(tree, alias, expand_nested=expand_nested)
