from __future__ import annotations

import os
from copy import deepcopy
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from loguru import logger

from .schema import DEFAULT_SETTINGS
from .utils import iter_paths

Path = Tuple[str, ...]

ALLOWED_PATHS: set[Path] = set(iter_paths(DEFAULT_SETTINGS))
WILDCARD_PREFIXES: Tuple[Path, ...] = (
    ("aliases",),
)


class SettingsError(Exception):
    pass


def validate_and_check_unknowns(cfg: Dict[str, Any], *, strict: bool | None = None) -> Tuple[Dict[str, Any], List[str]]:
    """Return ``cfg`` without unknown keys plus the dotted unknown paths.

    In strict mode unknown keys raise SettingsError instead.
    """
    unknown = sorted(_find_unknown_paths(cfg))
    if not unknown:
        return cfg, []

    dotted = [".".join(path) for path in unknown]
    message = f"Unknown settings keys detected: {dotted}"
    if _determine_strict_mode(strict):
        raise SettingsError(message)
    logger.warning(message)

    pruned = deepcopy(cfg)
    for path in unknown:
        _delete_path(pruned, path)
    return pruned, dotted


def _find_unknown_paths(data: Mapping[str, Any], prefix: Path = ()) -> Iterable[Path]:
    for key, value in data.items():
        current = prefix + (key,)
        if _is_wildcard_prefix(current):
            continue
        if current not in ALLOWED_PATHS:
            yield current
            continue
        if isinstance(value, Mapping):
            yield from _find_unknown_paths(value, current)


def _is_wildcard_prefix(path: Path) -> bool:
    return any(path[: len(prefix)] == prefix for prefix in WILDCARD_PREFIXES)


def _delete_path(data: Dict[str, Any], path: Path) -> None:
    current: Any = data
    for key in path[:-1]:
        if not isinstance(current, dict) or key not in current:
            return
        current = current[key]
    if isinstance(current, dict):
        current.pop(path[-1], None)


def _determine_strict_mode(strict: bool | None) -> bool:
    if strict is not None:
        return strict

    env_override = os.getenv("RNOG_CONFIG_STRICT")
    if env_override is not None:
        value = env_override.strip().lower()
        if value in {"0", "false", "no", "off", "lenient", "warn", "warning"}:
            return False
        if value in {"1", "true", "yes", "on", "strict", "fail", "error"}:
            return True
    return True
