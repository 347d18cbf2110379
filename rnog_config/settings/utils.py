from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, Iterable, Tuple

import os
import re

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Deeply merge two dictionaries returning a new dict."""
    result = deepcopy(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, Mapping)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


def expand_env(data: Any) -> Any:
    """Recursively expand ${VAR} placeholders using environment variables."""
    if isinstance(data, str):
        def _replace(match: re.Match[str]) -> str:
            return os.environ.get(match.group(1), "")

        return _ENV_PATTERN.sub(_replace, data)
    if isinstance(data, list):
        return [expand_env(item) for item in data]
    if isinstance(data, dict):
        return {key: expand_env(value) for key, value in data.items()}
    return data


def iter_paths(data: Mapping[str, Any], prefix: Tuple[str, ...] = ()) -> Iterable[Tuple[str, ...]]:
    for key, value in data.items():
        current = prefix + (key,)
        yield current
        if isinstance(value, Mapping):
            yield from iter_paths(value, current)
