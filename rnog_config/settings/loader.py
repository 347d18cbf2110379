from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import yaml
from loguru import logger
from pydantic import ValidationError

from .schema import DEFAULT_SETTINGS, RootSettings
from .utils import deep_merge, expand_env
from .validator import SettingsError, validate_and_check_unknowns

PRIORITY: Tuple[str, ...] = (
    "configs/base.yaml",
    "configs/profiles/{PROFILE}.yaml",
    "configs/local.yaml",
)


def _resolve_settings_root(root: str | os.PathLike[str] | None) -> Path:
    if root is not None:
        return Path(root)
    return Path(os.getenv("RNOG_CONFIG_DIR", "."))


def _load_layer(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            layer = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(layer, dict):
        raise SettingsError(f"Settings layer {path} must be a mapping")
    return expand_env(layer)


def load_settings(
    profile: str | None = None,
    extra_layers: Iterable[str] | None = None,
    inline_overrides: Dict[str, Any] | None = None,
    *,
    root: str | os.PathLike[str] | None = None,
    strict: bool | None = None,
) -> Tuple[RootSettings, List[str]]:
    """Merge the settings layers (last wins) and validate them.

    Returns the settings model and the list of layer files that were read.
    """
    profile = profile or "default"
    base_dir = _resolve_settings_root(root)
    merged: Dict[str, Any] = {}
    resolved_layers: List[str] = []

    candidates = [base_dir / template.format(PROFILE=profile) for template in PRIORITY]
    candidates.extend(Path(extra) for extra in extra_layers or [])
    for path in candidates:
        if not path.exists():
            continue
        merged = deep_merge(merged, _load_layer(path))
        resolved_layers.append(str(path))

    if inline_overrides:
        merged = deep_merge(merged, inline_overrides)

    merged = deep_merge(DEFAULT_SETTINGS, merged)
    merged, unknown = validate_and_check_unknowns(merged, strict=strict)

    env_level = os.environ.get("LOGURU_LEVEL")
    if env_level and isinstance(merged.get("logging"), dict):
        merged["logging"]["level"] = env_level.upper()

    try:
        settings = RootSettings.model_validate(merged)
    except ValidationError as exc:
        raise SettingsError(str(exc)) from exc

    logger.debug(f"Loaded settings from {resolved_layers or ['<defaults>']} (ignored: {unknown})")
    return settings, resolved_layers
