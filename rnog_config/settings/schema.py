from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, conint

DEFAULT_SETTINGS: Dict[str, Any] = {
    "config_version": 1,
    "reader": {
        "data_directory": "data/handcarry22/rootified",
        "station": 23,
        "run": 327,
        "setting": "radiant.scalers.use_pps",
        "expand_nested_groups": True,
    },
    "logging": {
        "level": "INFO",
        "file": None,
        "json": False,
    },
    # extra mnemonic -> dotted path entries, merged over the built-in table
    "aliases": {},
}


class ReaderSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data_directory: str = DEFAULT_SETTINGS["reader"]["data_directory"]
    station: conint(ge=0) = DEFAULT_SETTINGS["reader"]["station"]
    run: conint(ge=0) = DEFAULT_SETTINGS["reader"]["run"]
    setting: str = DEFAULT_SETTINGS["reader"]["setting"]
    expand_nested_groups: bool = DEFAULT_SETTINGS["reader"]["expand_nested_groups"]


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = "INFO"
    file: Optional[str] = None
    json_lines: bool = Field(default=False, alias="json")


class RootSettings(BaseModel):
    """Typed view of the merged settings tree backed by DEFAULT_SETTINGS."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    config_version: conint(ge=1) = 1
    reader: ReaderSettings = Field(default_factory=ReaderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    aliases: Dict[str, str] = Field(default_factory=lambda: deepcopy(DEFAULT_SETTINGS["aliases"]))
