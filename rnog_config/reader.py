"""Per-run acquisition config access.

Each station run keeps its DAQ configuration under
``<directory>/station<station>/run<run>/cfg/acq.cfg`` in libconfig format.
"""
from __future__ import annotations

import os
import re
import sys
from typing import Optional, TextIO

import libconf
from loguru import logger

from .aliases import AliasTable
from .errors import ConfigReaderError, FileIOError, ParseError, Resolution
from .logging_utils import log_operation, setup_logging
from .node import ConfigNode
from .printer import format_error, format_resolution
from .settings import RootSettings, load_settings

RUN_CONFIG_TEMPLATE = "{directory}/station{station}/run{run}/cfg/acq.cfg"

_ROW_PATTERN = re.compile(r"\brow (\d+)")


def run_config_path(station: int, run: int, directory: str) -> str:
    return RUN_CONFIG_TEMPLATE.format(directory=directory, station=station, run=run)


def _parse_line(exc: Exception) -> Optional[int]:
    match = _ROW_PATTERN.search(str(exc))
    return int(match.group(1)) if match else None


def load_tree(path: str) -> ConfigNode:
    """Parse a libconfig file into a ConfigNode tree.

    Raises FileIOError when the file cannot be read and ParseError when its
    contents are malformed. ``@include`` paths resolve next to the file.
    """
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = libconf.load(handle, filename=path, includedir=os.path.dirname(path))
    except (OSError, UnicodeDecodeError) as exc:
        raise FileIOError(path) from exc
    except libconf.ConfigParseError as exc:
        raise ParseError(path, _parse_line(exc), str(exc)) from exc
    return ConfigNode.from_python(data)


def read_run_setting(
    station: int,
    run: int,
    directory: Optional[str] = None,
    setting: Optional[str] = None,
    *,
    aliases: Optional[AliasTable] = None,
    settings: Optional[RootSettings] = None,
) -> Resolution:
    """Load the run config and resolve one alias or dotted path from it.

    Load failures abort the query: the returned Resolution carries the error
    and no value.
    """
    if settings is None:
        settings, _ = load_settings()
    directory = directory if directory is not None else settings.reader.data_directory
    setting = settings.reader.setting if setting is None else setting
    if aliases is None:
        aliases = AliasTable(settings.aliases)

    path = run_config_path(station, run, directory)
    try:
        tree = load_tree(path)
    except ConfigReaderError as exc:
        logger.error(format_error(exc))
        return Resolution.failure(setting, exc)

    return aliases.resolve(tree, setting, expand_nested=settings.reader.expand_nested_groups)


def report(resolution: Resolution, stream: Optional[TextIO] = None) -> None:
    """Write ``<query> : <value>``; fatal failures write nothing."""
    if resolution.error is not None and resolution.error.fatal:
        return
    stream = stream or sys.stdout
    stream.write(format_resolution(resolution) + "\n")


def read_config(
    station: Optional[int] = None,
    run: Optional[int] = None,
    directory: Optional[str] = None,
    setting: Optional[str] = None,
    *,
    settings: Optional[RootSettings] = None,
    stream: Optional[TextIO] = None,
) -> Resolution:
    """Resolve one setting for a run and report it.

    Without explicit ``settings`` the layered settings files are loaded and
    logging is configured from them.
    """
    if settings is None:
        settings, _ = load_settings()
        setup_logging(settings.logging.level, settings.logging.file, settings.logging.json_lines)
    station = settings.reader.station if station is None else station
    run = settings.reader.run if run is None else run

    with log_operation("read_config", station=station, run=run):
        resolution = read_run_setting(station, run, directory, setting, settings=settings)
    report(resolution, stream)
    return resolution
