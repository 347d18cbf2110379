"""Layered YAML settings for the run configuration reader."""

from .schema import RootSettings, ReaderSettings, LoggingSettings, DEFAULT_SETTINGS  # noqa: F401
from .loader import load_settings, PRIORITY  # noqa: F401
from .validator import SettingsError  # noqa: F401
