"""Read RNO-G station acquisition configs and render their settings as text."""

from .errors import (  # noqa: F401
    ConfigReaderError,
    ErrorKind,
    FileIOError,
    ParseError,
    Resolution,
    SettingNotFound,
    SettingTypeMismatch,
    UnknownAlias,
)
from .node import ConfigNode, NodeKind  # noqa: F401
from .formatter import format_value  # noqa: F401
from .resolver import format_group, resolve  # noqa: F401
from .aliases import COMMON_SETTINGS, DEFAULT_ALIASES, AliasTable, resolve_alias  # noqa: F401
from .reader import load_tree, read_config, read_run_setting, report, run_config_path  # noqa: F401
