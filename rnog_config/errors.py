from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    FILE_IO = "file-io"
    PARSE = "parse"
    SETTING_NOT_FOUND = "setting-not-found"
    SETTING_TYPE_MISMATCH = "setting-type-mismatch"
    UNKNOWN_ALIAS = "unknown-alias"


class ConfigReaderError(Exception):
    """Base error for run configuration lookups.

    ``fatal`` errors abort the whole query (nothing is reported); the others
    only blank out the affected value.
    """

    kind: ErrorKind
    fatal = False


class FileIOError(ConfigReaderError):
    kind = ErrorKind.FILE_IO
    fatal = True

    def __init__(self, file: str):
        self.file = file
        super().__init__("I/O error while reading file.")


class ParseError(ConfigReaderError):
    kind = ErrorKind.PARSE
    fatal = True

    def __init__(self, file: str, line: Optional[int], message: str):
        self.file = file
        self.line = line
        self.message = message
        location = file if line is None else f"{file}:{line}"
        super().__init__(f"Parse error at {location} - {message}")


class SettingLookupError(ConfigReaderError):
    label = "Setting lookup failed"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{self.label}: {path}")


class SettingNotFound(SettingLookupError):
    kind = ErrorKind.SETTING_NOT_FOUND
    label = "Setting not found"


class SettingTypeMismatch(SettingLookupError):
    kind = ErrorKind.SETTING_TYPE_MISMATCH
    label = "Setting type mismatch"


class UnknownAlias(ConfigReaderError):
    kind = ErrorKind.UNKNOWN_ALIAS

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Unknown common setting alias: {alias}")


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one alias or path against a config tree."""

    query: str
    path: Optional[str] = None
    value: str = ""
    error: Optional[ConfigReaderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, query: str, path: str, value: str) -> "Resolution":
        return cls(query=query, path=path, value=value)

    @classmethod
    def failure(cls, query: str, error: ConfigReaderError, path: Optional[str] = None) -> "Resolution":
        return cls(query=query, path=path, value="", error=error)
