from __future__ import annotations

from .errors import ConfigReaderError, Resolution


def format_error(error: ConfigReaderError) -> str:
    return f"Error: {error}"


def format_resolution(resolution: Resolution) -> str:
    return f"{resolution.query} : {resolution.value}"

