from loguru import logger
import os
import sys
import time
from typing import Optional
from contextlib import contextmanager


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None, enable_json: bool = False):
    """Configure loguru: colored console output plus optional rotating files."""
    env_log_level = os.environ.get('LOGURU_LEVEL')
    if env_log_level:
        log_level = env_log_level.upper()

    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    logger.add(
        sys.stderr,
        level=log_level,
        format=console_format,
        colorize=True
    )

    if not log_file:
        return logger

    os.makedirs(os.path.dirname(log_file) or '.', exist_ok=True)

    file_kwargs = dict(
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        encoding="utf-8",
        serialize=enable_json,
    )
    logger.add(log_file, level=log_level, rotation="50 MB", retention="30 days", compression="zip", **file_kwargs)

    root, ext = os.path.splitext(log_file)
    error_file = f"{root}_error{ext or '.log'}"
    logger.add(error_file, level="ERROR", rotation="10 MB", retention="60 days", **file_kwargs)

    return logger


@contextmanager
def log_operation(operation_name: str, **context):
    """Log start, completion and failure of an operation."""
    start_time = time.time()
    details = " ".join(f"{key}={value}" for key, value in context.items())
    logger.info(f"Starting operation: {operation_name} {details}".rstrip())

    try:
        yield
        execution_time = time.time() - start_time
        logger.info(f"Operation completed: {operation_name} ({execution_time:.3f}s)")
    except Exception as e:
        execution_time = time.time() - start_time
        logger.error(f"Operation failed: {operation_name} ({execution_time:.3f}s): {e}")
        raise
