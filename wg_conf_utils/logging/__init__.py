"""Module de logging."""

from wg_conf_utils.logging.base import Logger, NullLogger
from wg_conf_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "NullLogger",
    "FileLogger",
]
