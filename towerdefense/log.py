"""Simple logging to the console and to a log file."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class LogType(enum.Enum):
    """Severity label printed in front of each log line."""

    VERBOSE = enum.auto()
    DEBUGGING = enum.auto()
    INFO = enum.auto()
    WARN = enum.auto()
    ERROR = enum.auto()

    @property
    def label(self) -> str:
        return self.name


@dataclass
class _Config:
    enabled: bool = False
    log_verbose: bool = False
    file_path: str = "log.txt"

    def can_log(self, log_type: LogType) -> bool:
        return self.enabled and (log_type is not LogType.VERBOSE or self.log_verbose)


_config = _Config()


def set_config(enabled: bool = False, log_verbose: bool = False, file_path: str = "log.txt") -> None:
    """Set the global logging options and empty the log file."""
    _config.enabled = enabled
    _config.log_verbose = log_verbose
    _config.file_path = str(file_path)
    Path(_config.file_path).write_text("", encoding="utf-8")


def log(log_type: LogType, *args: Any) -> None:
    """Write one labelled line, made of the arguments, to stdout and the log file."""
    if not _config.can_log(log_type):
        return
    line = f"[{log_type.label}] " + "".join(str(arg) for arg in args)
    print(line)
    with open(_config.file_path, "a", encoding="utf-8") as fh:
        fh.write(line + "\n")