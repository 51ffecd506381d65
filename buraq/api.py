"""Shared application types: error codes, API context, editor state, plugins and logging."""

from __future__ import annotations

import abc
import sys
import tempfile
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any

APP_VERSION_MAJOR = 0
APP_VERSION_MINOR = 0
APP_VERSION_PATCH = 16


class ErrorCode(IntEnum):
    """Process exit codes used by the application."""

    SUCCESS = 0
    ERROR_FILE_NOT_FOUND = 1
    ERROR_INVALID_FORMAT = 2
    ERROR_WRITE_FAILED = 3
    ERROR_READ_FAILED = 4
    ERROR_OUT_OF_MEMORY = 5
    ERROR_UNKNOWN = 6


@dataclass
class ToolsApi:
    """Application context handed to plugins."""

    search_path: Path = field(default_factory=Path)
    user_path: Path = field(default_factory=Path)
    user_data_path: Path = field(default_factory=Path)
    plugins: dict[str, str] = field(default_factory=dict)


@dataclass(eq=False)
class EditorState:
    """Snapshot of the editor; two states are equal when their block positions match."""

    has_text: bool = False
    is_block_valid: bool = False
    is_selected: bool = False
    block_count: int = 0
    cursor_block_number: int = 0
    block_number: int = 0
    line_height: int = 0
    current_line_height: int = 0
    selected_block_numbers: set[int] = field(default_factory=set)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditorState):
            return NotImplemented
        return (
            self.block_count == other.block_count
            and self.block_number == other.block_number
            and self.cursor_block_number == other.cursor_block_number
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass
class ProcessedData:
    """Result returned by a plugin action."""

    result_value: str = ""


class Plugin(abc.ABC):
    """Base class for application plugins."""

    def __init__(self, api_context: ToolsApi | None = None) -> None:
        self.api_context = api_context

    @abc.abstractmethod
    def name(self) -> str:
        """Return the plugin's display name."""

    @abc.abstractmethod
    def initialize(self, app_context: ToolsApi) -> bool:
        """Prepare the plugin; return True on success."""

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Release the plugin's resources."""

    @abc.abstractmethod
    def perform_action(self, command: Any) -> ProcessedData:
        """Run the plugin's action on a command."""


def app_version() -> str:
    """Return the application version as 'major.minor.patch'."""
    return f"{APP_VERSION_MAJOR}.{APP_VERSION_MINOR}.{APP_VERSION_PATCH}"


def default_data_dir() -> Path:
    """Return the directory holding the application's data and log."""
    return Path(tempfile.gettempdir()) / "ITools" / ".data"


def db_log(message: str, log_path: Path | str | None = None) -> None:
    """Append a timestamped message to the log file; failures are reported on stderr."""
    path = Path(log_path) if log_path is not None else default_data_dir() / "log.txt"
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    try:
        with path.open("a", encoding="utf-8") as out:
            out.write(f"{stamp}: {message}\n")
    except OSError as exc:
        print(f"Error: Could not open file {path} for appending: {exc}", file=sys.stderr)