"""Errors raised while reading JSONL record files."""

from __future__ import annotations

from pathlib import Path


class JsonlError(Exception):
    """Base class for failures reading a record file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)


class RecordFileError(JsonlError):
    """The record file is missing, unreadable or not a regular file."""

    def __init__(self, path: Path, reason: OSError) -> None:
        detail = reason.strerror or str(reason)
        super().__init__(path, f"Unable to read {Path(path).name}: {detail}")


class RecordParseError(JsonlError, ValueError):
    """A non-blank line is not valid JSON text.

    ``line_index`` is the 0-based physical line number within the file.
    """

    def __init__(self, path: Path, line_index: int, reason: str) -> None:
        super().__init__(
            path, f"Invalid JSON in {Path(path).name} at line {line_index}: {reason}"
        )
        self.line_index = line_index
        self.reason = reason
