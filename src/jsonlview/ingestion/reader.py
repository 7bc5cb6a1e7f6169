"""Streaming reader for JSON Lines files.

Lines are decoded and parsed one at a time, so only the current line is held
in memory. The file handle is closed on every exit path: exhaustion, a parse
failure, or the consumer closing the generator early.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from jsonlview.errors import RecordFileError, RecordParseError

LOGGER = logging.getLogger(__name__)

_BOM = "\ufeff"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_line(path: Path, line_index: int, raw: bytes) -> Any:
    """Decode and parse a single JSONL line."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RecordParseError(path, line_index, f"invalid UTF-8 ({exc.reason})") from exc
    if line_index == 0:
        text = text.lstrip(_BOM)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise RecordParseError(path, line_index, exc.msg) from exc
    except ValueError as exc:
        raise RecordParseError(path, line_index, str(exc)) from exc


def iter_records(path: Path) -> Iterator[Any]:
    """Yield parsed JSON values from ``path`` in file order, skipping blank lines."""
    path = Path(path)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise RecordFileError(path, exc) from exc

    LOGGER.debug("Reading records from %s", path)
    count = 0
    with handle:
        line_index = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as exc:
                raise RecordFileError(path, exc) from exc
            if not raw:
                break
            if raw.strip():
                record = parse_line(path, line_index, raw)
                count += 1
                yield record
            line_index += 1
    LOGGER.debug("Read %d records from %s", count, path)
