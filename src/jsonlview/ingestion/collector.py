"""Collect records from a JSONL stream: all of them, or the first matching an id."""

from __future__ import annotations

import json
from contextlib import closing
from pathlib import Path
from typing import Any, List

from jsonlview.index.summary import resolve_id
from jsonlview.ingestion.reader import iter_records


def id_key(value: Any) -> str:
    """Canonical string form of a record id.

    Lookup ids arrive as strings (URL segments, CLI arguments), while record
    ids may be any JSON scalar, so ``5`` and ``"5"`` address the same record.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class _NotFound:
    """Result of a lookup that matched no record.

    Distinct from ``None``, which is a valid record (a ``null`` line).
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Any = _NotFound()


def collect_all(path: Path) -> List[Any]:
    """Return every record of ``path`` in file order."""
    return list(iter_records(path))


def find_record(path: Path, record_id: Any) -> Any:
    """Return the first record whose resolved id equals ``record_id``, else ``NOT_FOUND``.

    Scanning stops at the first match; the rest of the file is never read.
    """
    target = id_key(record_id)
    with closing(iter_records(path)) as records:
        for position, record in enumerate(records):
            if id_key(resolve_id(record, position)) == target:
                return record
    return NOT_FOUND


def get_data(path: Path, record_id: Any = None) -> Any:
    """Collect-all when ``record_id`` is ``None``, collect-one otherwise."""
    if record_id is None:
        return collect_all(path)
    return find_record(path, record_id)
