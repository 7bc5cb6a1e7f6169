"""Shared fixtures for jsonlview tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable

import pytest


def dumps_lines(records: Iterable[Any]) -> list[str]:
    return [json.dumps(record) for record in records]


@pytest.fixture
def write_jsonl(tmp_path: Path) -> Callable[..., Path]:
    """Write raw lines (already JSON text, or deliberately broken) to a file."""

    def _write(name: str, lines: Iterable[str], directory: Path | None = None) -> Path:
        path = (directory or tmp_path) / name
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def lookup_file(write_jsonl: Callable[..., Path]) -> Path:
    """Records addressed by ``id``, by ``meta.id`` and by position."""
    return write_jsonl("lookup.jsonl", dumps_lines([{"id": "x"}, {"meta": {"id": "y"}}, {}]))
