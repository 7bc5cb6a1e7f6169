"""Utility helpers for working with the assets directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

JSONL_SUFFIX = ".jsonl"


def is_jsonl_name(name: str) -> bool:
    """True for a bare ``.jsonl`` file name with no path components."""
    if not name or "\0" in name or "\\" in name or not name.endswith(JSONL_SUFFIX):
        return False
    return Path(name).name == name


def list_jsonl_files(assets_dir: Path) -> List[str]:
    """Names of the ``.jsonl`` files directly inside ``assets_dir``, in OS order.

    Names that ``resolve_jsonl_path`` would refuse (a backslash is legal on
    POSIX) are left out.
    """
    return [
        entry.name
        for entry in os.scandir(assets_dir)
        if is_jsonl_name(entry.name) and entry.is_file()
    ]


def resolve_jsonl_path(assets_dir: Path, name: str) -> Path:
    """Join ``name`` onto ``assets_dir``, refusing anything outside it.

    Raises ``ValueError`` for names that are not a plain ``.jsonl`` file name.
    """
    if not is_jsonl_name(name):
        raise ValueError(f"Invalid file name: {name!r}")
    return Path(assets_dir) / name
