"""Ordered per-file index of summaries, used for listing and navigation.

The index is rebuilt from disk on every call; nothing is cached between
requests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

from jsonlview.index.summary import derive_summary
from jsonlview.ingestion.collector import collect_all, id_key
from jsonlview.models import Neighbors, StaticParam, Summary
from jsonlview.utils.files import list_jsonl_files, resolve_jsonl_path

LOGGER = logging.getLogger(__name__)


def list_summaries(path: Path) -> List[Summary]:
    """Summaries of every record in ``path``, in file order."""
    return [derive_summary(record, position) for position, record in enumerate(collect_all(path))]


get_metadata = list_summaries


def find_position(summaries: Sequence[Summary], record_id: Any) -> Optional[int]:
    """Position of the first summary whose id equals ``record_id``.

    Linear scan, O(n) per lookup.
    """
    target = id_key(record_id)
    for position, summary in enumerate(summaries):
        if id_key(summary["id"]) == target:
            return position
    return None


def neighbors(summaries: Sequence[Summary], position: Optional[int]) -> Neighbors:
    """Summaries immediately before and after ``position``; no wraparound."""
    if position is None or not 0 <= position < len(summaries):
        return Neighbors()
    previous = summaries[position - 1] if position > 0 else None
    following = summaries[position + 1] if position < len(summaries) - 1 else None
    return Neighbors(previous=previous, next=following)


def static_params(assets_dir: Path) -> List[StaticParam]:
    """Every ``{file, id}`` pair under ``assets_dir`` for page pre-rendering."""
    params: List[StaticParam] = []
    for name in list_jsonl_files(assets_dir):
        summaries = list_summaries(resolve_jsonl_path(assets_dir, name))
        params.extend(StaticParam(file=name, id=summary["id"]) for summary in summaries)
    LOGGER.debug("Enumerated %d static pages under %s", len(params), assets_dir)
    return params
