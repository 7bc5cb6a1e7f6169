"""Derive lightweight per-record summaries.

Records have no fixed schema: every helper here accepts any JSON value
(object, array, scalar or ``None``) and never raises on an unexpected shape.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from jsonlview.models import Summary

COMPUTED_FIELDS = ("id", "num_items", "keys")


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return None


def resolve_id(record: Any, position: int) -> Any:
    """Resolve a record id: ``id``, then ``meta.id``, then ``item-<position>``."""
    record_id = _field(record, "id")
    if record_id is not None:
        return record_id
    meta_id = _field(_field(record, "meta"), "id")
    if meta_id is not None:
        return meta_id
    return f"item-{position}"


def top_level_keys(record: Any) -> List[str]:
    """Top-level keys of the raw record in insertion order."""
    if isinstance(record, dict):
        return list(record)
    return []


def count_items(record: Any) -> int:
    """Length of ``messages`` when it is a list, else the top-level key count.

    The fallback counts the same keys that ``top_level_keys`` exposes, so a
    record without messages reports ``num_items == len(keys)``.
    """
    messages = _field(record, "messages")
    if isinstance(messages, list):
        return len(messages)
    return len(top_level_keys(record))


def meta_fields(record: Any) -> Dict[str, Any]:
    """Own fields of ``record.meta`` when it is an object."""
    meta = _field(record, "meta")
    if isinstance(meta, dict):
        return dict(meta)
    return {}


def merge_summary(meta: Mapping[str, Any], computed: Mapping[str, Any]) -> Summary:
    """Spread ``meta`` first, then ``computed``; computed fields win on collision."""
    merged: Summary = dict(meta)
    merged.update(computed)
    return merged


def derive_summary(record: Any, position: int) -> Summary:
    """Summarize one record found at ``position`` (0-based) in its file."""
    computed = {
        "id": resolve_id(record, position),
        "num_items": count_items(record),
        "keys": top_level_keys(record),
    }
    return merge_summary(meta_fields(record), computed)
