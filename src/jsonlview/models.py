"""Core jsonlview data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Flat mapping: meta fields first, then the computed ``id``, ``num_items``
# and ``keys`` (see ``jsonlview.index.summary.merge_summary``).
Summary = Dict[str, Any]


@dataclass(slots=True)
class Neighbors:
    """Summaries adjacent to a position in a file index."""

    previous: Optional[Summary] = None
    next: Optional[Summary] = None


@dataclass(slots=True)
class StaticParam:
    """One ``{file, id}`` pair addressable by a record view page."""

    file: str
    id: Any
