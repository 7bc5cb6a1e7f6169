"""Static site export: pre-render the index and every record page to HTML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Set, Tuple

from jsonlview.index.builder import find_position, neighbors
from jsonlview.index.summary import derive_summary
from jsonlview.ingestion.collector import collect_all
from jsonlview.models import StaticParam, Summary
from jsonlview.utils.files import list_jsonl_files, resolve_jsonl_path
from jsonlview.web.render import quote_id, quote_segment, render_index, render_view

LOGGER = logging.getLogger(__name__)


def page_path(out_dir: Path, param: StaticParam) -> Path:
    """Output file for the ``/view/<file>/<id>`` page, stored as ``<id>.html``."""
    return out_dir / "view" / quote_segment(param.file) / f"{quote_id(param.id)}.html"


def _load(assets_dir: Path, name: str) -> Tuple[List[Any], List[Summary]]:
    records = collect_all(resolve_jsonl_path(assets_dir, name))
    return records, [derive_summary(record, position) for position, record in enumerate(records)]


def export_site(assets_dir: Path, out_dir: Path) -> List[Path]:
    """Write ``index.html`` and one page per ``{file, id}`` pair into ``out_dir``.

    Any read or parse failure aborts the export.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    loaded: Dict[str, Tuple[List[Any], List[Summary]]] = {}
    for name in list_jsonl_files(assets_dir):
        loaded[name] = _load(assets_dir, name)

    written: List[Path] = []
    seen: Set[Path] = set()
    index_path = out_dir / "index.html"
    index_path.write_text(
        render_index([(name, summaries) for name, (_, summaries) in loaded.items()]),
        encoding="utf-8",
    )
    written.append(index_path)

    params = [
        StaticParam(file=name, id=summary["id"])
        for name, (_, summaries) in loaded.items()
        for summary in summaries
    ]
    for param in params:
        target = page_path(out_dir, param)
        if target in seen:
            # Duplicate id: the first record with it already owns the page.
            continue
        records, summaries = loaded[param.file]
        position = find_position(summaries, param.id)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            render_view(param.file, param.id, records[position], neighbors(summaries, position)),
            encoding="utf-8",
        )
        LOGGER.debug("Wrote %s", target)
        seen.add(target)
        written.append(target)

    LOGGER.info("Exported %d pages to %s", len(written), out_dir)
    return written
