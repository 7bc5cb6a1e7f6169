"""HTML pages of the JSONL viewer."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Tuple

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from jsonlview.errors import JsonlError
from jsonlview.index.builder import find_position, list_summaries, neighbors
from jsonlview.ingestion.collector import NOT_FOUND, find_record
from jsonlview.models import Summary
from jsonlview.utils.files import list_jsonl_files, resolve_jsonl_path
from jsonlview.web.deps import get_assets_dir
from jsonlview.web.render import render_error, render_index, render_view

LOGGER = logging.getLogger(__name__)

router = APIRouter()


async def load_all_summaries(assets_dir: Path) -> List[Tuple[str, List[Summary]]]:
    """Index every JSONL file under ``assets_dir``, reading the files concurrently."""
    names = await asyncio.to_thread(list_jsonl_files, assets_dir)
    indexes = await asyncio.gather(
        *(asyncio.to_thread(list_summaries, assets_dir / name) for name in names)
    )
    return list(zip(names, indexes))


@router.get("/", response_class=HTMLResponse)
async def index(assets_dir: Path = Depends(get_assets_dir)) -> HTMLResponse:
    try:
        files = await load_all_summaries(assets_dir)
    except (JsonlError, OSError) as exc:
        LOGGER.error("Unable to build index for %s: %s", assets_dir, exc)
        return HTMLResponse(content=render_error(str(exc)), status_code=500)
    return HTMLResponse(content=render_index(files))


@router.get("/view/{file}/{record_id:path}", response_class=HTMLResponse)
async def view_record(
    file: str, record_id: str, assets_dir: Path = Depends(get_assets_dir)
) -> HTMLResponse:
    try:
        path = resolve_jsonl_path(assets_dir, file)
    except ValueError as exc:
        return HTMLResponse(content=render_error(str(exc)), status_code=404)

    try:
        record = await asyncio.to_thread(find_record, path, record_id)
        summaries = await asyncio.to_thread(list_summaries, path)
    except JsonlError as exc:
        LOGGER.error("Unable to read %s: %s", path, exc)
        return HTMLResponse(content=render_error(str(exc)), status_code=500)

    nav = neighbors(summaries, find_position(summaries, record_id))
    found = record is not NOT_FOUND
    html = render_view(file, record_id, record if found else None, nav, found=found)
    return HTMLResponse(content=html, status_code=200 if found else 404)
