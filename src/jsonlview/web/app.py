"""FastAPI application backing the JSONL viewer."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from jsonlview import __version__
from jsonlview.errors import JsonlError
from jsonlview.index.builder import list_summaries
from jsonlview.ingestion.collector import NOT_FOUND, find_record
from jsonlview.utils.files import list_jsonl_files, resolve_jsonl_path
from jsonlview.web.deps import get_assets_dir
from jsonlview.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="JSONL Viewer", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.include_router(frontend_router)


class FileList(BaseModel):
    files: List[str]


class FileIndex(BaseModel):
    file: str
    items: List[Dict[str, Any]]


def _error(status_code: int, message: str | None) -> JSONResponse:
    return JSONResponse(
        {"error": message or "An unknown error occurred"}, status_code=status_code
    )


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/api/files")
async def api_list_files(assets_dir: Path = Depends(get_assets_dir)) -> Any:
    try:
        names = await asyncio.to_thread(list_jsonl_files, assets_dir)
    except OSError as exc:
        LOGGER.error("Unable to list %s: %s", assets_dir, exc)
        return _error(500, str(exc))
    return FileList(files=names)


@app.get("/api/{file}")
async def api_file_metadata(file: str, assets_dir: Path = Depends(get_assets_dir)) -> Any:
    try:
        path = resolve_jsonl_path(assets_dir, file)
    except ValueError:
        return _error(404, "Not found")

    try:
        summaries = await asyncio.to_thread(list_summaries, path)
    except JsonlError as exc:
        LOGGER.error("Unable to read %s: %s", path, exc)
        return _error(500, str(exc))
    return FileIndex(file=file, items=summaries)


@app.get("/api/{file}/{record_id:path}")
async def api_get_record(
    file: str, record_id: str, assets_dir: Path = Depends(get_assets_dir)
) -> Any:
    try:
        path = resolve_jsonl_path(assets_dir, file)
    except ValueError:
        return _error(404, "Not found")

    try:
        record = await asyncio.to_thread(find_record, path, record_id)
    except JsonlError as exc:
        LOGGER.error("Unable to read %s: %s", path, exc)
        return _error(500, str(exc))

    if record is NOT_FOUND:
        return _error(404, "Not found")
    return JSONResponse(record)
