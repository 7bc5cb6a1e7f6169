"""Command line interface for jsonlview."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from jsonlview.config import AppConfig
from jsonlview.errors import JsonlError
from jsonlview.export import export_site
from jsonlview.index.builder import list_summaries
from jsonlview.ingestion.collector import NOT_FOUND, find_record, id_key
from jsonlview.utils.files import list_jsonl_files, resolve_jsonl_path
from jsonlview.web.app import app as web_app


console = Console()
app = typer.Typer(help="jsonlview - browse JSON Lines record files")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _resolve_assets(assets: Path | None) -> Path:
    config = AppConfig(assets_dir=assets if assets is not None else AppConfig().assets_dir)
    return config.resolve_assets_dir(Path.cwd())


def _file_path(assets_dir: Path, file: str) -> Path:
    try:
        return resolve_jsonl_path(assets_dir, file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="FILE") from exc


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[red]{exc}[/red]")
    raise typer.Exit(code=1)


@app.command()
def files(
    assets: Path = typer.Option(None, "--assets", help="Directory holding .jsonl files"),
) -> None:
    """List the JSONL files available for viewing."""
    assets_dir = _resolve_assets(assets)
    try:
        names = list_jsonl_files(assets_dir)
    except OSError as exc:
        _fail(exc)

    if not names:
        console.print("[yellow]No JSONL files found.[/yellow]")
        return
    for name in names:
        console.print(name)


@app.command("list")
def list_records(
    file: str = typer.Argument(..., help="JSONL file name inside the assets directory"),
    assets: Path = typer.Option(None, "--assets", help="Directory holding .jsonl files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show the summary of every record in a file."""
    _setup_logging(verbose)
    path = _file_path(_resolve_assets(assets), file)
    try:
        summaries = list_summaries(path)
    except JsonlError as exc:
        _fail(exc)

    table = Table(show_header=True, header_style="bold magenta", title=file)
    table.add_column("ID")
    table.add_column("Items")
    table.add_column("Keys")
    for summary in summaries:
        table.add_row(
            id_key(summary["id"]),
            str(summary["num_items"] or "N/A"),
            ", ".join(summary["keys"]),
        )
    console.print(table)


@app.command()
def show(
    file: str = typer.Argument(..., help="JSONL file name inside the assets directory"),
    record_id: str = typer.Argument(..., metavar="ID", help="Resolved record id"),
    assets: Path = typer.Option(None, "--assets", help="Directory holding .jsonl files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print one record as JSON."""
    _setup_logging(verbose)
    path = _file_path(_resolve_assets(assets), file)
    try:
        record = find_record(path, record_id)
    except JsonlError as exc:
        _fail(exc)

    if record is NOT_FOUND:
        console.print(f"[yellow]Record {record_id!r} not found in {file}.[/yellow]")
        raise typer.Exit(code=1)
    console.print(Syntax(json.dumps(record, indent=2, ensure_ascii=False), "json"))


@app.command()
def export(
    out: Path = typer.Argument(None, help="Output directory for the static site"),
    assets: Path = typer.Option(None, "--assets", help="Directory holding .jsonl files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Pre-render the index and every record page as static HTML."""
    _setup_logging(verbose)
    out_dir = out if out is not None else AppConfig().export_dir
    assets_dir = _resolve_assets(assets)
    try:
        written = export_site(assets_dir, out_dir)
    except (JsonlError, OSError) as exc:
        _fail(exc)
    console.print(f"Exported {len(written)} pages to [bold]{out_dir}[/bold]")


@app.command()
def serve(
    host: str = typer.Option(AppConfig().host, help="Host interface"),
    port: int = typer.Option(AppConfig().port, help="Server port"),
    assets: Path = typer.Option(None, "--assets", help="Directory holding .jsonl files"),
) -> None:
    """Start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = AppConfig(assets_dir=_resolve_assets(assets), host=host, port=port)
    if not Path(config.assets_dir).is_dir():
        console.print("[yellow]Warning: assets directory not found, pages will fail.[/yellow]")
    web_app.state.config = config

    console.print(f"Starting server on http://{host}:{port} (assets: {config.assets_dir})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
