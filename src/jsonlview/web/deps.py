"""Request dependencies shared by the HTML and JSON routes."""

from __future__ import annotations

from pathlib import Path

from fastapi import Depends, Request

from jsonlview.config import AppConfig


def get_config(request: Request) -> AppConfig:
    config = getattr(request.app.state, "config", None)
    return config if config is not None else AppConfig()


def get_assets_dir(config: AppConfig = Depends(get_config)) -> Path:
    return config.resolve_assets_dir(Path.cwd())
