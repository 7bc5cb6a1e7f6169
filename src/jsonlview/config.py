"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ASSETS_ENV_VAR = "JSONLVIEW_ASSETS_DIR"


def _get_default_assets_dir() -> Path:
    """Assets directory from the environment, else ``./assets``."""
    from_env = os.environ.get(ASSETS_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return Path("assets")


@dataclass(slots=True)
class AppConfig:
    assets_dir: Path | None = None
    host: str = "127.0.0.1"
    port: int = 8787
    export_dir: Path = Path("dist")

    def __post_init__(self) -> None:
        if self.assets_dir is None:
            self.assets_dir = _get_default_assets_dir()

    def resolve_assets_dir(self, base_dir: Path | None = None) -> Path:
        if self.assets_dir is None:
            self.assets_dir = _get_default_assets_dir()
        if Path(self.assets_dir).is_absolute() or base_dir is None:
            return Path(self.assets_dir)
        return base_dir / self.assets_dir
