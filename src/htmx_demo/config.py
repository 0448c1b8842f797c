from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from htmx_demo.home import DemoPaths


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)


class LoggingConfig(BaseModel):
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class AssetsConfig(BaseModel):
    """Third-party assets referenced from the full-page shell.

    Integrity values are Subresource Integrity hashes; set to null to omit the
    `integrity` attribute (e.g. when pointing at a self-hosted copy).
    """

    stylesheet_url: str = Field(default="https://unpkg.com/water.css@2.1.1/out/water.css")
    stylesheet_integrity: str | None = Field(
        default="sha384-eHoWBq4xGyEfS3rmZe6gvzlNS/nNJhiPPbKCJN1cQHJukU+q6ji3My2fJGYd1EBo"
    )
    htmx_url: str = Field(default="https://unpkg.com/htmx.org@1.8.2/dist/htmx.js")
    htmx_integrity: str | None = Field(
        default="sha384-dUlt2hvoUDyqJ29JH9ln6o/B23lVQiQm8Z0+oEuPBWwKXiyG2MozxxFsCKWM7dLl"
    )


class DemoConfig(BaseModel):
    version: str = Field(default="1")
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_demo_config(paths: DemoPaths) -> DemoConfig:
    """Load config from ${HTMX_DEMO_HOME}/config/demo.json.

    - If missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    config_path = paths.config_path
    if not config_path.exists():
        return DemoConfig()

    raw = _read_json(config_path)
    return DemoConfig.model_validate(raw)


def write_demo_config(paths: DemoPaths, config: DemoConfig) -> None:
    """Persist config to ${HTMX_DEMO_HOME}/config/demo.json."""

    payload = config.model_dump(mode="json")
    paths.config_dir.mkdir(parents=True, exist_ok=True)
    paths.config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
