from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

import uvicorn

from htmx_demo.app import create_app
from htmx_demo.config import load_demo_config
from htmx_demo.home import ensure_demo_layout, resolve_demo_home


def main() -> None:
    home = resolve_demo_home()
    paths = ensure_demo_layout(home)
    config = load_demo_config(paths)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            RotatingFileHandler(
                paths.log_path,
                maxBytes=config.logging.max_size_mb * 1024 * 1024,
                backupCount=config.logging.backup_count,
            ),
            logging.StreamHandler(),
        ],
    )

    host = os.environ.get("HTMX_DEMO_BIND") or config.network.bind_host

    env_port = os.environ.get("HTMX_DEMO_PORT")
    port = int(env_port) if env_port else config.network.port

    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
