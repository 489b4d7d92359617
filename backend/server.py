"""
Run the song recommendation API.

Usage:
    python -m backend.server
"""
from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_SERVER_CONFIG, ServerConfig

logger = logging.getLogger(__name__)


def main(config: ServerConfig = DEFAULT_SERVER_CONFIG) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running at http://%s:%d", config.host, config.port)
    uvicorn.run("backend.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
