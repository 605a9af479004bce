#!/usr/bin/env python3
"""Web server entry point for the Debate Assistant."""

import logging

from config.settings import get_default_config
from web.api import create_app


def setup_logging(level: str = "INFO"):
    """Configure logging for the web server."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # Suppress noisy third-party loggers
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def main():
    config = get_default_config()
    setup_logging(config.system.log_level)

    import uvicorn

    print("🎭 Starting Debate Assistant Web Server...")
    print(f"📡 API Documentation: http://localhost:{config.system.port}/docs")

    app = create_app(config)
    uvicorn.run(
        app,
        host=config.system.host,
        port=config.system.port,
        log_level=config.system.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
