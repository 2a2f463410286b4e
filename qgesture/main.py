"""
Main entry point: serve the gesture recognizer over HTTP.

Usage:
    python -m qgesture.main [--config path/to/config.yaml]
"""
import logging
import sys
from typing import List, Optional

import uvicorn

from .config import load_config
from .recognizer import Recognizer
from .server import create_app

logger = logging.getLogger(__name__)


def _config_path(argv: List[str]) -> Optional[str]:
    """Value following --config, if present."""
    if "--config" in argv:
        index = argv.index("--config")
        if index + 1 < len(argv):
            return argv[index + 1]
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""
    argv = sys.argv[1:] if argv is None else argv

    try:
        cfg = load_config(_config_path(argv))
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=getattr(logging, cfg.logging.level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    recognizer = Recognizer(cfg.recognizer)
    app = create_app(cfg, recognizer)

    logger.info(f"🚀 Starting {cfg.server.title} on {cfg.server.host}:{cfg.server.port}")
    logger.info(f"📚 API documentation available at http://{cfg.server.host}:{cfg.server.port}/docs")

    try:
        uvicorn.run(
            app,
            host=cfg.server.host,
            port=cfg.server.port,
            log_level=cfg.logging.level.lower(),
        )
    except KeyboardInterrupt:
        print("\nServer interrupted by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
