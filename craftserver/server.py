from __future__ import annotations

import logging
import sys

import uvicorn

from .logging_setup import configure_logging
from .main import create_app
from .schemas import Craft, craft_from_json, example_craft, to_json

HOST = "127.0.0.1"
PORT = 3000


def self_test(logger: logging.Logger) -> Craft:
    """Serialize the example craft, read it back and log both forms."""
    serialized = to_json(example_craft())
    logger.info("serialized = %s", serialized)
    deserialized = craft_from_json(serialized)
    logger.info("deserialized = %r", deserialized)
    return deserialized


def run(host: str = HOST, port: int = PORT) -> None:
    logger = configure_logging()
    self_test(logger)
    app = create_app(logger=logger)
    logger.info("Listening on http://%s:%s", host, port)
    try:
        uvicorn.run(app, host=host, port=port, log_config=None)
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        logger.error("server error: %s", exc)
        sys.exit(1)
