"""Process entry point: ``python -m todo_api``."""

import logging

import uvicorn

from todo_api.config import get_settings
from todo_api.logging_setup import configure_logging
from todo_api.main import build_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = build_app(settings)
    logger.info("server.listening host=%s port=%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
