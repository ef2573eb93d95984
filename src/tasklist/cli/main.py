# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (store -> service -> handler),
then serves the /tasks app with uvicorn until interrupted.
"""

from __future__ import annotations

import logging

import uvicorn

from ..cli.bootstrap import build_app, create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

UVICORN_LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO
    level_name = logging.getLevelName(console_level)
    if level_name.lower() not in UVICORN_LOG_LEVELS:
        level_name = "INFO"

    log_dir = settings.data_dir if settings.log_to_file else None
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)
    if log_file is not None:
        logger.info("Writing logs to %s", log_file)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    app = build_app(state)

    logger.info("Listening on http://%s:%s", settings.host, settings.port)

    # uvicorn handles SIGINT/SIGTERM itself and exits non-zero if it cannot bind.
    # log_config=None keeps its records flowing through our handlers.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=level_name.lower(),
    )
    logger.info("Bye.")


if __name__ == "__main__":
    main()
