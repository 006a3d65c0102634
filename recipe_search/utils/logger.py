"""Logger setup for the recipe_search domain modules.

The Edamam client and other non-GUI code log through ``get_logger(__name__)``.
The first call configures the root logger at ``RS_LOG_LEVEL`` (default INFO)
unless the host application already attached handlers. The GUI layer logs
through ``gui.utils.logging`` instead, which never configures anything.
"""
import logging
import os

DEFAULT_LEVEL = os.getenv("RS_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
