"""Process-wide logging setup for the proxy server and CLI."""

import logging
from typing import Optional

from rich.logging import RichHandler

from .settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[Settings] = None, console: bool = True) -> None:
    """Attach file and console handlers to the root logger.

    Args:
        settings: Settings providing log_file and log_level
        console: Also log to the terminal through rich
    """
    settings = settings or get_settings()

    handlers: list[logging.Handler] = []
    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)
    if console:
        handlers.append(RichHandler(rich_tracebacks=True, show_path=False))

    logging.basicConfig(level=settings.log_level.upper(), handlers=handlers, force=True)
