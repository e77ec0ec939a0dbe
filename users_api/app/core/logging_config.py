"""
Logging configuration for the application.

``setup_logging`` configures the root logger from ``Settings``: a
console handler, an optional file handler and the level.  Every request
is already logged by ``LoggingInterceptor``, so uvicorn's own access
log is turned down to warnings unless ``settings.access_log`` is set.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once.

    The access log level is applied on every call; handlers are only
    attached when the root logger has none yet, e.g. not when
    ``create_app`` runs once per test.

    Parameters
    ----------
    settings : Settings
        Supplies ``log_level`` (case insensitive), ``log_file`` (an
        optional path resolved against the working directory) and
        ``access_log``.
    """
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if settings.access_log else logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
