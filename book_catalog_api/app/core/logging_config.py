"""
Logging setup driven by ``Settings``.

``setup_logging`` attaches a console handler, plus a file handler when
``LOG_FILE`` is set, to the root logger so every module logger
(``logging.getLogger(__name__)``) inherits them.  A logger that already
has handlers (uvicorn, pytest or an earlier ``create_app``) is left as
it is.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number, ``INFO`` if unknown."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def build_handlers(app_settings: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(app_settings: Settings, logger: Optional[logging.Logger] = None) -> None:
    """Configure ``logger`` (the root logger by default) from settings.

    Parameters
    ----------
    app_settings : Settings
        Supplies ``log_level`` and the optional ``log_file`` path.
    logger : Optional[logging.Logger]
        Logger to configure.  Does nothing if it already has handlers.
    """
    logger = logger or logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(resolve_level(app_settings.log_level))
    for handler in build_handlers(app_settings):
        logger.addHandler(handler)
