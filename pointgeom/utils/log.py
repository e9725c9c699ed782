"""
Logging setup for pointgeom.

Modules log through ``logging.getLogger(__name__)``; applications call
``setup_logging`` once to get console output from the ``pointgeom`` logger.
"""
import logging
from typing import Optional, Union

_HANDLER: Optional[logging.Handler] = None


def setup_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Logging level; defaults to ``log_level`` from the active config

    Returns:
        The ``pointgeom`` logger
    """
    global _HANDLER
    from ..core.config import get_config
    from ..core.errors import ConfigError

    if level is None:
        level = get_config().log_level
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level: {name!r}")

    logger = logging.getLogger('pointgeom')
    logger.setLevel(level)

    if _HANDLER is None:
        _HANDLER = logging.StreamHandler()
        _HANDLER.setFormatter(logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(_HANDLER)
    _HANDLER.setLevel(level)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
