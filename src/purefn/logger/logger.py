"""Global logger configuration for the purefn project.

The level set here is only a starting point; :mod:`purefn.core.config`
applies the validated ``Settings.LOG_LEVEL`` once settings are loaded.
"""

import logging
import sys

__all__ = ["logger", "setup_logger", "get_logger", "resolve_level"]

ROOT_NAME = "purefn"
HANDLER_NAME = "purefn.stdout"


def resolve_level(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Raises:
        ValueError: If ``level`` is not a known logging level name.
    """
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {level!r}; expected one of {sorted(levels)}"
        ) from None


def setup_logger(
    name: str = ROOT_NAME,
    level: str = "INFO",
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    numeric_level = resolve_level(level)
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Attach the stdout handler only on first setup
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False

    return logger


def get_logger(module: str) -> logging.Logger:
    """Child logger of the package logger, e.g. ``get_logger(__name__)``.

    Records propagate to the package logger, which owns the handler.
    """
    if module == ROOT_NAME or module.startswith(ROOT_NAME + "."):
        return logging.getLogger(module)
    return logging.getLogger(f"{ROOT_NAME}.{module}")


# Package logger; its handler is shared by every child logger
logger = setup_logger()
