"""Logging configuration for the parse mode setter."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that report which parse mode rule was applied to each call
TRACE_LOGGERS = ("parse_mode_setter.transformers", "parse_mode_setter.telegram")

# HTTP loggers echo whole request bodies at DEBUG
HTTP_LOGGERS = ("urllib3", "requests")


def _parse_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").strip().lower() in {"1", "true", "yes"}


def configure_logging(level: str | None = None) -> None:
    """Configure stdout logging for the client and its transformers.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO), used
        when ``level`` is not given
      - LOG_TRACE_TRANSFORMERS: true/false (default false), logs every
        parse mode decision at DEBUG whatever the root level

    :param level: Root log level, overriding LOG_LEVEL.
    :raises ValueError: If the level name is unknown.
    """
    level_name = level or os.environ.get("LOG_LEVEL", "INFO")
    root_level = _parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.INFO))

    trace = _env_flag("LOG_TRACE_TRANSFORMERS")
    for name in TRACE_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if trace else logging.NOTSET)

    logging.getLogger(__name__).info(
        "Logging configured: level=%s, trace_transformers=%s", level_name.upper(), trace
    )
