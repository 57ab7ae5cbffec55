"""Logging estructurado (structlog).

Por qué stderr:
- stdout es el contrato de salida de los reportes; los logs no deben mezclarse.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def configure_logging(level: str = "WARNING", log_format: str = "console") -> None:
    """Configura structlog para todo el proceso.

    Se llama una vez desde la CLI, antes de lanzar los reportes.
    """

    renderer: Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    processors: list[Processor] = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.WARNING)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)


# Default del proceso: stderr y WARNING, también para usos sin CLI.
configure_logging()
