"""Logging setup: structlog processors over stdlib logging.

Both structlog loggers (services) and plain ``logging`` loggers (the
compiler stages) end up in one stderr handler, rendered either for a
human or as JSON lines (``--log-json``). Only the ``grit`` logger tree is
opened up by ``--verbose``; everything else stays at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

GRIT_LOGGER = "grit"


def grit_level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.WARNING


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to every record, structlog or stdlib."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route all logging to *stream* (default: the current ``sys.stderr``).

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: DEBUG for the ``grit`` loggers instead of WARNING.
        log_json: Render JSON lines instead of the console format.
        stream: Destination; resolved at call time so test runners that
            swap ``sys.stderr`` are honoured.
    """
    out = stream if stream is not None else sys.stderr
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(GRIT_LOGGER).setLevel(grit_level(verbose))
