"""structlog configuration for dateserial.

Library modules log through the stdlib ``logging`` module and stay silent
until an application opts in. ``configure_logging`` routes those records
through structlog's formatter.

Only the ``dateserial`` logger is touched: it gets its own stderr handler
and stops propagating, so the root logger and structlog's global
configuration stay as the application left them.

Two output modes:
- Human (default): colored console output to stderr
- JSON: structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

_LOGGER_NAME = "dateserial"
_HANDLER_NAME = "dateserial.stderr"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Attach a structlog-rendered stderr handler to the dateserial logger.

    Calling again replaces the handler installed by the previous call.

    Args:
        verbose: Enable DEBUG-level output for ``dateserial`` loggers,
            which reports each fallback step. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    pkg_logger = logging.getLogger(_LOGGER_NAME)
    for existing in [h for h in pkg_logger.handlers if h.get_name() == _HANDLER_NAME]:
        pkg_logger.removeHandler(existing)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False


__all__ = ["configure_logging"]
