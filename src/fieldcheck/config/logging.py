"""Logging setup for applications that embed fieldcheck.

fieldcheck itself never configures logging on import. The domain layer
does not log at all, and the registry service logs through
``logging.getLogger(__name__)``. A host calls :func:`configure_logging`
(or :func:`configure_from_settings` with loaded settings) once at
startup to render those records with structlog:

- console (default): key/value lines on stderr, colored on a TTY
- JSON (``log_json``): one object per line with ``event``, ``level``,
  ``logger`` and ``timestamp`` keys

With ``verbose`` the ``fieldcheck`` logger drops to DEBUG, which
surfaces registry construction and every failed field validation.
Other libraries stay at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from fieldcheck.config.settings import FieldcheckSettings


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib and structlog records to stderr through one formatter.

    Safe to call repeatedly: the root handlers are replaced, not stacked.

    Args:
        verbose: Show fieldcheck DEBUG records (failed validations,
            registry construction). When False, only WARNING+.
        log_json: Emit JSON lines for log shippers instead of console text.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
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

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("fieldcheck").setLevel(level)


def configure_from_settings(settings: FieldcheckSettings) -> None:
    """Apply the ``verbose`` and ``log_json`` flags of loaded settings."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
