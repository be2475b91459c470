# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""structlog configuration for linkdb.

Log records go to stderr, either as console lines or as JSON lines. Only the
parser logs today, at DEBUG, around each file it reads. Diagnostics about the
checked file are not log records; the CLI prints them through its sink.
"""

from __future__ import annotations

import logging
import sys

import structlog

# ###############
# Public Interface
# ###############

PACKAGE_LOGGER = "linkdb"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: Show the parser's DEBUG records. When False, only WARNING+.
        log_json: Emit JSON lines (with ISO timestamps) instead of console lines.
    """
    shared_processors = _shared_processors(log_json)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


# ################
# Implementation
# ################


def _shared_processors(log_json: bool) -> list[structlog.types.Processor]:
    """Processors applied to both structlog and stdlib records.

    Console lines carry no timestamp; JSON lines carry an ISO one.
    """
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    return processors


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
