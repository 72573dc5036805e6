"""Composition root — wires concrete implementations together.

This is the only place in the codebase that knows about *all* layers.
The domain never configures logging itself; entry points call
``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from foodpos.domain.model.catalog import DEFAULT_CATALOG, Catalog


def catalog() -> Catalog:
    return DEFAULT_CATALOG


def configure_logging(verbose: bool = False) -> None:
    """Render domain notices to stderr; info notices only when *verbose*."""
    level = logging.INFO if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )