"""structlog setup for command-line callers.

Library modules only call ``structlog.get_logger()``; configuring output is
left to the entry point.
"""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Render structlog events to the console, at debug level when verbose."""
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
