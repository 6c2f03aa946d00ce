"""Logging setup for applications using krakenapi.

Library modules only ask structlog for a logger, nothing is configured at
import. Entry points (e.g the kraken-query cli) call :func:`configure_logging`.
"""
import sys
import logging

import structlog
import stackprinter


def configure_logging(level=logging.INFO, exception_style: str = "darkbg2"):
    stackprinter.set_excepthook(style=exception_style)

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M.%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stdout is kept for query results
    logging.basicConfig(
        format="%(message)s\n\r:%(filename)s:%(funcName)s:line%(lineno)s",
        stream=sys.stderr,
        level=level,
    )


def log_exception(logger: object, msg: Exception):
    return logger.exception(stackprinter.format(msg, style="darkbg2"))
