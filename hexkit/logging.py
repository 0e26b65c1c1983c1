"""Logging configuration for hexkit.

This module owns the TraceLoggingHandler setup and provides a single point
for configuring log levels. Library modules only create loggers; handlers
are attached here, by the command-line entry point.
"""

import logging

from zelos_sdk.hooks.logging import TraceLoggingHandler

TRACE_SOURCE = "hexkit_log"


def configure_logging(level: int = logging.INFO, trace: bool = False) -> None:
    """Configure root logging for the command-line tool.

    :param level: logging level (e.g., logging.DEBUG, logging.INFO)
    :param trace: Also forward records to the Zelos trace backend
    """
    logging.basicConfig(level=level)
    set_log_level(level)

    if trace:
        # Handler level stays at DEBUG; the root logger level controls filtering
        trace_handler = TraceLoggingHandler(TRACE_SOURCE)
        trace_handler.setLevel(logging.DEBUG)
        logging.getLogger().addHandler(trace_handler)


def set_log_level(level: int) -> None:
    """Set the log level for the tool.

    :param level: logging level (e.g., logging.DEBUG, logging.INFO)
    """
    logging.getLogger().setLevel(level)
