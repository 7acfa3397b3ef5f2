"""Logging utilities for the application."""

import logging
import os
import sys
from typing import Union

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.instrumentation.logging import LoggingInstrumentor

logger = logging.getLogger("family_demo")

formatter = logging.Formatter("%(asctime)s - PID:%(process)d - Thread:%(thread)d - %(name)s - %(levelname)s - %(message)s")


def parse_level(level: Union[str, int]) -> int:
    """Map a level name such as ``"info"`` to its numeric value; unknown names mean DEBUG."""
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.DEBUG)


def set_level(level: Union[str, int]) -> None:
    logger.setLevel(parse_level(level))


logging_level = parse_level(os.environ.get("LOGGING_LEVEL", "DEBUG"))
logger.setLevel(logging_level)

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)

# Export to Azure Monitor only when a connection string is configured
appinsights_connection_string = os.environ.get("APPLICATIONINSIGHTS_CONNECTION_STRING")
if appinsights_connection_string:
    configure_azure_monitor(connection_string=appinsights_connection_string)

    # The Cosmos SDK logs under "azure"; exporting those would recurse
    LoggingInstrumentor().instrument(level=logging_level, excluded_loggers=["azure"])

# Console output is already handled above
logger.propagate = False
