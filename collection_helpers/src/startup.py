"""
Package startup utilities: load .env early and offer opt-in logging setup.

Importing this module loads the .env file from the current working directory so
settings such as COLLECTION_HELPERS_UNSUPPORTED_INPUT can live there. It does not
touch the host's root logger: the package logger only gets a NullHandler, and
hosts that want console output call configure_logging() themselves.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

PACKAGE_LOGGER = "collection_helpers"

# Variables already set by the process manager win.
load_dotenv(dotenv_path=os.path.join(os.getcwd(), ".env"), override=False)

_package_logger = logging.getLogger(PACKAGE_LOGGER)
if not any(isinstance(h, logging.NullHandler) for h in _package_logger.handlers):
    _package_logger.addHandler(logging.NullHandler())


# PUBLIC_INTERFACE
def configure_logging(level: str = "") -> None:
    """Configure root logging for hosts that have not done so.

    The level comes from the argument, then LOG_LEVEL, then INFO. Does nothing
    when the root logger already has handlers.
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
