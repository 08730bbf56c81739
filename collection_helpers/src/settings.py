"""
Environment-driven settings for the collection helpers.

Optional env vars:
- COLLECTION_HELPERS_UNSUPPORTED_INPUT: how to treat inputs that are neither a
  sequence nor a mapping. One of:
    error  (default) raise InvalidArgumentError with code INVALID_CONTAINER
    empty  treat the input as an empty mapping and log a warning
- LOG_LEVEL: root logging level used by startup.configure_logging() when the host calls it.

Values are read on every call so tests and long-running hosts can change them at runtime.
"""

from __future__ import annotations

# Ensure .env is loaded before reading env
from collection_helpers.src import startup  # noqa: F401

import logging
import os
from enum import Enum

_logger = logging.getLogger("collection_helpers.settings")

UNSUPPORTED_INPUT_ENV = "COLLECTION_HELPERS_UNSUPPORTED_INPUT"


# PUBLIC_INTERFACE
class UnsupportedInputPolicy(str, Enum):
    """What to do with an input that is neither a sequence nor a mapping."""
    ERROR = "error"
    EMPTY = "empty"


# PUBLIC_INTERFACE
def get_unsupported_input_policy() -> UnsupportedInputPolicy:
    """Return the configured policy for unsupported inputs.

    Unknown values are logged and fall back to UnsupportedInputPolicy.ERROR.
    """
    raw = os.getenv(UNSUPPORTED_INPUT_ENV, "").strip().lower()
    if not raw:
        return UnsupportedInputPolicy.ERROR
    try:
        return UnsupportedInputPolicy(raw)
    except ValueError:
        _logger.warning(
            "%s has unknown value '%s'; expected one of %s. Using '%s'.",
            UNSUPPORTED_INPUT_ENV,
            raw,
            [p.value for p in UnsupportedInputPolicy],
            UnsupportedInputPolicy.ERROR.value,
        )
        return UnsupportedInputPolicy.ERROR
