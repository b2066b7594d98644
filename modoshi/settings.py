"""
Settings and configuration for Modoshi.

Values are read once from the environment at import time.
"""

import os
from typing import Mapping, Optional


def read_non_negative_int(name: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Read a non-negative integer from an environment variable.

    Unset or empty variables give `default`.

    Raises:
        ValueError: The value is not an integer or is negative.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be 0 or positive, got {value}")
    return value


# Debug mode
DEBUG = os.environ.get("MODOSHI_DEBUG", "").lower() in ("1", "true", "yes")

# Default cap on the number of candidates a single transform() call may
# produce. 0 means unbounded.
MAX_RESULTS = read_non_negative_int("MODOSHI_MAX_RESULTS", 0)

# Every leaf condition gets its own bit; a transformer cannot hand out more
# than this many.
MAX_CONDITION_FLAGS = 32

# Language used by the command line when none is given
DEFAULT_LANGUAGE = os.environ.get("MODOSHI_LANGUAGE", "ja")
