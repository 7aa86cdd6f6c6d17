"""Reads runtime settings from the environment (and an optional .env file)."""

import os
from typing import Optional

import dotenv

# Environment variable names
ENV_DEBUG = "DROP_TARGET_DEBUG"

TRUTHY_VALUES = ("1", "true", "yes", "on")


def parse_flag(raw: Optional[str]) -> bool:
    """Interprets a raw environment string as a boolean flag.

    Surrounding whitespace and quotes are ignored, so values copied
    from a .env file like ``DROP_TARGET_DEBUG="true"`` work as expected.

    Returns:
        True for 1/true/yes/on (any case), False for anything else.
    """
    if not raw:
        return False

    s = raw.strip()
    s = s.strip('\'"')
    s = s.strip()
    return s.lower() in TRUTHY_VALUES


def debug_enabled() -> bool:
    """Checks whether drag/drop tracing is switched on via DROP_TARGET_DEBUG."""
    dotenv.load_dotenv() # Load .env file if present
    return parse_flag(os.getenv(ENV_DEBUG))
