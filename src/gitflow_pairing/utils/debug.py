"""Switch for showing full tracebacks on CLI errors."""

import os

DEBUG_ENV_VAR = "GITFLOW_PAIRING_DEBUG"


def is_debug_mode() -> bool:
    """Return True when GITFLOW_PAIRING_DEBUG is "1", "true", "yes" or "on"."""
    return os.getenv(DEBUG_ENV_VAR, "").strip().lower() in ("1", "true", "yes", "on")
