"""Small helpers shared by startup and the CLI."""

import logging
import os
import sys

from fixtures2respec.internals import constants

log = logging.getLogger("fixtures2respec")

_TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y"})
_FALSE_STRINGS = frozenset({"false", "f", "0", "no", "n"})


# region setup_console_encoding
def setup_console_encoding() -> None:
    """Print UTF-8 on Windows consoles, where fixture names and captions may not be ASCII."""
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


# endregion


# region str_to_bool
def str_to_bool(value: str) -> bool:
    """Parse yes/no style strings ("True", "n", "1", ...)."""
    normalized = value.strip().lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False
    log.warning(f"{value} is not a valid boolean value.")
    raise ValueError(f"{value} is not a valid boolean value.")


# endregion


# region get_debug_mode
def get_debug_mode() -> bool:
    """Debug mode from FIXTURES2RESPEC_DEBUG, else DEBUG_MODE_DEFAULT."""
    raw = os.environ.get(constants.DEBUG_ENV_VAR)
    if raw is None:
        return constants.DEBUG_MODE_DEFAULT

    try:
        return str_to_bool(raw)
    except ValueError:
        log.warning(
            f"Invalid value for {constants.DEBUG_ENV_VAR}: '{raw}'. Using default."
        )
        return constants.DEBUG_MODE_DEFAULT


# endregion
