"""Startup logic needed before any pipeline runs.

Handles:
- Console encoding setup
- Logging configuration
- User directory scaffolding (configs, logs, manifests)
"""

import logging
import sys

from fixtures2respec.internals.logger import setup_logger
from fixtures2respec.internals.scaffold import ensure_user_scaffold
from fixtures2respec.utils import get_debug_mode, setup_console_encoding


# region initialize_application
def initialize_application() -> logging.Logger:
    """Common startup tasks. Exits with code 1 if the log folder can't be created."""

    # Must happen before any console output.
    setup_console_encoding()

    try:
        log = setup_logger(enable_trace=_should_enable_trace_on_startup())
    except PermissionError as e:
        print(
            f"Cannot create log files: {e}. Check permissions on the fixtures2respec user folder.",
            file=sys.stderr,
        )
        sys.exit(1)
    except OSError as e:
        print(
            f"Cannot create log files: {e}. Check disk space and permissions.",
            file=sys.stderr,
        )
        sys.exit(1)

    log.info("Starting fixtures2respec Log.")

    log.debug(
        "Checking for existing fixtures2respec user folders and scaffolding if needed."
    )
    ensure_user_scaffold()

    return log


# endregion


# region _should_enable_trace_on_startup
def _should_enable_trace_on_startup() -> bool:
    """
    Determine if trace logging should start immediately based on Debug Mode switch.

    Checks:
    - Environment variable (FIXTURES2RESPEC_DEBUG)
    - System default (DEBUG_MODE_DEFAULT in constants.py)
    """
    return get_debug_mode()


# endregion
