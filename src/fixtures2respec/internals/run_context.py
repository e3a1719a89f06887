"""Tracking IDs shared by every log line and manifest of a process.

Two IDs are kept:
- the session ID, fixed for the lifetime of one CLI invocation;
- the pipeline run ID, replaced each time a pipeline starts.
"""

from __future__ import annotations

import logging
import os
import threading
import uuid

from fixtures2respec.internals.constants import SESSION_ENV_VAR

UNKNOWN_RUN_ID = "Unknown"


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


# region _RunIds
class _RunIds:
    """Lock-guarded holder for the two IDs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.session: str | None = None
        self.pipeline: str | None = None

    def session_or_create(self) -> str:
        with self._lock:
            if self.session is None:
                self.session = os.environ.get(SESSION_ENV_VAR) or _new_id()
            return self.session

    def set_pipeline(self, value: str) -> str:
        with self._lock:
            self.pipeline = value
            return value


_ids = _RunIds()

# endregion


# region session ID
def get_session_id() -> str:
    """
    The session ID, created on first use.

    FIXTURES2RESPEC_SESSION_ID if set (so CI logs can be tied to a known ID),
    else a random 8-character hex string.
    """
    return _ids.session_or_create()


# endregion


# region pipeline run ID
def start_pipeline_run() -> str:
    """Replace the pipeline run ID with a fresh one and return it."""
    return _ids.set_pipeline(_new_id())


def get_pipeline_run_id() -> str:
    """The current pipeline run ID, or "Unknown" before any pipeline has started."""
    if _ids.pipeline is None:
        logging.getLogger("fixtures2respec").debug(
            "get_pipeline_run_id() called outside a pipeline run."
        )
        return UNKNOWN_RUN_ID
    return _ids.pipeline


# endregion
