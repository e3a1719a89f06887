"""Per-run JSON records in <user folder>/manifests.

A manifest is written as soon as a pipeline starts (status "running") and
rewritten when it ends ("success" with a summary, or "fail" with the error). It
answers "what did that run place, with which config and rules" after the console
output is gone.
"""

from __future__ import annotations

import json
import logging
import platform
import sys
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from fixtures2respec.internals.config.define_config import UserConfig
from fixtures2respec.internals.paths import user_log_dir_path, user_manifests_dir
from fixtures2respec.internals.run_context import get_session_id

log = logging.getLogger("fixtures2respec")

MANIFEST_VERSION = "1.0"


def _app_version() -> str:
    try:
        return version("fixtures2respec")
    except PackageNotFoundError:
        return "unknown"


def _environment() -> dict[str, str]:
    return {
        "python_version": platform.python_version(),
        "platform": platform.system(),
        "platform_release": platform.release(),
        "executable": sys.executable,
        "app_version": _app_version(),
    }


def _optional_str(value: Path | None) -> str | None:
    return str(value) if value is not None else None


# region RunManifest
class RunManifest:
    """Record of one pipeline run. Construct, then call start() before running."""

    def __init__(self, cfg: UserConfig, run_id: str) -> None:
        self.cfg = cfg
        self.run_id = run_id
        self.start_time = datetime.now()
        self.end_time: datetime | None = None
        self.manifest_path = user_manifests_dir() / f"run_{run_id}_manifest.json"
        self.manifest: dict[str, Any] = {
            "manifest_version": MANIFEST_VERSION,
            "run_id": run_id,
            "session_id": get_session_id(),
            "status": "created",
            "environment": _environment(),
            "start_time": self.start_time.isoformat(),
            "end_time": None,
            "duration_seconds": None,
            "mode": cfg.mode.value,
            "rules_version": cfg.rules.version,
            "respec_html": _optional_str(cfg.get_respec_html_file()),
            "fixtures_folder": _optional_str(cfg.get_fixtures_folder()),
            "log_path": str(user_log_dir_path()),
            "config": cfg.config_to_dict(),
            "error": None,
            "error_type": None,
        }

    @property
    def duration(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def start(self) -> None:
        """Write the manifest with status "running"."""
        self.manifest["status"] = "running"
        log.info(f"Run manifest: {self.manifest_path}")
        self._write()

    def complete(
        self, output_path: Path | None, summary: dict[str, Any] | None = None
    ) -> None:
        """Mark the run successful and store what it produced."""
        self._finish("success")
        self.manifest["output_path"] = _optional_str(output_path)
        self.manifest["summary"] = summary or {}
        self._write()
        log.info(f"Updated manifest: success, at {self.manifest_path}")

    def fail(self, error: Exception) -> None:
        """Mark the run failed. The caller still re-raises `error`."""
        self._finish("fail")
        self.manifest["error"] = str(error)
        self.manifest["error_type"] = type(error).__name__
        self._write()
        log.error(f"Updated manifest ({self.manifest_path}): failed - {error}")

    def _finish(self, status: str) -> None:
        self.end_time = datetime.now()
        self.manifest["status"] = status
        self.manifest["end_time"] = self.end_time.isoformat()
        self.manifest["duration_seconds"] = self.duration

    def _write(self) -> None:
        """Manifest problems are logged; they never stop a run."""
        try:
            self.manifest_path.write_text(
                json.dumps(self.manifest, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as e:
            log.error(f"Failed to write manifest to {self.manifest_path}: {e}")


# endregion
