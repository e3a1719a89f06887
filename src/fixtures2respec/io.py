# io.py
"""File I/O operations for the respec html, fragments, and fixture JSON files."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from fixtures2respec.internals import constants
from fixtures2respec.internals.run_context import get_pipeline_run_id

log = logging.getLogger("fixtures2respec")


# region Path Helpers
def validate_path(user_path: str | Path) -> Path:
    """Ensure filepath exists and is a file."""
    path = Path(user_path)
    pipeline_id = get_pipeline_run_id()
    if not path.exists():
        log.error(f"File not found: {user_path} [pipeline:{pipeline_id}]")
        raise FileNotFoundError(f"File not found: {user_path}")
    if not path.is_file():
        log.error(
            f"Path is not a file (might be a directory): {user_path} [pipeline:{pipeline_id}]"
        )
        raise ValueError(f"Path is not a file: {user_path}")
    return path


def validate_html_path(user_path: str | Path) -> Path:
    """Validates the respec filepath exists and is actually an html file."""
    path = validate_path(user_path)
    pipeline_id = get_pipeline_run_id()

    if path.suffix.lower() not in (".html", ".htm"):
        log.error(
            f"Wrong file extension: expected .html, got {path.suffix} [pipeline:{pipeline_id}]"
        )
        raise ValueError(f"Expected an .html file, but got: {path.suffix}")
    return path


def validate_folder_path(user_path: str | Path) -> Path:
    """Ensure a folder exists and is a folder."""
    path = Path(user_path)
    pipeline_id = get_pipeline_run_id()
    if not path.exists():
        log.error(f"Folder not found: {user_path} [pipeline:{pipeline_id}]")
        raise FileNotFoundError(f"Folder not found: {user_path}")
    if not path.is_dir():
        log.error(f"Path is not a folder: {user_path} [pipeline:{pipeline_id}]")
        raise ValueError(f"Path is not a folder: {user_path}")
    return path


def build_output_path(html_path: Path, output_folder: Path) -> Path:
    """<stem>_updated.html in the output folder."""
    return output_folder / f"{html_path.stem}{constants.OUTPUT_HTML_SUFFIX}{html_path.suffix}"


# endregion


# region Disk I/O - Read
def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file."""
    return Path(path).read_text(encoding="utf-8")


def iter_fixture_files(folder: Path) -> Iterator[Path]:
    """Regular *.json files in a fixtures folder, sorted by name."""
    folder = validate_folder_path(folder)
    for path in sorted(folder.iterdir(), key=lambda p: p.name):
        if path.is_file() and path.suffix.lower() == ".json":
            yield path


def load_fixture_json(path: Path) -> dict[str, Any]:
    """
    Parse one fixture file.

    A fixture that isn't UTF-8 JSON, or isn't a JSON object, aborts the whole run.

    Raises:
        ValueError: On undecodable bytes, invalid JSON or a non-object top level.
    """
    pipeline_id = get_pipeline_run_id()
    try:
        content = json.loads(read_text_file(path))
    except json.JSONDecodeError as e:
        error_msg = f"Invalid JSON in fixture file {path}: {e.msg} (line {e.lineno}, column {e.colno})"
        log.error(f"{error_msg} [pipeline:{pipeline_id}]")
        raise ValueError(error_msg) from e
    except UnicodeDecodeError as e:
        error_msg = f"Fixture file {path} is not valid UTF-8: {e.reason} (byte {e.start})"
        log.error(f"{error_msg} [pipeline:{pipeline_id}]")
        raise ValueError(error_msg) from e

    if not isinstance(content, dict):
        error_msg = f"Fixture file {path} must contain a JSON object, got {type(content).__name__}"
        log.error(f"{error_msg} [pipeline:{pipeline_id}]")
        raise ValueError(error_msg)

    return content


# endregion


# region Disk I/O - Write
def write_text_file(path: Path, text: str) -> Path:
    """Write a UTF-8 text file with \\n newlines, creating parent folders."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except PermissionError as e:
        error_msg = f"Permission denied writing to: {path}"
        log.error(error_msg)
        raise PermissionError(error_msg) from e
    return path


def dump_records(
    output_folder: Path,
    sections: Iterable[Any],
    fixtures: Iterable[Any],
) -> list[Path]:
    """Write sections.json and fixtures.json for manual inspection of a run."""
    written = []
    for filename, records in (
        (constants.SECTIONS_DUMP_FILENAME, sections),
        (constants.FIXTURES_DUMP_FILENAME, fixtures),
    ):
        path = output_folder / filename
        write_text_file(
            path, json.dumps([r.to_record() for r in records], indent=4) + "\n"
        )
        log.info(f"Wrote record dump: {path}")
        written.append(path)
    return written


# endregion
