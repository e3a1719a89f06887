"""Where fixtures2respec keeps its own files, and path string helpers.

The user folder lives under the OS documents folder (found with platformdirs):

    ~/Documents/fixtures2respec/
        configs/     sample and saved TOML configs
        logs/        fixtures2respec.log
        manifests/   one JSON record per pipeline run

FIXTURES2RESPEC_HOME moves the whole tree somewhere else (CI, tests).
"""

import os
from pathlib import Path

from platformdirs import user_documents_dir

from fixtures2respec.internals.constants import HOME_ENV_VAR

APP_FOLDER_NAME = "fixtures2respec"


# region user folders
def user_base_dir() -> Path:
    """The fixtures2respec user folder, created if missing."""
    override = os.environ.get(HOME_ENV_VAR)
    base = resolve_path(override) if override else Path(user_documents_dir()) / APP_FOLDER_NAME
    base.mkdir(parents=True, exist_ok=True)
    return base


def _user_subdir(name: str) -> Path:
    folder = user_base_dir() / name
    folder.mkdir(exist_ok=True)
    return folder


def user_log_dir_path() -> Path:
    """<user folder>/logs"""
    return _user_subdir("logs")


def user_configs_dir() -> Path:
    """<user folder>/configs"""
    return _user_subdir("configs")


def user_manifests_dir() -> Path:
    """<user folder>/manifests"""
    return _user_subdir("manifests")


# endregion


# region path strings
def resolve_path(raw: str | Path) -> Path:
    """
    Absolute path from user input.

    Expands ~ and $VARS first; relative paths are taken from the working directory.
    """
    return Path(os.path.expandvars(str(raw))).expanduser().resolve()


def normalize_path(path_str: str | None) -> str | None:
    """
    Forward-slash version of a path string, as data-include attributes expect.

    Empty strings and None both give None.
    """
    if not path_str:
        return None
    return path_str.replace("\\", "/")


# endregion
