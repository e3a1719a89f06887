"""User directory structure creation and initialization.
Auto-creates ~/Documents/fixtures2respec/ structure with a README and sample config.

On first run, this creates:
- ~/Documents/fixtures2respec/
  ├── README.md           (explains what each folder is for)
  ├── configs/            (sample_config.toml with every option and rule)
  ├── logs/               (fixtures2respec.log lives here)
  └── manifests/          (one JSON record per pipeline run)

Safe to call repeatedly - won't overwrite existing user files.
"""

import logging
from pathlib import Path

from fixtures2respec.internals.config.define_config import UserConfig
from fixtures2respec.internals.constants import RESOURCES_DIR
from fixtures2respec.internals.paths import (
    user_base_dir,
    user_configs_dir,
    user_log_dir_path,
    user_manifests_dir,
)

log = logging.getLogger("fixtures2respec")

SAMPLE_CONFIG_FILENAME = "sample_config.toml"


def ensure_user_scaffold() -> None:
    """
    Create folder structure, README and sample config on first run.

    Safe to call every time - won't overwrite existing user files.
    """

    base = user_base_dir()

    # paths.py functions do the mkdir
    configs = user_configs_dir()
    user_log_dir_path()
    user_manifests_dir()

    readme_path = base / "README.md"
    if not readme_path.exists():
        _create_readme(readme_path)
        log.info(f"Created new README at {readme_path}")

    _write_sample_config_if_missing(configs / SAMPLE_CONFIG_FILENAME)

    log.debug(f"User scaffold ready at {base}")


def _get_resource_path(filename: str) -> Path:
    """Path to a packaged resource file (src/fixtures2respec/resources/)."""
    return RESOURCES_DIR / filename


def _create_readme(path: Path) -> None:
    """Write a friendly README explaining the folder structure."""

    source = _get_resource_path("scaffold_README.md")

    if source.exists():
        path.write_text(source.read_text(encoding="utf-8"), encoding="utf-8")
    else:
        log.error(f"README template not found: {source}")
        path.write_text(
            "# fixtures2respec\n\nUser folder created automatically.\n",
            encoding="utf-8",
        )


def _write_sample_config_if_missing(target: Path) -> None:
    """Save a default config (every option and the full rule table) for users to copy."""
    if target.exists():
        log.debug(f"Sample config already exists (not overwriting): {target}")
        return

    UserConfig().save_toml(target)
    log.info(f"Wrote sample config: {target}")
