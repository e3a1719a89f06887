# internals/config/define_config.py
"""User configuration dataclass and validation."""

# region imports
from __future__ import annotations

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    # Python 3.10
    import tomli as tomllib  # type: ignore[no-redef]

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import tomli_w  # For writing (no stdlib equivalent yet)

from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.internals.paths import resolve_path

# endregion

log = logging.getLogger("fixtures2respec")


# region Enums
class MatchStrategy(Enum):
    """How fixtures are matched to documentation sections."""

    EXACT = "exact"  # fixture "type" field == section id
    BASE_NAME = "base_name"  # fixture filename base name == section id minus super type

    @classmethod
    def from_string(cls, value: str) -> "MatchStrategy":
        """Convert string to MatchStrategy, with support for aliases."""
        value = value.lower().strip().replace("-", "_")

        aliases = {
            "type": cls.EXACT,
            "filename": cls.BASE_NAME,
        }

        if value in aliases:
            return aliases[value]

        for member in cls:
            if member.value == value:
                return member

        valid_values = [m.value for m in cls] + list(aliases.keys())
        raise ValueError(
            f"'{value}' is not a valid MatchStrategy. Valid options: {', '.join(valid_values)}"
        )


class PipelineMode(Enum):
    """Which pipeline a run executes."""

    PLACE_FIXTURES = "place_fixtures"
    CHECK_PROPERTY = "check_property"


# endregion


# region class UserConfig
@dataclass
class UserConfig:
    """All user-configurable settings for fixtures2respec."""

    # region class fields

    # region Input/Output
    respec_html: Optional[Path] = None  # The ReSpec html file to splice figures into
    fixtures_folder: Optional[Path] = None  # Folder of JSON fixture files
    output_folder: Optional[Path] = None  # Defaults to the respec file's folder

    # Written before each fixture file name in data-include attributes.
    # None means: the fixtures folder relative to the respec file.
    include_prefix: Optional[str] = None
    # endregion

    # region Processing options
    match_strategy: MatchStrategy = MatchStrategy.EXACT

    # Stripped from fixture file names before tokenizing ("caliperEventGradeGraded.json").
    fixture_file_prefix: str = "caliper"

    # Definition list term whose value is the section's anonymous-instance IRI,
    # used when the fragment does not list the section id itself.
    term_iri_key: str = "IRI"

    # Generic sections that should never receive fixtures.
    excluded_sections: tuple[str, ...] = ("Entity", "Event")

    dump_records: bool = False

    # When set, run the property check instead of placing fixtures.
    check_property: Optional[str] = None

    rules: RuleTable = field(default_factory=RuleTable)
    # endregion

    # endregion

    # region post_init
    def __post_init__(self) -> None:
        """Convert string inputs of path fields into Path objects."""
        if self.respec_html is not None:
            self.respec_html = Path(self.respec_html)
        if self.fixtures_folder is not None:
            self.fixtures_folder = Path(self.fixtures_folder)
        if self.output_folder is not None:
            self.output_folder = Path(self.output_folder)
        if isinstance(self.excluded_sections, list):
            self.excluded_sections = tuple(self.excluded_sections)

    # endregion

    # region from_toml
    @classmethod
    def from_toml(cls, path: Path) -> UserConfig:
        """
        Build a config from a TOML file.

        Top-level keys are UserConfig field names. An optional [rules] table
        overrides entries of the default RuleTable; keys it leaves out keep
        their defaults.

            respec_html = "~/caliper-spec/caliper-spec-respec.html"
            fixtures_folder = "~/caliper-spec/fixtures/v1p2"
            match_strategy = "base_name"

            [rules]
            ignored_types = ["TextPositionSelector", "Envelope"]

        Unknown top-level keys are logged and skipped.

        Raises:
            FileNotFoundError: No file at `path`
            ValueError: Unreadable TOML, a bad match_strategy, or a bad [rules] table
        """
        data = _read_toml(Path(path))

        known = {f.name for f in fields(cls)}
        ignored = sorted(set(data) - known)
        if ignored:
            log.warning(
                f"Skipping unknown config keys in {path}: {', '.join(ignored)}. "
                f"Known keys: {', '.join(sorted(known))}"
            )
        kwargs = {key: value for key, value in data.items() if key in known}

        if "match_strategy" in kwargs:
            raw = kwargs["match_strategy"]
            try:
                kwargs["match_strategy"] = MatchStrategy.from_string(str(raw))
            except ValueError as e:
                error_msg = f"Invalid match_strategy '{raw}' in {path}. Use one of: {[m.value for m in MatchStrategy]}"
                log.error(error_msg)
                raise ValueError(error_msg) from e

        if "rules" in kwargs:
            kwargs["rules"] = RuleTable.from_dict(kwargs["rules"])

        return cls(**kwargs)

    # endregion

    # region mode property
    @property
    def mode(self) -> PipelineMode:
        """Mode inferred from whether a property check was requested."""
        if self.check_property:
            return PipelineMode.CHECK_PROPERTY
        return PipelineMode.PLACE_FIXTURES

    # endregion

    # region get real Path objects from stored cfg values
    def get_respec_html_file(self) -> Path | None:
        """Get the respec html path, or None if not specified."""
        if self.respec_html:
            return resolve_path(self.respec_html)
        return None

    def get_fixtures_folder(self) -> Path | None:
        """Get the fixtures folder path, or None if not specified."""
        if self.fixtures_folder:
            return resolve_path(self.fixtures_folder)
        return None

    def get_output_folder(self) -> Path:
        """Get the output folder, falling back to the respec file's folder."""
        if self.output_folder:
            return resolve_path(self.output_folder)

        respec = self.get_respec_html_file()
        if respec is None:
            raise ValueError(
                "Cannot determine output folder: neither output_folder nor respec_html is set"
            )
        return respec.parent

    # endregion

    # region save_toml
    def save_toml(self, path: Path) -> None:
        """Write this config as TOML, creating parent folders. Unset (None) values are left out."""
        path = Path(path)
        if path.is_dir():
            error_msg = f"Cannot save config: {path} is a folder, not a file."
            log.error(error_msg)
            raise ValueError(error_msg)

        data = {key: value for key, value in self.config_to_dict().items() if value is not None}

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(tomli_w.dumps(data), encoding="utf-8")
        except OSError as e:
            error_msg = f"Could not write config file {path}: {e}"
            log.error(error_msg)
            raise
        log.info(f"Saved config to {path}")

    # endregion

    # region config_to_dict
    def config_to_dict(self) -> dict[str, Any]:
        """Convert config to a TOML-serializable dict with forward-slash paths."""
        data: dict[str, Any] = {
            "respec_html": self.respec_html.as_posix() if self.respec_html else None,
            "fixtures_folder": (
                self.fixtures_folder.as_posix() if self.fixtures_folder else None
            ),
            "output_folder": (
                self.output_folder.as_posix() if self.output_folder else None
            ),
            "include_prefix": self.include_prefix,
            "match_strategy": self.match_strategy.value,
            "fixture_file_prefix": self.fixture_file_prefix,
            "term_iri_key": self.term_iri_key,
            "excluded_sections": list(self.excluded_sections),
            "dump_records": self.dump_records,
            "check_property": self.check_property,
            "rules": self.rules.to_dict(),
        }

        log.debug(f"Config as dict: \n{data}")

        return data

    # endregion

    # region instance validation methods
    def pre_run_check(self) -> None:
        """Everything a run needs: value checks, then the files and folders of the selected mode."""
        self.validate()

        if self.mode == PipelineMode.PLACE_FIXTURES:
            self.validate_place_fixtures_requirements()
        elif self.mode == PipelineMode.CHECK_PROPERTY:
            self.validate_check_property_requirements()
        else:
            raise ValueError(f"Unknown pipeline mode: {self.mode}")

    def validate(self) -> None:
        """Type and emptiness checks that need no filesystem access."""
        if not isinstance(self.match_strategy, MatchStrategy):
            raise ValueError(
                f"match_strategy must be a MatchStrategy enum, got {type(self.match_strategy).__name__}. "
                f"Valid values: {[e.value for e in MatchStrategy]}"
            )

        if not isinstance(self.rules, RuleTable):
            raise ValueError(
                f"rules must be a RuleTable, got {type(self.rules).__name__}"
            )

        if not isinstance(self.dump_records, bool):
            raise ValueError(
                f"dump_records must be a boolean, got {type(self.dump_records).__name__}"
            )

        for field_name in ("respec_html", "fixtures_folder", "output_folder"):
            val = getattr(self, field_name)
            if val is not None and not isinstance(val, Path):
                raise ValueError(
                    f"{field_name} must be a Path, got {type(val).__name__}"
                )
            if val is not None and str(val).strip() in ("", "."):
                raise ValueError(
                    f"{field_name} cannot be empty; use None for default"
                )

        for field_name in ("fixture_file_prefix", "term_iri_key"):
            val = getattr(self, field_name)
            if not isinstance(val, str):
                raise ValueError(
                    f"{field_name} must be a string, got {type(val).__name__}"
                )

        if self.check_property is not None and (
            not isinstance(self.check_property, str) or not self.check_property.strip()
        ):
            raise ValueError("check_property must be a non-empty string or None")

        if not all(isinstance(s, str) for s in self.excluded_sections):
            raise ValueError("excluded_sections must be a list of strings")

    # Filesystem checks

    def _validate_fixtures_folder(self) -> None:
        """Helper: the fixtures folder is required by both pipelines."""
        fixtures_path = self.get_fixtures_folder()
        if fixtures_path is None:
            raise ValueError(
                "No fixtures folder specified. Please set fixtures_folder before running the pipeline."
            )
        if not fixtures_path.exists():
            raise FileNotFoundError(f"Fixtures folder not found: {fixtures_path}")
        if not fixtures_path.is_dir():
            raise ValueError(f"Fixtures path is not a folder: {fixtures_path}")

    def validate_place_fixtures_requirements(self) -> None:
        """Validate external dependencies required to place fixtures."""
        html_path = self.get_respec_html_file()
        if html_path is None:
            raise ValueError(
                "No respec html file specified. Please set respec_html before running the pipeline."
            )
        if not html_path.exists():
            raise FileNotFoundError(f"Respec html file not found: {html_path}")
        if not html_path.is_file():
            raise ValueError(f"Respec html path is not a file: {html_path}")

        self._validate_fixtures_folder()

        output_folder = self.get_output_folder()
        if output_folder.exists() and not output_folder.is_dir():
            raise ValueError(
                f"Output path exists but is not a directory: {output_folder}"
            )

    def validate_check_property_requirements(self) -> None:
        """Validate external dependencies required by the property check."""
        self._validate_fixtures_folder()

    # endregion


# endregion


# region _read_toml
def _read_toml(path: Path) -> dict[str, Any]:
    """Parsed contents of a TOML config file."""
    if not path.exists():
        error_msg = f"Config file not found: {path}"
        log.error(error_msg)
        raise FileNotFoundError(error_msg)
    if not path.is_file():
        error_msg = f"Config path is a directory, not a .toml file: {path}"
        log.error(error_msg)
        raise ValueError(error_msg)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        error_msg = f"Invalid TOML syntax in {path} ({e}). Look for unbalanced quotes or brackets."
        log.error(error_msg)
        raise ValueError(error_msg) from e

    if not data:
        log.warning(f"Config file {path} is empty; using defaults for every setting.")
    return data


# endregion
