"""Data models for fixtures, documentation sections, and placement results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping


# region SuperType
class SuperType(Enum):
    """Conceptual category of a fixture or section."""

    ENTITY = "Entity"
    EVENT = "Event"
    UNKNOWN = "Unknown"


# endregion


# region Fixture
@dataclass(frozen=True)
class Fixture:
    """
    A JSON example document plus everything derived from its type and file name.

    Built once by processing.classify.create_fixture() and never mutated.
    """

    file_name: str
    path: Path
    type_name: str | None
    fields: Mapping[str, Any]
    fixture_id: str | None
    super_type: SuperType
    type_tokens: tuple[str, ...] = ()
    # Tokens of the file name with the prefix removed ("EventGradeGraded")
    name_tokens: tuple[str, ...] = ()
    # Leading file name token when it names a super type ("Event"), else None
    file_super_type: SuperType | None = None
    base_name: str | None = None
    name_extension: str | None = None

    def __post_init__(self) -> None:
        # Freeze the top-level mapping so nothing downstream can edit the record.
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def action(self) -> str | None:
        """The event's action verb, if it has a string one."""
        value = self.fields.get("action")
        return value if isinstance(value, str) else None

    def to_record(self) -> dict[str, Any]:
        """JSON-friendly summary used for record dumps."""
        return {
            "file_name": self.file_name,
            "path": self.path.as_posix(),
            "type_name": self.type_name,
            "fixture_id": self.fixture_id,
            "super_type": self.super_type.value,
            "type_tokens": list(self.type_tokens),
            "name_tokens": list(self.name_tokens),
            "file_super_type": (
                self.file_super_type.value if self.file_super_type else None
            ),
            "base_name": self.base_name,
            "name_extension": self.name_extension,
        }


# endregion


# region Section
@dataclass(frozen=True)
class Section:
    """A respec section placeholder documenting one Entity or Event type."""

    section_id: str
    super_type: SuperType
    fragment_path: str
    section_text: str  # Exact markup matched in the respec html
    terms: Mapping[str, str] = field(default_factory=dict)
    term_iri: str | None = None

    @property
    def match_id(self) -> str:
        """Section id with the super-type word removed ("NavigationEvent" -> "Navigation")."""
        if self.super_type == SuperType.EVENT:
            return self.section_id.removesuffix(SuperType.EVENT.value)
        return self.section_id

    def to_record(self) -> dict[str, Any]:
        """JSON-friendly summary used for record dumps."""
        return {
            "section_id": self.section_id,
            "super_type": self.super_type.value,
            "fragment_path": self.fragment_path,
            "section_text": self.section_text,
            "terms": dict(self.terms),
            "term_iri": self.term_iri,
        }


# endregion


# region CaptionedFixture
@dataclass(frozen=True)
class CaptionedFixture:
    """A placed fixture, its caption, and the path written into data-include."""

    fixture: Fixture
    caption: str
    include_path: str


# endregion


# region PlacementResult
@dataclass
class PlacementResult:
    """Outcome of one place-fixtures run, used for the console summary and manifest."""

    output_path: Path
    total_fixtures: int
    placements: dict[str, list[CaptionedFixture]] = field(default_factory=dict)
    unplaced: list[str] = field(default_factory=list)

    @property
    def placed(self) -> list[str]:
        """File names of every placed fixture, in section order."""
        return [
            captioned.fixture.file_name
            for captioned_list in self.placements.values()
            for captioned in captioned_list
        ]

    def to_summary(self) -> dict[str, Any]:
        """Summary stored in the run manifest."""
        return {
            "total_fixtures": self.total_fixtures,
            "placed_count": len(self.placed),
            "unplaced_count": len(self.unplaced),
            "placements": {
                section_id: [
                    {"file_name": c.fixture.file_name, "caption": c.caption}
                    for c in captioned_list
                ]
                for section_id, captioned_list in self.placements.items()
            },
            "unplaced": list(self.unplaced),
        }


# endregion
