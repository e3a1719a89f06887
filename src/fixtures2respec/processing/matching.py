"""Match classified fixtures to documentation sections."""

from __future__ import annotations

import logging
from typing import Sequence

from fixtures2respec.internals.config.define_config import MatchStrategy
from fixtures2respec.models import Fixture, Section, SuperType

log = logging.getLogger("fixtures2respec")


# region matches_section
def matches_exact(fixture: Fixture, section: Section) -> bool:
    """The fixture's declared type is the section id."""
    return fixture.type_name is not None and fixture.type_name == section.section_id


def matches_base_name(fixture: Fixture, section: Section) -> bool:
    """The fixture file's base name is the section id minus its super-type word."""
    return (
        fixture.base_name is not None
        and fixture.file_super_type == section.super_type
        and fixture.base_name == section.match_id
    )


def matches_section(
    fixture: Fixture, section: Section, strategy: MatchStrategy
) -> bool:
    """Apply the configured strategy. Unclassifiable fixtures never match."""
    if fixture.super_type == SuperType.UNKNOWN:
        return False
    if strategy == MatchStrategy.EXACT:
        return matches_exact(fixture, section)
    if strategy == MatchStrategy.BASE_NAME:
        return matches_base_name(fixture, section)
    raise ValueError(f"Unknown match strategy: {strategy}")


# endregion


# region assign_fixtures
def assign_fixtures(
    fixtures: Sequence[Fixture],
    sections: Sequence[Section],
    strategy: MatchStrategy,
) -> tuple[dict[str, list[Fixture]], list[Fixture]]:
    """
    Place each fixture in the first matching section (document order).

    Returns:
        (section id -> fixtures in file order, fixtures that matched nothing)
    """
    assigned: dict[str, list[Fixture]] = {s.section_id: [] for s in sections}
    unplaced: list[Fixture] = []

    for fixture in fixtures:
        section = next(
            (s for s in sections if matches_section(fixture, s, strategy)), None
        )
        if section is None:
            log.debug(
                f"No section for {fixture.file_name} (type={fixture.type_name}, base_name={fixture.base_name})."
            )
            unplaced.append(fixture)
        else:
            assigned[section.section_id].append(fixture)

    return assigned, unplaced


# endregion
