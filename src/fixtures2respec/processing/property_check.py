"""Find event fixtures that lack a top-level property (e.g. "profile")."""

from __future__ import annotations

import logging
from typing import Iterable

from fixtures2respec.models import Fixture

log = logging.getLogger("fixtures2respec")


def is_event_fixture_file(fixture: Fixture) -> bool:
    """Event fixtures by file name, envelopes excluded."""
    return "Event" in fixture.name_tokens and "Envelope" not in fixture.name_tokens


def find_fixtures_missing_property(
    fixtures: Iterable[Fixture], property_name: str
) -> list[str]:
    """File names of event fixtures whose top level has no `property_name` key."""
    missing = [
        fixture.file_name
        for fixture in fixtures
        if is_event_fixture_file(fixture) and property_name not in fixture.fields
    ]
    log.debug(f"{len(missing)} event fixtures missing '{property_name}'.")
    return missing
