"""Tests for matching fixtures to sections."""

import pytest

from fixtures2respec.internals.config.define_config import MatchStrategy
from fixtures2respec.models import SuperType
from fixtures2respec.processing.matching import (
    assign_fixtures,
    matches_base_name,
    matches_exact,
    matches_section,
)


@pytest.fixture
def sections(make_section):
    return [
        make_section("Person"),
        make_section("Message"),
        make_section("GradeEvent", super_type=SuperType.EVENT),
        make_section("NavigationEvent", super_type=SuperType.EVENT),
    ]


def test_exact_match_uses_declared_type(make_fixture, make_section) -> None:
    # The file name is misleading on purpose
    fixture = make_fixture("caliperEntityMessageSent.json", {"type": "Person"})
    assert matches_exact(fixture, make_section("Person"))
    assert not matches_exact(fixture, make_section("Message"))


def test_exact_match_is_case_sensitive(make_fixture, make_section) -> None:
    fixture = make_fixture("caliperEntityPerson.json", {"type": "person"})
    assert not matches_exact(fixture, make_section("Person"))


def test_base_name_match_uses_file_name(make_fixture, make_section) -> None:
    fixture = make_fixture("caliperEntityMessageSent.json", {"type": "Message"})
    assert matches_base_name(fixture, make_section("Message"))


def test_base_name_event_section_drops_super_type_word(
    make_fixture, make_section
) -> None:
    fixture = make_fixture(
        "caliperEventNavigationNavigatedTo.json", {"type": "NavigationEvent"}
    )
    assert matches_base_name(
        fixture, make_section("NavigationEvent", super_type=SuperType.EVENT)
    )


def test_base_name_requires_same_super_type(make_fixture, make_section) -> None:
    # An entity file can't land in the event section of the same base name
    fixture = make_fixture("caliperEntityNavigation.json", {"type": "Navigation"})
    assert not matches_base_name(
        fixture, make_section("NavigationEvent", super_type=SuperType.EVENT)
    )


@pytest.mark.parametrize("strategy", list(MatchStrategy))
def test_unknown_fixture_never_matches(make_fixture, make_section, strategy) -> None:
    fixture = make_fixture("caliperEntityTextPositionSelector.json", {"type": "TextPositionSelector"})
    assert not matches_section(
        fixture, make_section("TextPositionSelector"), strategy
    )


class TestAssignFixtures:
    def test_exact(self, make_fixture, sections) -> None:
        person = make_fixture("caliperEntityPerson.json", {"type": "Person"})
        grade = make_fixture("caliperEventGradeGraded.json", {"type": "GradeEvent"})
        course = make_fixture("caliperEntityCourseSection.json", {"type": "CourseSection"})

        assigned, unplaced = assign_fixtures(
            [person, grade, course], sections, MatchStrategy.EXACT
        )

        assert assigned["Person"] == [person]
        assert assigned["GradeEvent"] == [grade]
        assert assigned["Message"] == []
        assert unplaced == [course]

    def test_base_name(self, make_fixture, sections) -> None:
        navigation = make_fixture(
            "caliperEventNavigationNavigatedTo.json", {"type": "NavigationEvent"}
        )
        message = make_fixture("caliperEntityMessageSent.json", {"type": "Message"})
        envelope = make_fixture("caliperEnvelopeBasic.json", {"sensor": "x"})

        assigned, unplaced = assign_fixtures(
            [navigation, message, envelope], sections, MatchStrategy.BASE_NAME
        )

        assert assigned["NavigationEvent"] == [navigation]
        assert assigned["Message"] == [message]
        assert unplaced == [envelope]

    def test_fixture_order_is_preserved(self, make_fixture, sections) -> None:
        first = make_fixture("caliperEntityPerson.json", {"type": "Person"})
        second = make_fixture("caliperEntityPersonAnonymous.json", {"type": "Person"})

        assigned, _ = assign_fixtures([first, second], sections, MatchStrategy.EXACT)
        assert [f.file_name for f in assigned["Person"]] == [
            "caliperEntityPerson.json",
            "caliperEntityPersonAnonymous.json",
        ]

    def test_first_matching_section_wins(self, make_fixture, make_section) -> None:
        duplicate_sections = [make_section("Person"), make_section("Person")]
        person = make_fixture("caliperEntityPerson.json", {"type": "Person"})

        assigned, unplaced = assign_fixtures(
            [person], duplicate_sections, MatchStrategy.EXACT
        )
        # Same id, so both land in one bucket; the fixture appears once
        assert assigned["Person"] == [person]
        assert unplaced == []
