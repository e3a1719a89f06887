"""Tests for finding event fixtures without a top-level property."""

from fixtures2respec.processing.property_check import (
    find_fixtures_missing_property,
    is_event_fixture_file,
)


def test_is_event_fixture_file(make_fixture) -> None:
    assert is_event_fixture_file(
        make_fixture("caliperEventGradeGraded.json", {"type": "GradeEvent"})
    )
    assert not is_event_fixture_file(
        make_fixture("caliperEntityPerson.json", {"type": "Person"})
    )
    assert not is_event_fixture_file(
        make_fixture("caliperEnvelopeEventSingle.json", {"data": []})
    )


def test_find_fixtures_missing_property(make_fixture) -> None:
    fixtures = [
        make_fixture(
            "caliperEventGradeGraded.json", {"type": "GradeEvent", "profile": "GradingProfile"}
        ),
        make_fixture("caliperEventViewViewed.json", {"type": "ViewEvent"}),
        make_fixture("caliperEntityPerson.json", {"type": "Person"}),
        make_fixture("caliperEnvelopeEventSingle.json", {"data": []}),
    ]

    assert find_fixtures_missing_property(fixtures, "profile") == [
        "caliperEventViewViewed.json"
    ]


def test_nested_property_does_not_count(make_fixture) -> None:
    fixture = make_fixture(
        "caliperEventViewViewed.json",
        {"type": "ViewEvent", "object": {"profile": "ReadingProfile"}},
    )
    assert find_fixtures_missing_property([fixture], "profile") == [
        "caliperEventViewViewed.json"
    ]
