"""Tests for the versioned rule table."""

import pytest

from fixtures2respec.internals.config.rules import RULES_VERSION, RuleTable


def test_defaults() -> None:
    rules = RuleTable()
    assert rules.version == RULES_VERSION
    assert rules.ignored_types == ("TextPositionSelector", "Envelope")
    assert rules.irregular_endings == ("Sent", "Anonymous", "User")
    assert rules.noun_endings == ("ion", "nse")
    assert rules.object_unwrap["GradeEvent"] == ("object", "assignable")
    assert rules.object_unwrap["QuestionnaireItemEvent"] == ("object", "question")
    assert rules.nested_type_paths["Rating"] == ("question", "scale", "type")


def test_default_tables_are_not_shared() -> None:
    first, second = RuleTable(), RuleTable()
    first.entity_with_fields["author"] = "Author"
    assert "author" not in second.entity_with_fields


def test_from_dict_overrides_and_keeps_defaults() -> None:
    rules = RuleTable.from_dict(
        {
            "version": "v1p3",
            "ignored_types": ["Envelope"],
            "object_unwrap": {"GradeEvent": ["object", "assignable"]},
            "type_with_fields": {"LtiSession": {"client": "Client"}},
        }
    )
    assert rules.version == "v1p3"
    assert rules.ignored_types == ("Envelope",)
    assert rules.object_unwrap == {"GradeEvent": ("object", "assignable")}
    assert rules.type_with_fields == {"LtiSession": {"client": "Client"}}
    # Untouched keys keep their defaults
    assert rules.irregular_endings == ("Sent", "Anonymous", "User")


def test_from_dict_unknown_key(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(ValueError, match="Unknown rule table keys"):
        RuleTable.from_dict({"ignore_types": ["Envelope"]})
    assert "ignore_types" in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        {"version": 2},
        {"ignored_types": "Envelope"},
        {"noun_endings": ["ion", 3]},
        {"object_unwrap": ["object"]},
        {"entity_with_fields": {"replyTo": 1}},
        {"action_with_fields": {"ToolUseEvent": "Progress"}},
    ],
)
def test_from_dict_bad_shapes(data: dict) -> None:
    with pytest.raises(ValueError):
        RuleTable.from_dict(data)


def test_to_dict_round_trips_through_from_dict() -> None:
    rules = RuleTable()
    data = rules.to_dict()

    assert data["ignored_types"] == ["TextPositionSelector", "Envelope"]
    assert data["object_unwrap"]["GradeEvent"] == ["object", "assignable"]
    assert RuleTable.from_dict(data) == rules
