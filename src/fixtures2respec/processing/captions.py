"""Caption generation for placed fixtures.

Captions name the fixture's type and the characteristics that set it apart from
the other examples in the same section:

    Person Anonymous Extended
    Message with ReplyTo
    GradeEvent (Graded Assignment)
    NavigationEvent (NavigatedTo) Thinned
    SessionEvent (LoggedIn) with FederatedSession

Everything here is a pure function of its inputs. The only cross-fixture input is
the action count of a section, so callers caption a section in two passes (see
caption_section_fixtures()).
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.models import Fixture, Section, SuperType

log = logging.getLogger("fixtures2respec")


# region natural_join
def natural_join(items: Sequence[str]) -> str:
    """Join words as English prose does: "A", "A and B", "A, B, and C"."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + ", and " + items[-1]


# endregion


# region Description
@dataclass(frozen=True)
class Description:
    """Descriptors computed for one entity or event, in caption order."""

    type_name: str
    adjectives: tuple[str, ...] = ()
    with_modifiers: tuple[str, ...] = ()
    action_clause: str | None = None

    @property
    def descriptors(self) -> tuple[str, ...]:
        return self.adjectives + self.with_modifiers

    @property
    def caption(self) -> str:
        caption = self.type_name
        if self.action_clause:
            caption += f" ({self.action_clause})"
        if self.adjectives:
            caption += " " + " ".join(self.adjectives)
        if self.with_modifiers:
            caption += " with " + natural_join(self.with_modifiers)
        return caption


# endregion


# region helpers
def _get_path(fields: Mapping[str, Any], path: Sequence[str]) -> Any:
    """Follow a key path through nested mappings; None as soon as a step is missing."""
    value: Any = fields
    for key in path:
        if not isinstance(value, Mapping) or key not in value:
            return None
        value = value[key]
    return value


def _describe_nested_entity(
    value: Any, rules: RuleTable, term_iris: Mapping[str, str]
) -> Description | None:
    """Describe an embedded entity object; None when it isn't a typed object."""
    if not isinstance(value, Mapping):
        return None
    type_name = value.get("type")
    if not isinstance(type_name, str):
        return None
    return describe_entity(
        type_name, value, term_iris.get(type_name), rules, term_iris=term_iris
    )


# endregion


# region describe_entity
def describe_entity(
    type_name: str,
    fields: Mapping[str, Any],
    term_iri: str | None,
    rules: RuleTable,
    term_iris: Mapping[str, str] | None = None,
) -> Description:
    """
    Compute an entity's descriptors.

    Adjectives: Anonymous (the id is just the type's term IRI), Extended.
    With-modifiers: the rule table's field labels (ReplyTo, UserAgent), type-only
    labels (Session with Client), and the nested type of e.g. a Rating's scale.
    """
    adjectives: list[str] = []
    with_modifiers: list[str] = []

    if term_iri is not None and fields.get("id") == term_iri:
        adjectives.append("Anonymous")
    if "extensions" in fields:
        adjectives.append("Extended")

    for field_name, label in rules.entity_with_fields.items():
        if field_name in fields:
            with_modifiers.append(label)

    for field_name, label in rules.type_with_fields.get(type_name, {}).items():
        if field_name in fields:
            with_modifiers.append(label)

    nested_path = rules.nested_type_paths.get(type_name)
    if nested_path:
        nested_type = _get_path(fields, nested_path)
        if isinstance(nested_type, str):
            with_modifiers.append(nested_type)

    return Description(
        type_name=type_name,
        adjectives=tuple(adjectives),
        with_modifiers=tuple(with_modifiers),
    )


# endregion


# region describe_event
def describe_event(
    type_name: str,
    fields: Mapping[str, Any],
    rules: RuleTable,
    repeated_action: bool = False,
    term_iris: Mapping[str, str] | None = None,
) -> Description:
    """
    Compute an event's descriptors and action clause.

    Args:
        type_name: The event type, e.g. "GradeEvent"
        fields: The event's top-level fields
        rules: Rule table with the type-specific special cases
        repeated_action: True when another fixture of the same section shares
            this action; the object's description is then added to the clause
        term_iris: Type name -> anonymous IRI, for describing embedded entities
    """
    term_iris = term_iris or {}
    adjectives: list[str] = []
    with_modifiers: list[str] = []

    if not any(isinstance(value, (Mapping, list)) for value in fields.values()):
        adjectives.append("Thinned")
    if "extensions" in fields:
        adjectives.append("Extended")

    for field_name, label in rules.event_with_fields.items():
        if field_name in fields:
            with_modifiers.append(label)

    action = fields.get("action")
    action_clause = action if isinstance(action, str) and action else None

    if action_clause is not None:
        if repeated_action:
            object_path = rules.object_unwrap.get(type_name, rules.default_object_path)
            obj = _describe_nested_entity(
                _get_path(fields, object_path), rules, term_iris
            )
            if obj is not None:
                action_clause += f" {obj.caption}"
            else:
                log.debug(
                    f"{type_name}: repeated action {action} but no typed object at {'.'.join(object_path)}."
                )

        for field_name, label in rules.action_with_fields.get(type_name, {}).items():
            if field_name in fields:
                action_clause += f" with {label}"

    # Embedded entities that are notable in their own right (a Session with a Client).
    skipped = set(rules.event_skip_fields)
    for field_name, value in fields.items():
        if field_name in skipped:
            continue
        nested = _describe_nested_entity(value, rules, term_iris)
        if nested is not None and nested.descriptors:
            with_modifiers.append(nested.caption)

    return Description(
        type_name=type_name,
        adjectives=tuple(adjectives),
        with_modifiers=tuple(with_modifiers),
        action_clause=action_clause,
    )


# endregion


# region describe_fixture
def describe_fixture(
    fixture: Fixture,
    rules: RuleTable,
    section: Section | None = None,
    action_counts: Mapping[str, int] | None = None,
    term_iris: Mapping[str, str] | None = None,
) -> Description | None:
    """
    Route a classified fixture to the entity or event engine.

    An Unknown fixture has nothing to describe; it is logged and gives None.
    """
    term_iris = term_iris or {}

    if fixture.type_name is None or fixture.super_type == SuperType.UNKNOWN:
        log.warning(
            f"Cannot describe fixture {fixture.file_name}: it is neither an Entity nor an Event."
        )
        return None

    if fixture.super_type == SuperType.EVENT:
        repeated = (
            action_counts is not None
            and fixture.action is not None
            and action_counts.get(fixture.action, 0) > 1
        )
        return describe_event(
            fixture.type_name,
            fixture.fields,
            rules,
            repeated_action=repeated,
            term_iris=term_iris,
        )

    term_iri = section.term_iri if section is not None else None
    if term_iri is None:
        term_iri = term_iris.get(fixture.type_name)
    return describe_entity(
        fixture.type_name, fixture.fields, term_iri, rules, term_iris=term_iris
    )


# endregion


# region count_actions
def count_actions(fixtures: Iterable[Fixture]) -> Counter[str]:
    """First pass: how many event fixtures of a section share each action."""
    return Counter(
        fixture.action
        for fixture in fixtures
        if fixture.super_type == SuperType.EVENT and fixture.action is not None
    )


# endregion


# region caption_section_fixtures
def caption_section_fixtures(
    section: Section,
    fixtures: Sequence[Fixture],
    rules: RuleTable,
    term_iris: Mapping[str, str] | None = None,
) -> list[tuple[Fixture, str]]:
    """
    Caption every fixture placed in one section.

    Two passes: gather the section's action counts, then caption each fixture
    against them. Fixture order is preserved; fixtures that can't be described
    are left out.
    """
    action_counts = count_actions(fixtures)
    captions = []
    for fixture in fixtures:
        description = describe_fixture(
            fixture,
            rules,
            section=section,
            action_counts=action_counts,
            term_iris=term_iris,
        )
        if description is None:
            continue
        log.debug(f"{section.section_id}: {fixture.file_name} -> {description.caption}")
        captions.append((fixture, description.caption))
    return captions


# endregion
