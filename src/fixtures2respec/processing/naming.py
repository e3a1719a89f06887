"""Name heuristics: PascalCase tokenizing, super-type classification, base names."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.models import SuperType

log = logging.getLogger("fixtures2respec")

# One uppercase letter followed by one or more lowercase letters.
_TOKEN_RE = re.compile(r"[A-Z][a-z]+")


# region tokenize
def tokenize(name: str) -> list[str]:
    """
    Break a concatenated PascalCase identifier into its capitalized words.

    Digits, acronyms and leading lowercase runs don't match and are dropped:
    callers have to tolerate the loss.

    >>> tokenize("QuestionnaireItemEvent")
    ['Questionnaire', 'Item', 'Event']
    >>> tokenize("abc")
    []
    """
    return _TOKEN_RE.findall(name)


# endregion


# region classify_super_type
def classify_super_type(
    type_name: str | None, tokens: Sequence[str], rules: RuleTable
) -> SuperType:
    """
    Decide whether a type name denotes an Event, an Entity, or neither.

    Event types are named <Base><Qualifiers>Event. Entity types have no reserved
    suffix, so anything else is an Entity unless the rule table ignores it.
    """
    if not type_name:
        return SuperType.UNKNOWN
    if len(tokens) > 1 and tokens[-1] == SuperType.EVENT.value:
        return SuperType.EVENT
    if type_name not in rules.ignored_types:
        return SuperType.ENTITY
    return SuperType.UNKNOWN


# endregion


# region resolve_base_name
@dataclass(frozen=True)
class BaseName:
    """Result of splitting name tokens into a base name and an extension."""

    base_name: str
    name_extension: str | None


def resolve_base_name(tokens: Sequence[str], rules: RuleTable) -> BaseName:
    """
    Split name tokens into the documented type's base name and the fixture's extension.

    Walks left to right:
      - a token ending in "ed" stays in the base name only if the next token looks
        like a noun ("SharedAnnotation"); otherwise the extension starts there
        ("GradeGraded");
      - an irregular ending ("Sent", "Anonymous", "User") starts the extension;
      - anything else is part of the base name.
    Running out of tokens means everything is base name.

    Every token after an "ed" + noun pair stays in the base name, so
    ["Assignable", "Deleted", "Submission"] gives "AssignableDeletedSubmission",
    not "AssignableDeleted". place_fixtures.js createFixture splits it the same way.
    """
    base_tokens: list[str] = []
    extension_start = len(tokens)

    for index, token in enumerate(tokens):
        next_token = tokens[index + 1] if index + 1 < len(tokens) else None

        if token.endswith("ed"):
            if next_token is None or not next_token.endswith(rules.noun_endings):
                extension_start = index
                break
            base_tokens.append(token)
        elif token in rules.irregular_endings:
            extension_start = index
            break
        else:
            base_tokens.append(token)

    base_name = "".join(base_tokens)
    for suffix in rules.super_type_suffixes:
        if base_name != suffix:
            base_name = base_name.removesuffix(suffix)

    name_extension = "".join(tokens[extension_start:]) or None
    return BaseName(base_name=base_name, name_extension=name_extension)


# endregion


# region split_file_name
def split_file_name(
    file_stem: str, prefix: str
) -> tuple[tuple[str, ...], SuperType | None, tuple[str, ...]]:
    """
    Tokenize a fixture file stem ("caliperEventGradeGraded").

    Returns:
        (all name tokens, the leading super-type token as a SuperType or None,
         the tokens after it)
    """
    stem = file_stem[len(prefix):] if prefix and file_stem.startswith(prefix) else file_stem
    name_tokens = tuple(tokenize(stem))

    if name_tokens and name_tokens[0] in (SuperType.ENTITY.value, SuperType.EVENT.value):
        return name_tokens, SuperType(name_tokens[0]), name_tokens[1:]

    log.debug(f"File name {file_stem} does not start with a super-type token.")
    return name_tokens, None, name_tokens


# endregion
