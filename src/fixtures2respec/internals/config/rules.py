"""Versioned rule table for fixture classification and captioning.

Every literal name the heuristics depend on lives here, so a new fixture corpus
version can be supported by editing (or overriding from TOML) one table instead of
forking the logic.
"""

# region imports
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any

# endregion

log = logging.getLogger("fixtures2respec")

RULES_VERSION = "v1p2"


def _default_object_unwrap() -> dict[str, tuple[str, ...]]:
    return {
        "GradeEvent": ("object", "assignable"),
        "QuestionnaireItemEvent": ("object", "question"),
    }


def _default_entity_with_fields() -> dict[str, str]:
    return {"replyTo": "ReplyTo", "userAgent": "UserAgent"}


def _default_type_with_fields() -> dict[str, dict[str, str]]:
    return {"Session": {"client": "Client"}}


def _default_nested_type_paths() -> dict[str, tuple[str, ...]]:
    return {"Rating": ("question", "scale", "type")}


def _default_event_with_fields() -> dict[str, str]:
    return {"federatedSession": "FederatedSession"}


def _default_action_with_fields() -> dict[str, dict[str, str]]:
    return {"ToolUseEvent": {"generated": "Progress"}}


# region class RuleTable
@dataclass(frozen=True)
class RuleTable:
    """Name heuristics and type-specific special cases, one corpus version at a time."""

    version: str = RULES_VERSION

    # Types that are neither an Entity nor an Event.
    ignored_types: tuple[str, ...] = ("TextPositionSelector", "Envelope")

    # Base-name resolution
    irregular_endings: tuple[str, ...] = ("Sent", "Anonymous", "User")
    noun_endings: tuple[str, ...] = ("ion", "nse")
    super_type_suffixes: tuple[str, ...] = ("Event", "Entity")

    # Field path to the entity that disambiguates repeated actions.
    object_unwrap: dict[str, tuple[str, ...]] = field(
        default_factory=_default_object_unwrap
    )
    default_object_path: tuple[str, ...] = ("object",)

    # Entity "with" modifiers: field name -> label
    entity_with_fields: dict[str, str] = field(
        default_factory=_default_entity_with_fields
    )
    # Entity "with" modifiers that only apply to one type: type -> field -> label
    type_with_fields: dict[str, dict[str, str]] = field(
        default_factory=_default_type_with_fields
    )
    # type -> nested path whose value is used verbatim as a modifier
    nested_type_paths: dict[str, tuple[str, ...]] = field(
        default_factory=_default_nested_type_paths
    )

    # Event "with" modifiers: field name -> label
    event_with_fields: dict[str, str] = field(
        default_factory=_default_event_with_fields
    )
    # Appended to the action clause: type -> field -> label
    action_with_fields: dict[str, dict[str, str]] = field(
        default_factory=_default_action_with_fields
    )
    # Fields never described as nested entities of an event.
    event_skip_fields: tuple[str, ...] = ("object", "extensions")

    # region from_dict
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RuleTable:
        """
        Build a rule table from a (TOML) mapping, starting from the defaults.

        Lists become tuples so the table stays read-only in practice.

        Raises:
            ValueError: On unknown keys or values of the wrong shape.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            error_msg = f"Unknown rule table keys: {sorted(unknown)}. Valid keys: {sorted(known)}"
            log.error(error_msg)
            raise ValueError(error_msg)

        converted: dict[str, Any] = {}
        for key, value in data.items():
            if key == "version":
                if not isinstance(value, str):
                    raise ValueError(f"rules.version must be a string, got {value!r}")
                converted[key] = value
            elif key in {
                "ignored_types",
                "irregular_endings",
                "noun_endings",
                "super_type_suffixes",
                "default_object_path",
                "event_skip_fields",
            }:
                converted[key] = _to_str_tuple(key, value)
            elif key in {"object_unwrap", "nested_type_paths"}:
                converted[key] = {
                    type_name: _to_str_tuple(f"{key}.{type_name}", path)
                    for type_name, path in _require_table(key, value).items()
                }
            elif key in {"entity_with_fields", "event_with_fields"}:
                converted[key] = _to_str_dict(key, value)
            else:
                # type_with_fields, action_with_fields
                converted[key] = {
                    type_name: _to_str_dict(f"{key}.{type_name}", labels)
                    for type_name, labels in _require_table(key, value).items()
                }

        return cls(**converted)

    # endregion

    # region to_dict
    def to_dict(self) -> dict[str, Any]:
        """TOML-friendly representation (tuples become lists)."""
        return _listify(asdict(self))

    # endregion


# endregion


# region helpers
def _require_table(key: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"rules.{key} must be a table, got {type(value).__name__}")
    return value


def _to_str_tuple(key: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)) or not all(
        isinstance(v, str) for v in value
    ):
        raise ValueError(f"rules.{key} must be a list of strings, got {value!r}")
    return tuple(value)


def _to_str_dict(key: str, value: Any) -> dict[str, str]:
    table = _require_table(key, value)
    if not all(isinstance(v, str) for v in table.values()):
        raise ValueError(f"rules.{key} values must be strings, got {table!r}")
    return dict(table)


def _listify(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _listify(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_listify(v) for v in value]
    return value


# endregion
