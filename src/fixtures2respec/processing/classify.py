"""Build classified Fixture records from loaded fixture JSON."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.models import Fixture, SuperType
from fixtures2respec.processing.naming import (
    classify_super_type,
    resolve_base_name,
    split_file_name,
    tokenize,
)

log = logging.getLogger("fixtures2respec")


def create_fixture(
    path: Path,
    content: Mapping[str, Any],
    rules: RuleTable,
    file_prefix: str = "caliper",
) -> Fixture:
    """Classify one fixture by its declared type and its file name."""
    raw_type = content.get("type")
    type_name = raw_type if isinstance(raw_type, str) else None
    type_tokens = tuple(tokenize(type_name)) if type_name else ()
    super_type = classify_super_type(type_name, type_tokens, rules)

    raw_id = content.get("id")
    fixture_id = raw_id if isinstance(raw_id, str) else None

    name_tokens, file_super_type, trimmed_tokens = split_file_name(
        path.stem, file_prefix
    )

    # Fixtures named after neither super type (envelopes, selectors) have no base name.
    if file_super_type is not None and type_name not in rules.ignored_types:
        resolved = resolve_base_name(trimmed_tokens, rules)
        base_name, name_extension = resolved.base_name, resolved.name_extension
    else:
        base_name, name_extension = None, None

    if super_type == SuperType.UNKNOWN:
        log.debug(f"Fixture {path.name} has no recognizable super type ({type_name}).")

    return Fixture(
        file_name=path.name,
        path=path,
        type_name=type_name,
        fields=content,
        fixture_id=fixture_id,
        super_type=super_type,
        type_tokens=type_tokens,
        name_tokens=name_tokens,
        file_super_type=file_super_type,
        base_name=base_name,
        name_extension=name_extension,
    )
