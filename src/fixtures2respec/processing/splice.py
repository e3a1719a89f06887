"""Splice example figures into the respec html."""

from __future__ import annotations

import html as html_lib
import logging
import os
from pathlib import Path
from typing import Sequence

from fixtures2respec.internals.constants import FIGURE_SEPARATOR, FIGURE_TEMPLATE
from fixtures2respec.internals.paths import normalize_path
from fixtures2respec.models import CaptionedFixture, Section

log = logging.getLogger("fixtures2respec")


# region build_figure
def build_figure(caption: str, include_path: str) -> str:
    """Example figure that pulls the fixture file in through data-include."""
    return FIGURE_TEMPLATE.format(
        caption=html_lib.escape(caption, quote=False),
        include_path=html_lib.escape(include_path),
    )


# endregion


# region include_path_for
def include_path_for(
    fixture_path: Path, html_folder: Path, include_prefix: str | None = None
) -> str:
    """
    The data-include value for a fixture file.

    With a prefix, that prefix plus the file name; otherwise the fixture's path
    relative to the respec file's folder. Always forward slashes.
    """
    if include_prefix is not None:
        prefix = normalize_path(include_prefix) or ""
        if prefix and not prefix.endswith("/"):
            prefix += "/"
        return f"{prefix}{fixture_path.name}"

    relative = os.path.relpath(fixture_path, html_folder)
    return normalize_path(relative) or fixture_path.name


# endregion


# region splice_figures
def splice_figures(
    html: str, section: Section, captioned: Sequence[CaptionedFixture]
) -> str:
    """
    Replace a section placeholder with itself followed by one figure per fixture.

    Fixtures whose data-include path (in the escaped form build_figure writes) is
    already in the html are skipped, so running over an already-updated file does
    not duplicate figures.
    """
    figures = []
    for item in captioned:
        if f'data-include="{html_lib.escape(item.include_path)}"' in html:
            log.debug(
                f"{item.fixture.file_name} already included in the html; not adding it again."
            )
            continue
        figures.append(build_figure(item.caption, item.include_path))

    if not figures:
        return html

    if section.section_text not in html:
        log.warning(
            f"Section markup for {section.section_id} not found in html; figures not inserted."
        )
        return html

    replacement = section.section_text + FIGURE_SEPARATOR + FIGURE_SEPARATOR.join(figures)
    return html.replace(section.section_text, replacement, 1)


# endregion
