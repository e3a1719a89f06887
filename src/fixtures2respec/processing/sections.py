"""Find the Entity and Event section placeholders of a respec html file.

The respec source declares one placeholder per documented type:

    <section id="Person" data-include="fragments/entities/caliper-entity-person.html"></section>

The placeholder markup is matched with a regular expression so it can later be
replaced verbatim. Each fragment's definition list is parsed with BeautifulSoup
to find the IRI of the type's term.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Mapping

from bs4 import BeautifulSoup

from fixtures2respec import io
from fixtures2respec.internals.constants import ENTITY_FRAGMENT_DIR, EVENT_FRAGMENT_DIR
from fixtures2respec.models import Section, SuperType

log = logging.getLogger("fixtures2respec")

SECTION_RE = re.compile(
    r'<section id="(?P<section_id>[^"]+)" data-include="(?P<fragment_path>[^"]+)"></section>'
)


# region scrape_sections
def scrape_sections(
    html: str,
    html_folder: Path,
    excluded_sections: Iterable[str] = ("Entity", "Event"),
    term_iri_key: str = "IRI",
) -> list[Section]:
    """
    Collect the Entity and Event sections of a respec file, in document order.

    Args:
        html: The respec html text
        html_folder: Folder that fragment paths are relative to
        excluded_sections: Section ids that never receive fixtures
        term_iri_key: Fallback definition term holding the section's IRI
    """
    excluded = set(excluded_sections)
    sections: list[Section] = []

    for match in SECTION_RE.finditer(html):
        section_id = match["section_id"]
        fragment_path = match["fragment_path"]

        super_type = _super_type_from_fragment(fragment_path)
        if super_type is None:
            continue
        if section_id in excluded:
            log.debug(f"Skipping excluded section {section_id}.")
            continue

        terms = read_fragment_terms(html_folder / fragment_path)
        term_iri = terms.get(section_id) or terms.get(term_iri_key)

        sections.append(
            Section(
                section_id=section_id,
                super_type=super_type,
                fragment_path=fragment_path,
                section_text=match.group(0),
                terms=terms,
                term_iri=term_iri,
            )
        )

    log.info(
        f"Found {sum(s.super_type == SuperType.ENTITY for s in sections)} entity sections "
        f"and {sum(s.super_type == SuperType.EVENT for s in sections)} event sections."
    )
    return sections


def _super_type_from_fragment(fragment_path: str) -> SuperType | None:
    if ENTITY_FRAGMENT_DIR in fragment_path:
        return SuperType.ENTITY
    if EVENT_FRAGMENT_DIR in fragment_path:
        return SuperType.EVENT
    return None


# endregion


# region parse_definition_terms
def parse_definition_terms(fragment_html: str) -> dict[str, str]:
    """
    Map each <dt> term to the text of the <dd> that follows it.

    The first definition of a term wins. A <dd> holding only a link falls back to
    the link's href.
    """
    soup = BeautifulSoup(fragment_html, "html.parser")
    terms: dict[str, str] = {}

    for dl in soup.find_all("dl"):
        for dt in dl.find_all("dt"):
            dd = dt.find_next_sibling("dd")
            if dd is None:
                continue
            term = dt.get_text(strip=True)
            value = dd.get_text(strip=True)
            if not value:
                link = dd.find("a", href=True)
                value = link["href"] if link is not None else ""
            if term and value and term not in terms:
                terms[term] = value

    return terms


# endregion


# region read_fragment_terms
def read_fragment_terms(fragment_path: Path) -> dict[str, str]:
    """Definition terms of a fragment file; empty (with a warning) when it's missing."""
    if not fragment_path.is_file():
        log.warning(f"Fragment not found, no term IRI available: {fragment_path}")
        return {}
    return parse_definition_terms(io.read_text_file(fragment_path))


# endregion


# region build_term_iris
def build_term_iris(sections: Iterable[Section]) -> Mapping[str, str]:
    """Section id -> term IRI, for describing entities embedded in other fixtures."""
    return {s.section_id: s.term_iri for s in sections if s.term_iri is not None}


# endregion
