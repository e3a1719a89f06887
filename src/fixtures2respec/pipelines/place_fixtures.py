# place_fixtures.py
"""Fixture placement pipeline: fixtures folder + respec html -> updated respec html."""

import logging
from pathlib import Path

from fixtures2respec import io
from fixtures2respec.internals.config.define_config import UserConfig
from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.internals.run_context import get_pipeline_run_id
from fixtures2respec.models import CaptionedFixture, Fixture, PlacementResult
from fixtures2respec.processing.captions import caption_section_fixtures
from fixtures2respec.processing.classify import create_fixture
from fixtures2respec.processing.matching import assign_fixtures
from fixtures2respec.processing.sections import build_term_iris, scrape_sections
from fixtures2respec.processing.splice import include_path_for, splice_figures

log = logging.getLogger("fixtures2respec")


def load_fixtures(
    fixtures_folder: Path, rules: RuleTable, file_prefix: str = "caliper"
) -> list[Fixture]:
    """Load and classify every fixture file. Invalid JSON aborts the run."""
    fixtures = [
        create_fixture(path, io.load_fixture_json(path), rules, file_prefix)
        for path in io.iter_fixture_files(fixtures_folder)
    ]
    log.info(f"Loaded {len(fixtures)} fixtures from {fixtures_folder}")
    return fixtures


def run_place_fixtures_pipeline(cfg: UserConfig) -> PlacementResult:
    """Orchestrates the fixture placement pipeline."""

    pipeline_id = get_pipeline_run_id()
    log.info(f"Starting place_fixtures pipeline. [pipeline:{pipeline_id}]")

    html_path = cfg.get_respec_html_file()
    fixtures_folder = cfg.get_fixtures_folder()

    if html_path is None or fixtures_folder is None:
        raise ValueError(
            "respec_html or fixtures_folder is None inside run_place_fixtures_pipeline(). "
            "Validation should have caught this; call cfg.pre_run_check() first."
        )

    html_path = io.validate_html_path(html_path)
    html = io.read_text_file(html_path)
    html_folder = html_path.parent

    sections = scrape_sections(
        html,
        html_folder,
        excluded_sections=cfg.excluded_sections,
        term_iri_key=cfg.term_iri_key,
    )
    term_iris = build_term_iris(sections)

    fixtures = load_fixtures(fixtures_folder, cfg.rules, cfg.fixture_file_prefix)

    assigned, unplaced = assign_fixtures(fixtures, sections, cfg.match_strategy)

    updated_html = html
    placements: dict[str, list[CaptionedFixture]] = {}
    for section in sections:
        section_fixtures = assigned[section.section_id]
        if not section_fixtures:
            continue

        captioned = [
            CaptionedFixture(
                fixture=fixture,
                caption=caption,
                include_path=include_path_for(
                    fixture.path, html_folder, cfg.include_prefix
                ),
            )
            for fixture, caption in caption_section_fixtures(
                section, section_fixtures, cfg.rules, term_iris
            )
        ]
        placements[section.section_id] = captioned
        updated_html = splice_figures(updated_html, section, captioned)

    output_folder = cfg.get_output_folder()
    output_path = io.write_text_file(
        io.build_output_path(html_path, output_folder), updated_html
    )

    if cfg.dump_records:
        io.dump_records(output_folder, sections, fixtures)

    result = PlacementResult(
        output_path=output_path,
        total_fixtures=len(fixtures),
        placements=placements,
        unplaced=[fixture.file_name for fixture in unplaced],
    )

    log_placement_report(result)

    log.info(f"place_fixtures pipeline complete [pipeline:{pipeline_id}]")
    log.info(f"  Original: {html_path}")
    log.info(f"  -> Final:  {output_path}")
    return result


def log_placement_report(result: PlacementResult) -> None:
    """Console summary for the human reviewing the run."""
    log.info("** Placed Fixtures **")
    log.info(f"{len(result.placed)} of {result.total_fixtures} fixtures placed")

    log.info("** Unplaced Fixtures **")
    if not result.unplaced:
        log.info("(none)")
    for file_name in result.unplaced:
        log.info(file_name)
