"""Tests for the place_fixtures pipeline pieces."""

import logging
from pathlib import Path

import pytest

from fixtures2respec.internals.config.define_config import UserConfig
from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.models import PlacementResult, SuperType
from fixtures2respec.pipelines.place_fixtures import (
    load_fixtures,
    log_placement_report,
    run_place_fixtures_pipeline,
)


def test_load_fixtures(path_to_fixtures_folder: Path) -> None:
    fixtures = load_fixtures(path_to_fixtures_folder, RuleTable())

    assert len(fixtures) == 8
    by_name = {f.file_name: f for f in fixtures}
    assert by_name["caliperEventGradeGradedQuiz.json"].super_type == SuperType.EVENT
    assert by_name["caliperEntitySession.json"].super_type == SuperType.ENTITY
    assert by_name["caliperEnvelopeBasic.json"].super_type == SuperType.UNKNOWN


def test_load_fixtures_empty_folder(tmp_path: Path) -> None:
    assert load_fixtures(tmp_path, RuleTable()) == []


def test_pipeline_needs_inputs() -> None:
    with pytest.raises(ValueError, match="pre_run_check"):
        run_place_fixtures_pipeline(UserConfig())


def test_log_placement_report_with_nothing_unplaced(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="fixtures2respec")
    result = PlacementResult(output_path=tmp_path / "out.html", total_fixtures=0)

    log_placement_report(result)

    assert "0 of 0 fixtures placed" in caplog.text
    assert "(none)" in caplog.text
