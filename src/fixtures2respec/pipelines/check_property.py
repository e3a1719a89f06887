# check_property.py
"""Property check pipeline: list event fixtures missing a top-level property."""

import logging

from fixtures2respec.internals.config.define_config import UserConfig
from fixtures2respec.internals.run_context import get_pipeline_run_id
from fixtures2respec.pipelines.place_fixtures import load_fixtures
from fixtures2respec.processing.property_check import find_fixtures_missing_property

log = logging.getLogger("fixtures2respec")


def run_check_property_pipeline(cfg: UserConfig) -> list[str]:
    """Log and return the event fixtures that lack cfg.check_property."""

    pipeline_id = get_pipeline_run_id()
    fixtures_folder = cfg.get_fixtures_folder()
    property_name = cfg.check_property

    if fixtures_folder is None or not property_name:
        raise ValueError(
            "fixtures_folder or check_property is missing inside run_check_property_pipeline(). "
            "Validation should have caught this; call cfg.pre_run_check() first."
        )

    log.info(
        f"Checking event fixtures for '{property_name}' property. [pipeline:{pipeline_id}]"
    )

    fixtures = load_fixtures(fixtures_folder, cfg.rules, cfg.fixture_file_prefix)
    missing = find_fixtures_missing_property(fixtures, property_name)

    for file_name in missing:
        log.info(file_name)
    log.info(
        f"{len(missing)} event fixtures missing '{property_name}'. [pipeline:{pipeline_id}]"
    )
    return missing
