"""Route program flow to the appropriate pipeline based on the configured mode."""

import logging

from fixtures2respec.internals.config.define_config import PipelineMode, UserConfig
from fixtures2respec.internals.manifest import RunManifest
from fixtures2respec.internals.run_context import (
    get_pipeline_run_id,
    get_session_id,
    start_pipeline_run,
)
from fixtures2respec.models import PlacementResult
from fixtures2respec.pipelines.check_property import run_check_property_pipeline
from fixtures2respec.pipelines.place_fixtures import run_place_fixtures_pipeline

log = logging.getLogger("fixtures2respec")


# region run_pipeline
def run_pipeline(cfg: UserConfig) -> PlacementResult | list[str]:
    """
    Run validation and then route to the appropriate pipeline based on config.

    Returns:
        PlacementResult for a placement run, or the fixture file names missing the
        property for a property check.
    """

    cfg.pre_run_check()

    pipeline_id = start_pipeline_run()
    log.info(f"Initializing pipeline run. [pipeline:{pipeline_id}]")

    run_manifest = RunManifest(cfg, run_id=pipeline_id)
    run_manifest.start()

    log_pipeline_info(cfg)

    try:
        if cfg.mode == PipelineMode.PLACE_FIXTURES:
            result = run_place_fixtures_pipeline(cfg)
            run_manifest.complete(result.output_path, result.to_summary())
            return result
        elif cfg.mode == PipelineMode.CHECK_PROPERTY:
            missing = run_check_property_pipeline(cfg)
            run_manifest.complete(
                None,
                {
                    "property": cfg.check_property,
                    "missing_count": len(missing),
                    "missing": missing,
                },
            )
            return missing
        else:
            raise ValueError(f"Unknown pipeline mode: {cfg.mode}")

    except Exception as e:
        run_manifest.fail(e)
        raise  # Re-raise so the CLI still sees the error


# endregion


# region log_pipeline_info
def log_pipeline_info(cfg: UserConfig) -> None:
    """Print this pipeline run's run ID, session ID, and general config info to the log."""
    log.info("=== Pipeline Run Started ===")
    log.info(f"Run ID: {get_pipeline_run_id()}")
    log.info(f"Session ID: {get_session_id()}")
    log.info(f"Mode: {cfg.mode.value}")
    log.info(f"Rules: {cfg.rules.version}")
    log.info(f"Respec: {cfg.respec_html}")
    log.info(f"Fixtures: {cfg.fixtures_folder}")
    log.debug(f"Configuration: {cfg}")


# endregion
