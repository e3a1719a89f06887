"""CLI Interface Logic (argparse etc)"""

import argparse
import logging
from dataclasses import fields
from pathlib import Path

from fixtures2respec.internals.config.define_config import (
    MatchStrategy,
    UserConfig,
)
from fixtures2respec.models import PlacementResult
from fixtures2respec.orchestrator import run_pipeline

log = logging.getLogger("fixtures2respec")

# UserConfig fields that can only be set from a config file.
CONFIG_FILE_ONLY_FIELDS = {"rules", "excluded_sections"}


def run(argv: list[str] | None = None) -> PlacementResult | list[str]:
    """Run CLI interface. Assumes startup.initialize_application() was already called."""

    args = parse_args(argv)

    # CLI args > config file > defaults
    cfg = build_config_from_args(args)

    return run_pipeline(cfg)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns argparse.Namespace with the UserConfig fields as attributes.
    Validates that all CLI-settable config fields have corresponding CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="fixtures2respec",
        description="Place JSON example fixtures into a ReSpec specification as captioned figures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use config file
  fixtures2respec --config path/to/my_settings.toml

  # Place fixtures with defaults
  fixtures2respec --respec-html caliper-spec-respec.html --fixtures-folder fixtures/v1p2

  # Match on file names instead of the fixtures' type field
  fixtures2respec --config settings.toml --match-strategy base_name

  # List event fixtures without a profile property
  fixtures2respec --fixtures-folder fixtures/v1p2 --check-property profile
        """,
    )

    # Config file (special - loads other values)
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to TOML configuration file. See ~/Documents/fixtures2respec/configs/sample_config.toml after at least 1 run",
    )

    # Input/Output
    parser.add_argument(
        "--respec-html",
        type=str,
        dest="respec_html",
        metavar="PATH",
        help="ReSpec html file to place fixtures into",
    )
    parser.add_argument(
        "--fixtures-folder",
        type=str,
        dest="fixtures_folder",
        metavar="PATH",
        help="Folder of JSON fixture files",
    )
    parser.add_argument(
        "--output-folder",
        type=str,
        dest="output_folder",
        metavar="PATH",
        help="Where to write <name>_updated.html (default: next to the respec file)",
    )
    parser.add_argument(
        "--include-prefix",
        type=str,
        dest="include_prefix",
        metavar="PREFIX",
        help="Path written before fixture file names in data-include attributes "
        "(default: fixtures folder relative to the respec file)",
    )

    # Processing options
    parser.add_argument(
        "--match-strategy",
        type=str,
        dest="match_strategy",
        choices=[m.value for m in MatchStrategy],
        help="How fixtures are matched to sections (default: exact)",
    )
    parser.add_argument(
        "--fixture-file-prefix",
        type=str,
        dest="fixture_file_prefix",
        metavar="PREFIX",
        help="Prefix stripped from fixture file names before tokenizing (default: caliper)",
    )
    parser.add_argument(
        "--term-iri-key",
        type=str,
        dest="term_iri_key",
        metavar="TERM",
        help="Definition list term holding a section's IRI (default: IRI)",
    )
    parser.add_argument(
        "--check-property",
        type=str,
        dest="check_property",
        metavar="NAME",
        help="Instead of placing fixtures, list event fixtures missing this top-level property",
    )

    # Boolean flags - record dumps
    dump_group = parser.add_mutually_exclusive_group()
    dump_group.add_argument(
        "--dump-records",
        action="store_true",
        dest="dump_records",
        default=None,
        help="Write sections.json and fixtures.json to the output folder",
    )
    dump_group.add_argument(
        "--no-dump-records",
        action="store_false",
        dest="dump_records",
        default=None,
        help="Do not write record dumps (default)",
    )

    _validate_args_match_config(parser)

    return parser.parse_args(argv)


def build_config_from_args(args: argparse.Namespace) -> UserConfig:
    """
    Build UserConfig from parsed arguments with proper priority.

    Priority order (highest to lowest):
    1. CLI arguments (if explicitly provided)
    2. Config file values (if --config provided)
    3. UserConfig defaults
    """
    if args.config:
        config_path = Path(args.config)
        log.info(f"Loading config from {config_path}")
        cfg = UserConfig.from_toml(config_path)
    else:
        cfg = UserConfig()

    # Only override what was actually provided
    if args.respec_html is not None:
        cfg.respec_html = Path(args.respec_html)
    if args.fixtures_folder is not None:
        cfg.fixtures_folder = Path(args.fixtures_folder)
    if args.output_folder is not None:
        cfg.output_folder = Path(args.output_folder)
    if args.include_prefix is not None:
        cfg.include_prefix = args.include_prefix
    if args.fixture_file_prefix is not None:
        cfg.fixture_file_prefix = args.fixture_file_prefix
    if args.term_iri_key is not None:
        cfg.term_iri_key = args.term_iri_key
    if args.check_property is not None:
        cfg.check_property = args.check_property

    if args.match_strategy is not None:
        cfg.match_strategy = MatchStrategy.from_string(args.match_strategy)

    if args.dump_records is not None:
        cfg.dump_records = args.dump_records

    cfg.validate()

    return cfg


def _validate_args_match_config(parser: argparse.ArgumentParser) -> None:
    """
    Ensure every CLI-settable UserConfig field has a corresponding CLI argument.

    Raises:
        RuntimeError: If there's a mismatch between config fields and CLI args
    """
    config_fields = {f.name for f in fields(UserConfig)} - CONFIG_FILE_ONLY_FIELDS

    excluded_args = ["help", "config"]
    arg_names = {
        action.dest for action in parser._actions if action.dest not in excluded_args
    }

    missing_in_args = config_fields - arg_names
    extra_in_args = arg_names - config_fields

    if missing_in_args:
        log.error(
            "UserConfig fields must have a corresponding arg added to cli.parse_args(), "
            "or be listed in CONFIG_FILE_ONLY_FIELDS."
        )
        raise RuntimeError(
            f"CLI arguments missing for UserConfig fields: {missing_in_args}"
        )

    if extra_in_args:
        log.error(
            "Unexpected CLI args that do not match UserConfig fields. Add the field to "
            "UserConfig, or add the arg to excluded_args in _validate_args_match_config()."
        )
        raise RuntimeError(
            f"CLI arguments don't match UserConfig fields: {extra_in_args}"
        )


def main() -> None:
    """Development entry point - run CLI directly with `python -m fixtures2respec.cli`"""
    from fixtures2respec import startup

    log = startup.initialize_application()
    try:
        run()
    except Exception:
        log.exception("Fatal error in CLI")
        raise


if __name__ == "__main__":
    main()
