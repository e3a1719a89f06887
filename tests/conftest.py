"""Shared fixtures"""

# tests/conftest.py
from pathlib import Path
from typing import Any

import pytest

from fixtures2respec.internals.config.define_config import UserConfig
from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.models import Fixture, Section, SuperType
from fixtures2respec.processing.classify import create_fixture

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def isolated_user_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep logs, manifests and the scaffold out of the real ~/Documents folder."""
    home = tmp_path / "fixtures2respec_home"
    monkeypatch.setenv("FIXTURES2RESPEC_HOME", str(home))
    return home


@pytest.fixture
def clean_debug_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Ensure debug env var is not set before test.
    Used by at least test_utils + test_startup."""
    monkeypatch.delenv("FIXTURES2RESPEC_DEBUG", raising=False)
    return monkeypatch


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Temporary directory for test output files"""
    output = tmp_path / "output"
    output.mkdir()
    return output


@pytest.fixture
def rules() -> RuleTable:
    """The default (v1p2) rule table."""
    return RuleTable()


@pytest.fixture
def path_to_respec_html() -> Path:
    """Path to the small respec file in tests/data/respec."""
    path = DATA_DIR / "respec" / "caliper-spec-respec.html"
    assert path.exists(), f"Test file not found: {path}"
    return path


@pytest.fixture
def path_to_fixtures_folder() -> Path:
    """Path to the fixture files that belong with the test respec file."""
    path = DATA_DIR / "respec" / "fixtures"
    assert path.is_dir(), f"Test folder not found: {path}"
    return path


@pytest.fixture
def sample_config_toml() -> Path:
    """Path to test a config toml"""
    path = DATA_DIR / "test_config.toml"
    assert path.exists(), f"Test file not found: {path}"
    return path


@pytest.fixture
def sample_place_cfg(
    path_to_respec_html: Path,
    path_to_fixtures_folder: Path,
    temp_output_dir: Path,
) -> UserConfig:
    """Sample config object for the place_fixtures pipeline"""
    return UserConfig(
        respec_html=path_to_respec_html,
        fixtures_folder=path_to_fixtures_folder,
        output_folder=temp_output_dir,
    )


@pytest.fixture
def make_fixture(rules: RuleTable):
    """Factory: build a classified Fixture from a file name and its JSON content."""

    def _make(file_name: str, content: dict[str, Any]) -> Fixture:
        return create_fixture(Path("fixtures") / file_name, content, rules)

    return _make


@pytest.fixture
def make_section():
    """Factory: build a Section record without a respec file."""

    def _make(
        section_id: str,
        super_type: SuperType = SuperType.ENTITY,
        term_iri: str | None = None,
    ) -> Section:
        folder = "entities" if super_type == SuperType.ENTITY else "events"
        fragment = f"fragments/{folder}/caliper-{section_id.lower()}.html"
        return Section(
            section_id=section_id,
            super_type=super_type,
            fragment_path=fragment,
            section_text=f'<section id="{section_id}" data-include="{fragment}"></section>',
            term_iri=term_iri,
        )

    return _make
