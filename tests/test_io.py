"""Tests for file reading, writing and validation helpers."""

import json
from pathlib import Path

import pytest

from fixtures2respec import io
from fixtures2respec.internals.config.rules import RuleTable
from fixtures2respec.models import PlacementResult
from fixtures2respec.processing.classify import create_fixture


# region validation
class TestValidatePaths:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="File not found"):
            io.validate_path(tmp_path / "nope.html")

    def test_folder_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Path is not a file"):
            io.validate_path(tmp_path)

    @pytest.mark.parametrize("name", ["spec.html", "spec.HTM"])
    def test_html_extensions(self, tmp_path: Path, name: str) -> None:
        path = tmp_path / name
        path.write_text("<html></html>", encoding="utf-8")
        assert io.validate_html_path(path) == path

    def test_wrong_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.md"
        path.write_text("# spec", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected an .html file"):
            io.validate_html_path(path)

    def test_folder_validation(self, tmp_path: Path) -> None:
        assert io.validate_folder_path(tmp_path) == tmp_path
        with pytest.raises(FileNotFoundError, match="Folder not found"):
            io.validate_folder_path(tmp_path / "missing")

        file_path = tmp_path / "file.json"
        file_path.write_text("{}", encoding="utf-8")
        with pytest.raises(ValueError, match="not a folder"):
            io.validate_folder_path(file_path)


def test_build_output_path(tmp_path: Path) -> None:
    assert (
        io.build_output_path(Path("spec/caliper-spec-respec.html"), tmp_path)
        == tmp_path / "caliper-spec-respec_updated.html"
    )


# endregion


# region reading fixtures
def test_iter_fixture_files_sorted_json_only(tmp_path: Path) -> None:
    for name in ["caliperEventB.json", "caliperEntityA.json", "notes.txt"]:
        (tmp_path / name).write_text("{}", encoding="utf-8")
    (tmp_path / "nested.json").mkdir()

    assert [p.name for p in io.iter_fixture_files(tmp_path)] == [
        "caliperEntityA.json",
        "caliperEventB.json",
    ]


def test_load_fixture_json(tmp_path: Path) -> None:
    path = tmp_path / "caliperEntityPerson.json"
    path.write_text(json.dumps({"type": "Person", "name": "Zoë"}), encoding="utf-8")
    assert io.load_fixture_json(path) == {"type": "Person", "name": "Zoë"}


def test_invalid_json_is_fatal(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "caliperEntityBroken.json"
    path.write_text('{"type": "Person",', encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON in fixture file") as exc_info:
        io.load_fixture_json(path)

    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    assert "caliperEntityBroken.json" in caplog.text


def test_non_utf8_fixture_is_fatal(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "caliperEntityLatin1.json"
    path.write_bytes('{"type": "Person", "name": "Zoë"}'.encode("latin-1"))

    with pytest.raises(ValueError, match="is not valid UTF-8") as exc_info:
        io.load_fixture_json(path)

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    assert "caliperEntityLatin1.json" in caplog.text
    assert "[pipeline:" in caplog.text


def test_non_object_json_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "caliperEntityList.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError, match="must contain a JSON object"):
        io.load_fixture_json(path)


# endregion


# region writing
def test_write_text_file_creates_parents_and_uses_lf(tmp_path: Path) -> None:
    target = tmp_path / "out" / "spec_updated.html"
    io.write_text_file(target, "line one\nline two\n")
    assert target.read_bytes() == b"line one\nline two\n"


def test_dump_records(tmp_path: Path, make_section) -> None:
    fixture = create_fixture(
        tmp_path / "caliperEntityPerson.json", {"type": "Person"}, RuleTable()
    )
    written = io.dump_records(tmp_path, [make_section("Person")], [fixture])

    assert [p.name for p in written] == ["sections.json", "fixtures.json"]
    sections = json.loads(written[0].read_text(encoding="utf-8"))
    fixtures = json.loads(written[1].read_text(encoding="utf-8"))
    assert sections[0]["section_id"] == "Person"
    assert fixtures[0]["file_name"] == "caliperEntityPerson.json"
    assert fixtures[0]["base_name"] == "Person"


# endregion


def test_placement_result_summary(tmp_path: Path) -> None:
    result = PlacementResult(
        output_path=tmp_path / "spec_updated.html",
        total_fixtures=3,
        unplaced=["caliperEnvelopeBasic.json"],
    )
    summary = result.to_summary()
    assert summary["total_fixtures"] == 3
    assert summary["placed_count"] == 0
    assert summary["unplaced"] == ["caliperEnvelopeBasic.json"]
