# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from vamsa_gedcom.cli.app import app

runner = CliRunner()


def test_stats_command(data_dir) -> None:
    result = runner.invoke(app, ["stats", str(data_dir / "family.ged")])
    assert result.exit_code == 0
    assert "Individuals" in result.output
    assert "5" in result.output


def test_import_writes_json(tmp_path, data_dir) -> None:
    out = tmp_path / "out.json"
    result = runner.invoke(app, ["import", str(data_dir / "with_sources.ged"), "--out", str(out), "--pretty"])
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["counts"]["people"] == 2
    assert data["counts"]["source_links"] == 5


def test_import_exits_one_on_mapping_errors(tmp_path, data_dir) -> None:
    out = tmp_path / "out.json"
    result = runner.invoke(app, ["import", str(data_dir / "with_multimedia.ged"), "-o", str(out)])
    assert result.exit_code == 1
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["counts"]["objects"] == 2
    assert data["errors"][0]["id"] == "O3"


def test_import_strict_paths(tmp_path, data_dir) -> None:
    out = tmp_path / "out.json"
    runner.invoke(app, ["import", str(data_dir / "with_multimedia.ged"), "-o", str(out), "--strict-paths"])
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["counts"]["objects"] == 1


def test_validate_clean_file(data_dir) -> None:
    result = runner.invoke(app, ["validate", str(data_dir / "family.ged")])
    assert result.exit_code == 0
    assert "no problems found" in result.output


def test_validate_reports_object_errors(data_dir) -> None:
    result = runner.invoke(app, ["validate", str(data_dir / "with_multimedia.ged")])
    assert result.exit_code == 1
    assert "1 error(s), 1 warning(s)" in result.output


def test_export_writes_gedcom(tmp_path, data_dir) -> None:
    out = tmp_path / "out.ged"
    result = runner.invoke(app, ["export", str(data_dir / "family.ged"), "--out", str(out)])
    assert result.exit_code == 0
    assert "Wrote 5 individuals" in result.output
    text = out.read_text(encoding="utf-8")
    assert text.startswith("0 HEAD\n")
    assert text.endswith("0 TRLR\n")
    assert text.count(" FAM\n") == 2


def test_parse_error_exits_two(tmp_path) -> None:
    bad = tmp_path / "bad.ged"
    bad.write_text("0 HEAD\nX BROKEN\n0 TRLR\n", encoding="utf-8")
    result = runner.invoke(app, ["stats", str(bad)])
    assert result.exit_code == 2


def test_missing_input_is_a_usage_error(tmp_path) -> None:
    result = runner.invoke(app, ["stats", str(tmp_path / "nope.ged")])
    assert result.exit_code == 2


def test_stats_shows_repositories_and_submitter(tmp_path) -> None:
    ged = tmp_path / "submitted.ged"
    ged.write_text(
        "0 HEAD\n1 SUBM @U1@\n1 GEDC\n2 VERS 5.5.1\n1 CHAR UTF-8\n"
        "0 @R1@ REPO\n1 NAME County Archive\n"
        "0 @U1@ SUBM\n1 NAME Jane Archivist\n"
        "0 TRLR\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["stats", str(ged)])
    assert result.exit_code == 0
    assert "Repositories" in result.output
    assert "Submitters" in result.output
    assert "Submitted by Jane Archivist" in result.output


def test_import_and_export_parse_errors_exit_two(tmp_path) -> None:
    bad = tmp_path / "bad.ged"
    bad.write_text("0 HEAD\nX BROKEN\n0 TRLR\n", encoding="utf-8")
    assert runner.invoke(app, ["import", str(bad)]).exit_code == 2
    assert runner.invoke(app, ["export", str(bad), "--out", str(tmp_path / "out.ged")]).exit_code == 2
