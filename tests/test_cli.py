"""Tests for the kiroweenscore command line."""

import json

from click.testing import CliRunner

from kiroweenscore import __version__
from kiroweenscore.cli import main

VALID = {
    "projectName": "Phantom Ledger",
    "description": "Reviving legacy COBOL ledgers with a modern web interface so old banking data stays useful",
    "kiroUsage": "Agent hooks and spec-driven workflow automation because it kept changes systematic",
    "supportingMaterials": {
        "screenshots": ["https://example.com/shot.png"],
        "demoLink": "https://example.com/demo",
        "additionalNotes": "Built in a weekend",
    },
}

SHORT = {"projectName": "Tiny", "description": "Too short"}


def write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestScoreCommand:

    def test_markdown_to_stdout(self, tmp_path):
        path = write(tmp_path / "ledger.json", VALID)

        result = CliRunner().invoke(main, ["score", str(path)])

        assert result.exit_code == 0, result.output
        assert "# Kiroween Hackathon Analysis: Phantom Ledger" in result.output

    def test_json_to_file(self, tmp_path):
        path = write(tmp_path / "ledger.json", VALID)
        output = tmp_path / "out" / "ledger.result.json"

        result = CliRunner().invoke(main, ["score", str(path), "--format", "json", "--output", str(output)])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["projectName"] == "Phantom Ledger"
        assert data["categoryAnalysis"]["bestMatch"] == "resurrection"
        assert 0.0 <= data["combinedViability"] <= 5.0

    def test_text_format(self, tmp_path):
        path = write(tmp_path / "ledger.json", VALID)

        result = CliRunner().invoke(main, ["score", str(path), "--format", "txt"])

        assert result.exit_code == 0, result.output
        assert "====== KIROWEEN HACKATHON ANALYSIS: PHANTOM LEDGER ======" in result.output

    def test_invalid_submission_still_scored(self, tmp_path):
        path = write(tmp_path / "tiny.json", SHORT)

        result = CliRunner().invoke(main, ["score", str(path)])

        assert result.exit_code == 0
        assert "# Kiroween Hackathon Analysis: Tiny" in result.output

    def test_strict_rejects_invalid(self, tmp_path):
        path = write(tmp_path / "tiny.json", SHORT)

        result = CliRunner().invoke(main, ["score", str(path), "--strict"])

        assert result.exit_code == 1
        assert "failed validation" in result.output

    def test_save(self, tmp_path):
        path = write(tmp_path / "ledger.json", VALID)
        results_dir = tmp_path / "results"

        result = CliRunner().invoke(main, ["score", str(path), "--save", "--results-dir", str(results_dir)])

        assert result.exit_code == 0, result.output
        assert (results_dir / "Phantom_Ledger.json").exists()

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        result = CliRunner().invoke(main, ["score", str(path)])

        assert result.exit_code == 1
        assert "invalid JSON" in result.output
        assert "Traceback" not in result.output


class TestInspectionCommands:

    def test_categories(self, tmp_path):
        path = write(tmp_path / "ledger.json", VALID)

        result = CliRunner().invoke(main, ["categories", str(path)])

        assert result.exit_code == 0, result.output
        for name in ("Resurrection", "Frankenstein", "Skeleton Crew", "Costume Contest"):
            assert name in result.output
        assert "Best match: Resurrection" in result.output

    def test_criteria(self, tmp_path):
        path = write(tmp_path / "ledger.json", VALID)

        result = CliRunner().invoke(main, ["criteria", str(path)])

        assert result.exit_code == 0, result.output
        assert "Potential Value" in result.output
        assert "Kiro Features Variety" in result.output
        assert "Final score:" in result.output

    def test_validate_ok(self, tmp_path):
        path = write(tmp_path / "ledger.json", VALID)

        result = CliRunner().invoke(main, ["validate", str(path)])

        assert result.exit_code == 0, result.output
        assert "[OK]" in result.output

    def test_validate_fails(self, tmp_path):
        path = write(tmp_path / "tiny.json", SHORT)

        result = CliRunner().invoke(main, ["validate", str(path)])

        assert result.exit_code == 1
        assert "[ERROR] Project description must be at least 50 characters" in result.output

    def test_validate_require_kiro_usage(self, tmp_path):
        data = dict(VALID)
        del data["kiroUsage"]
        path = write(tmp_path / "ledger.json", data)

        assert CliRunner().invoke(main, ["validate", str(path)]).exit_code == 0
        assert CliRunner().invoke(main, ["validate", str(path), "--require-kiro-usage"]).exit_code == 1


class TestBatchAndLeaderboard:

    def test_batch_then_leaderboard(self, tmp_path):
        submissions = tmp_path / "submissions"
        submissions.mkdir()
        write(submissions / "ledger.json", VALID)
        write(submissions / "tiny.json", SHORT)
        (submissions / "broken.json").write_text("{not json", encoding="utf-8")
        results_dir = tmp_path / "results"

        runner = CliRunner()
        result = runner.invoke(main, ["batch", str(submissions), "--results-dir", str(results_dir)])

        assert result.exit_code == 0, result.output
        assert "Scored 2 submission(s)" in result.output
        assert "broken.json" in result.output
        assert (results_dir / "Phantom_Ledger.json").exists()
        assert (results_dir / "Tiny.json").exists()

        export = tmp_path / "LEADERBOARD.md"
        result = runner.invoke(main, [
            "leaderboard", "--results-dir", str(results_dir), "--export-md", str(export),
        ])

        assert result.exit_code == 0, result.output
        assert "Phantom Ledger" in result.output
        assert "Tiny" in result.output
        assert export.exists()

    def test_batch_skips_undecodable_file(self, tmp_path):
        submissions = tmp_path / "submissions"
        submissions.mkdir()
        write(submissions / "a.json", VALID)
        (submissions / "b.json").write_bytes(b'{"description": "\xff"}')
        results_dir = tmp_path / "results"

        result = CliRunner().invoke(main, ["batch", str(submissions), "--results-dir", str(results_dir)])

        assert result.exit_code == 0, result.output
        assert result.exception is None
        assert "Scored 1 submission(s)" in result.output
        assert "Skipped 1 invalid file(s): b.json" in result.output

    def test_score_undecodable_file(self, tmp_path):
        path = tmp_path / "b.json"
        path.write_bytes(b'{"description": "\xff"}')

        result = CliRunner().invoke(main, ["score", str(path)])

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

    def test_leaderboard_category_filter(self, tmp_path):
        submissions = tmp_path / "submissions"
        submissions.mkdir()
        write(submissions / "ledger.json", VALID)
        results_dir = tmp_path / "results"

        runner = CliRunner()
        runner.invoke(main, ["batch", str(submissions), "--results-dir", str(results_dir)])
        result = runner.invoke(main, [
            "leaderboard", "--results-dir", str(results_dir), "--category", "frankenstein",
        ])

        assert result.exit_code == 0, result.output
        assert "Phantom Ledger" not in result.output
        assert "Frankenstein" in result.output

    def test_batch_empty_directory(self, tmp_path):
        result = CliRunner().invoke(main, ["batch", str(tmp_path)])

        assert result.exit_code == 1
        assert "No submission files found" in result.output

    def test_leaderboard_rejects_unknown_category(self, tmp_path):
        result = CliRunner().invoke(main, ["leaderboard", "--results-dir", str(tmp_path), "--category", "werewolf"])
        assert result.exit_code == 2


def test_version():
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
