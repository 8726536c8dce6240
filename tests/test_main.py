"""Tests for the command-line interface."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from job_match.main import app

runner = CliRunner()


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def candidate_file(tmp_path: Path) -> Path:
    return write_json(
        tmp_path / "candidate.json",
        {"skills": ["Python"], "title": "Backend Engineer", "location": "Paris"},
    )


@pytest.fixture
def job_file(tmp_path: Path) -> Path:
    return write_json(
        tmp_path / "job.json",
        {"requirements": ["Python"], "title": "Backend Engineer", "location": "Paris"},
    )


@pytest.fixture
def jobs_file(tmp_path: Path) -> Path:
    return write_json(
        tmp_path / "jobs.json",
        [
            {"requirements": ["Java"], "title": "Frontend Developer", "location": "Lyon"},
            {"requirements": ["Python"], "title": "Backend Engineer", "location": "Paris"},
            {"requirements": ["Python"], "title": "Data Analyst", "location": "Lyon"},
        ],
    )


class TestNormalizeCommand:
    """Tests for the normalize command."""

    def test_prints_tokens(self) -> None:
        result = runner.invoke(app, ["normalize", "The developers and the skills"])
        assert result.exit_code == 0
        assert "develop skill" in result.stdout

    def test_no_tokens(self) -> None:
        result = runner.invoke(app, ["normalize", "the and of"])
        assert result.exit_code == 0
        assert "(no tokens)" in result.stdout


class TestMatchCommand:
    """Tests for the match command."""

    def test_json_output(self, candidate_file: Path, job_file: Path) -> None:
        result = runner.invoke(app, ["match", str(candidate_file), str(job_file), "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload == {
            "success": True,
            "data": {"overall": 100, "skills": 100, "location": 100, "title": 100},
        }

    def test_panel_output(self, candidate_file: Path, job_file: Path) -> None:
        result = runner.invoke(app, ["match", str(candidate_file), str(job_file)])
        assert result.exit_code == 0
        assert "Match Score: 100%" in result.stdout

    def test_save_to_file(self, candidate_file: Path, job_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out" / "match.json"
        result = runner.invoke(
            app, ["match", str(candidate_file), str(job_file), "--output", str(output)]
        )
        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["data"]["overall"] == 100

    def test_missing_file(self, job_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["match", str(tmp_path / "nope.json"), str(job_file)])
        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_invalid_json(self, job_file: Path, tmp_path: Path) -> None:
        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["match", str(broken), str(job_file)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.stdout

    def test_invalid_record_json_envelope(self, job_file: Path, tmp_path: Path) -> None:
        candidate = write_json(tmp_path / "candidate.json", ["not", "an", "object"])
        result = runner.invoke(app, ["match", str(candidate), str(job_file), "--json"])
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["success"] is False
        assert "error" in payload

    def test_invalid_configured_weights(self, candidate_file: Path, job_file: Path) -> None:
        with patch.dict(os.environ, {"JOB_MATCH_WEIGHT_TITLE": "0.5"}):
            result = runner.invoke(app, ["match", str(candidate_file), str(job_file)])
        assert result.exit_code == 1
        assert "Invalid scoring weights" in result.stdout


class TestRankCommand:
    """Tests for the rank command."""

    def test_json_ranking(self, candidate_file: Path, jobs_file: Path) -> None:
        result = runner.invoke(app, ["rank", str(candidate_file), str(jobs_file), "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [item["index"] for item in payload["data"]] == [1, 2, 0]
        assert [item["match"]["overall"] for item in payload["data"]] == [100, 60, 0]

    def test_min_score(self, candidate_file: Path, jobs_file: Path) -> None:
        result = runner.invoke(
            app, ["rank", str(candidate_file), str(jobs_file), "--min-score", "50", "--json"]
        )
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["data"]) == 2

    def test_min_score_from_settings(self, candidate_file: Path, jobs_file: Path) -> None:
        with patch.dict(os.environ, {"JOB_MATCH_MIN_SCORE": "80"}):
            result = runner.invoke(app, ["rank", str(candidate_file), str(jobs_file), "--json"])
        assert result.exit_code == 0
        assert [item["index"] for item in json.loads(result.stdout)["data"]] == [1]

    def test_text_ranking(self, candidate_file: Path, jobs_file: Path) -> None:
        result = runner.invoke(app, ["rank", str(candidate_file), str(jobs_file)])
        assert result.exit_code == 0
        assert "1. Backend Engineer - 100%" in result.stdout

    def test_jobs_file_must_be_a_list(self, candidate_file: Path, job_file: Path) -> None:
        result = runner.invoke(app, ["rank", str(candidate_file), str(job_file)])
        assert result.exit_code == 1
        assert "Expected a JSON list" in result.stdout


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_candidate(self, tmp_path: Path, candidate_submission: dict) -> None:
        path = write_json(tmp_path / "c.json", candidate_submission)
        result = runner.invoke(app, ["validate", "candidate", str(path)])
        assert result.exit_code == 0
        assert "OK" in result.stdout

    def test_invalid_candidate(self, tmp_path: Path, candidate_submission: dict) -> None:
        candidate_submission["skills"] = []
        path = write_json(tmp_path / "c.json", candidate_submission)
        result = runner.invoke(app, ["validate", "candidate", str(path)])
        assert result.exit_code == 1
        assert "Validation failed" in result.stdout
        assert "skills" in result.stdout

    def test_valid_job(self, tmp_path: Path, job_submission: dict) -> None:
        path = write_json(tmp_path / "j.json", job_submission)
        result = runner.invoke(app, ["validate", "job", str(path)])
        assert result.exit_code == 0

    def test_invalid_job(self, tmp_path: Path, job_submission: dict) -> None:
        job_submission["type"] = "Interim"
        path = write_json(tmp_path / "j.json", job_submission)
        result = runner.invoke(app, ["validate", "job", str(path)])
        assert result.exit_code == 1

    def test_unknown_kind(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "x.json", {})
        result = runner.invoke(app, ["validate", "company", str(path)])
        assert result.exit_code != 0


class TestVersionCommand:
    """Tests for the version command."""

    def test_prints_version(self) -> None:
        from job_match import __version__

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout
