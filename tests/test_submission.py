"""Tests for submission records and file loading."""

import json

import pytest
import yaml

from kiroweenscore import (
    ProjectSubmission,
    SubmissionError,
    SupportingMaterials,
    load_submission,
    load_submissions,
)


class TestProjectSubmission:
    """Dictionary conversion"""

    def test_from_camel_case(self):
        submission = ProjectSubmission.from_dict({
            "projectName": "Ghost Grid",
            "description": "A haunted grid",
            "kiroUsage": "Agent hooks",
            "supportingMaterials": {
                "screenshots": ["https://example.com/a.png"],
                "demoLink": "https://example.com",
                "additionalNotes": "notes",
            },
        })

        assert submission.project_name == "Ghost Grid"
        assert submission.kiro_usage == "Agent hooks"
        assert submission.supporting_materials == SupportingMaterials(
            screenshots=("https://example.com/a.png",),
            demo_link="https://example.com",
            additional_notes="notes",
        )

    def test_from_snake_case(self):
        submission = ProjectSubmission.from_dict({
            "description": "A haunted grid",
            "kiro_usage": "Agent hooks",
            "supporting_materials": {"demo_link": "https://example.com"},
        })

        assert submission.kiro_usage == "Agent hooks"
        assert submission.supporting_materials.demo_link == "https://example.com"
        assert submission.supporting_materials.screenshots == ()

    def test_nulls_become_empty(self):
        submission = ProjectSubmission.from_dict({
            "description": "A haunted grid", "kiroUsage": None, "supportingMaterials": None,
        })

        assert submission.kiro_usage == ""
        assert submission.supporting_materials is None

    def test_project_name_not_compared(self):
        a = ProjectSubmission(description="same", project_name="a")
        b = ProjectSubmission(description="same", project_name="b")
        assert a == b

    def test_to_dict(self):
        data = ProjectSubmission(
            description="A haunted grid",
            supporting_materials=SupportingMaterials(additional_notes="notes"),
        ).to_dict()

        assert data == {
            "description": "A haunted grid",
            "kiroUsage": "",
            "supportingMaterials": {"screenshots": [], "additionalNotes": "notes"},
        }

    def test_materials_flags(self):
        assert SupportingMaterials().is_empty
        assert not SupportingMaterials().has_visuals
        assert SupportingMaterials(demo_link="https://example.com").has_visuals
        assert not SupportingMaterials(additional_notes="notes").is_empty
        assert not SupportingMaterials(additional_notes="notes").has_visuals


class TestLoadSubmission:
    """Reading JSON and YAML files"""

    def test_load_json(self, tmp_path):
        path = tmp_path / "ghost-grid.json"
        path.write_text(json.dumps({"description": "A haunted grid", "kiroUsage": "Agent hooks"}))

        submission = load_submission(path)

        assert submission.description == "A haunted grid"
        assert submission.project_name == "ghost-grid"

    def test_load_yaml_keeps_declared_name(self, tmp_path):
        path = tmp_path / "entry.yaml"
        path.write_text(yaml.safe_dump({
            "project_name": "Pumpkin Patch",
            "description": "A spooky theme",
            "supporting_materials": {"screenshots": ["https://example.com/a.png"]},
        }))

        submission = load_submission(path)

        assert submission.project_name == "Pumpkin Patch"
        assert submission.supporting_materials.screenshots == ("https://example.com/a.png",)

    def test_missing_description(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"kiroUsage": "Agent hooks"}))

        with pytest.raises(SubmissionError, match="description"):
            load_submission(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"description": "ok", "kiroUsage": 5}))

        with pytest.raises(SubmissionError, match="kiroUsage"):
            load_submission(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(SubmissionError, match="invalid JSON"):
            load_submission(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("description: [unclosed")

        with pytest.raises(SubmissionError, match="invalid YAML"):
            load_submission(path)

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "entry.txt"
        path.write_text("description: hi")

        with pytest.raises(SubmissionError, match="unsupported file type"):
            load_submission(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SubmissionError, match="not found"):
            load_submission(tmp_path / "nope.json")

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "bytes.json"
        path.write_bytes(b'{"description": "\xff"}')

        with pytest.raises(SubmissionError, match="not valid UTF-8"):
            load_submission(path)

    def test_invalid_utf8_yaml(self, tmp_path):
        path = tmp_path / "bytes.yaml"
        path.write_bytes(b"description: \xff\xfe\n")

        with pytest.raises(SubmissionError, match="not valid UTF-8"):
            load_submission(path)

    def test_directory_with_submission_suffix(self, tmp_path):
        path = tmp_path / "folder.json"
        path.mkdir()

        with pytest.raises(SubmissionError, match="cannot read file"):
            load_submission(path)

    def test_submission_error_is_value_error(self):
        assert issubclass(SubmissionError, ValueError)

    def test_load_directory_sorted(self, tmp_path):
        (tmp_path / "b.json").write_text(json.dumps({"description": "second"}))
        (tmp_path / "a.yml").write_text("description: first\n")
        (tmp_path / "notes.txt").write_text("ignored")

        submissions = load_submissions(tmp_path)

        assert [s.description for s in submissions] == ["first", "second"]
        assert [s.project_name for s in submissions] == ["a", "b"]
