"""Project submission records and loading from JSON/YAML files"""

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import jsonschema
import yaml

from kiroweenscore.config import SUPPORTED_SUBMISSION_SUFFIXES

logger = logging.getLogger(__name__)


class SubmissionError(ValueError):
    """Raised when a submission file cannot be read or fails validation."""


_OPTIONAL_TEXT = {"type": ["string", "null"]}

_MATERIALS_SCHEMA = {
    "type": ["object", "null"],
    "properties": {
        "screenshots": {"type": ["array", "null"], "items": {"type": "string"}},
        "demoLink": _OPTIONAL_TEXT,
        "demo_link": _OPTIONAL_TEXT,
        "additionalNotes": _OPTIONAL_TEXT,
        "additional_notes": _OPTIONAL_TEXT,
    },
}

# Accepts the web backend's camelCase payload as well as snake_case files
SUBMISSION_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "ProjectSubmission",
    "type": "object",
    "required": ["description"],
    "properties": {
        "description": {"type": "string", "minLength": 1},
        "kiroUsage": _OPTIONAL_TEXT,
        "kiro_usage": _OPTIONAL_TEXT,
        "projectName": _OPTIONAL_TEXT,
        "project_name": _OPTIONAL_TEXT,
        "supportingMaterials": _MATERIALS_SCHEMA,
        "supporting_materials": _MATERIALS_SCHEMA,
    },
}


def _pick(data: Dict, *keys):
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class SupportingMaterials:
    screenshots: Tuple[str, ...] = ()
    demo_link: Optional[str] = None
    additional_notes: Optional[str] = None

    def has(self, field_name: str) -> bool:
        """True when the named field is populated (non-empty)."""
        return bool(getattr(self, field_name))

    @property
    def has_visuals(self) -> bool:
        return self.has("screenshots") or self.has("demo_link")

    @property
    def is_empty(self) -> bool:
        return not (self.screenshots or self.demo_link or self.additional_notes)

    def to_dict(self) -> Dict:
        data = {"screenshots": list(self.screenshots)}
        if self.demo_link:
            data["demoLink"] = self.demo_link
        if self.additional_notes:
            data["additionalNotes"] = self.additional_notes
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "SupportingMaterials":
        data = data or {}
        return cls(
            screenshots=tuple(data.get("screenshots") or ()),
            demo_link=_pick(data, "demoLink", "demo_link"),
            additional_notes=_pick(data, "additionalNotes", "additional_notes"),
        )


@dataclass(frozen=True)
class ProjectSubmission:
    """A hackathon project as submitted for scoring."""
    description: str
    kiro_usage: str = ""
    supporting_materials: Optional[SupportingMaterials] = None
    project_name: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> Dict:
        data = {
            "description": self.description,
            "kiroUsage": self.kiro_usage or "",
        }
        if self.supporting_materials is not None:
            data["supportingMaterials"] = self.supporting_materials.to_dict()
        if self.project_name:
            data["projectName"] = self.project_name
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "ProjectSubmission":
        """Create from a camelCase or snake_case dictionary"""
        materials = _pick(data, "supportingMaterials", "supporting_materials")
        return cls(
            description=data.get("description") or "",
            kiro_usage=_pick(data, "kiroUsage", "kiro_usage") or "",
            supporting_materials=(
                SupportingMaterials.from_dict(materials) if materials is not None else None
            ),
            project_name=_pick(data, "projectName", "project_name"),
        )


def _read_document(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)
    except FileNotFoundError:
        raise SubmissionError(f"Submission file not found: {path}")
    except OSError as e:
        raise SubmissionError(f"{path}: cannot read file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise SubmissionError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except json.JSONDecodeError as e:
        raise SubmissionError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e
    except yaml.YAMLError as e:
        raise SubmissionError(f"{path}: invalid YAML ({e})") from e


def load_submission(path: Union[str, Path]) -> ProjectSubmission:
    """
    Load and validate a single submission file.

    The project name defaults to the file stem when the file has none.

    Raises:
        SubmissionError: unsupported suffix, unreadable file or schema violation
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUBMISSION_SUFFIXES:
        raise SubmissionError(
            f"{path}: unsupported file type (expected one of {', '.join(SUPPORTED_SUBMISSION_SUFFIXES)})"
        )

    data = _read_document(path)
    try:
        jsonschema.validate(instance=data, schema=SUBMISSION_SCHEMA)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise SubmissionError(f"{path}: {location}: {e.message}") from e

    submission = ProjectSubmission.from_dict(data)
    if not submission.project_name:
        submission = replace(submission, project_name=path.stem)
    logger.debug(f"Loaded submission {submission.project_name} from {path}")
    return submission


def load_submissions(directory: Union[str, Path]) -> List[ProjectSubmission]:
    """Load every supported submission file in a directory, sorted by file name."""
    directory = Path(directory)
    files = sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_SUBMISSION_SUFFIXES
    )
    return [load_submission(p) for p in files]
