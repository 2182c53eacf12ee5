"""
Submission Validation

Advisory checks run before scoring:
1. Errors   - description too short, Kiro usage too short, malformed URLs
2. Warnings - missing demo link, screenshots or notes

Validation never raises and never changes scores; callers decide whether
an invalid submission is still scored.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from urllib.parse import urlparse

from kiroweenscore.config import VALIDATION_LIMITS
from kiroweenscore.submission import ProjectSubmission, SupportingMaterials


@dataclass
class ValidationReport:
    """Result of validating one submission."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def is_valid_url(value: Optional[str], schemes=None) -> bool:
    """Absolute URL with an allowed scheme and a host."""
    schemes = schemes or VALIDATION_LIMITS["url_schemes"]
    if not value or not value.strip():
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme.lower() in schemes and bool(parsed.netloc)


class SubmissionValidator:
    """Checks a submission against the minimum submission requirements."""

    def __init__(self, limits: Optional[Dict] = None):
        self.limits = limits or VALIDATION_LIMITS

    def validate(self, submission: ProjectSubmission,
                 require_kiro_usage: bool = False) -> ValidationReport:
        report = ValidationReport()

        description = (submission.description or "").strip()
        if len(description) < self.limits["description_min_length"]:
            report.errors.append(
                f"Project description must be at least "
                f"{self.limits['description_min_length']} characters"
            )

        kiro_usage = (submission.kiro_usage or "").strip()
        if kiro_usage or require_kiro_usage:
            if len(kiro_usage) < self.limits["kiro_usage_min_length"]:
                report.errors.append(
                    f"Kiro usage description must be at least "
                    f"{self.limits['kiro_usage_min_length']} characters"
                )

        materials = submission.supporting_materials or SupportingMaterials()
        self._check_materials(materials, report)

        return report

    def _check_materials(self, materials: SupportingMaterials, report: ValidationReport):
        schemes = self.limits["url_schemes"]

        if materials.demo_link and not is_valid_url(materials.demo_link, schemes):
            report.errors.append("Demo URL is not valid")

        for index, screenshot in enumerate(materials.screenshots, 1):
            if not is_valid_url(screenshot, schemes):
                report.errors.append(f"Screenshot {index} URL is not valid")

        if not materials.demo_link:
            report.warnings.append("A live demo URL would strengthen your submission")

        if not materials.screenshots:
            report.warnings.append("Screenshots would help showcase your project visually")

        if not materials.additional_notes:
            report.warnings.append("Additional notes can give judges useful context")


def validate_submission(submission: ProjectSubmission,
                        require_kiro_usage: bool = False) -> ValidationReport:
    return SubmissionValidator().validate(submission, require_kiro_usage=require_kiro_usage)
