"""Applies term-model rules to a lower-cased submission."""

from dataclasses import dataclass
from typing import Iterable

from kiroweenscore.lexicons import (
    BOTH, DESCRIPTION, KIRO_USAGE,
    BucketRule, LengthRule, MaterialRule, TermRule,
)
from kiroweenscore.submission import ProjectSubmission, SupportingMaterials


@dataclass(frozen=True)
class SubmissionText:
    """Lower-cased view of a submission, computed once per scoring call."""
    description: str
    kiro_usage: str
    materials: SupportingMaterials

    @classmethod
    def from_submission(cls, submission: ProjectSubmission) -> "SubmissionText":
        return cls(
            description=(submission.description or "").lower(),
            kiro_usage=(submission.kiro_usage or "").lower(),
            materials=submission.supporting_materials or SupportingMaterials(),
        )

    @property
    def combined(self) -> str:
        return f"{self.description} {self.kiro_usage}"

    def contains(self, term: str, scope: str) -> bool:
        if scope == DESCRIPTION:
            return term in self.description
        if scope == KIRO_USAGE:
            return term in self.kiro_usage
        if scope == BOTH:
            return term in self.description or term in self.kiro_usage
        raise ValueError(f"Unknown rule scope: {scope}")


def count_terms(terms: Iterable[str], text: SubmissionText, scope: str) -> int:
    """Number of distinct lexicon terms present (substring match)."""
    return sum(1 for term in terms if text.contains(term, scope))


def rule_contribution(rule, text: SubmissionText) -> float:
    """Score contribution of a single rule."""
    if isinstance(rule, TermRule):
        if rule.per_term:
            raw = count_terms(rule.terms, text, rule.scope) * rule.bonus
            return min(raw, rule.cap) if rule.cap is not None else raw
        if any(text.contains(term, rule.scope) for term in rule.terms):
            return rule.bonus
        return 0.0

    if isinstance(rule, MaterialRule):
        if any(text.materials.has(field) for field in rule.fields):
            return rule.bonus
        return 0.0

    if isinstance(rule, LengthRule):
        return rule.bonus if len(text.description) > rule.min_length else 0.0

    if isinstance(rule, BucketRule):
        hits = count_terms(rule.terms, text, rule.scope)
        for minimum, score in rule.buckets:
            if hits >= minimum:
                return score
        return rule.floor

    raise TypeError(f"Unsupported rule type: {type(rule).__name__}")


def apply_rules(rules, text: SubmissionText, base: float = 0.0) -> float:
    """Sum rule contributions onto base, in declaration order."""
    score = base
    for rule in rules:
        score += rule_contribution(rule, text)
    return score
