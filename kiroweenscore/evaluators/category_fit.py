"""
Category Fit Evaluator

Scores a submission against each Kiroween category on a 0-10 scale:

    fit = keyword relevance (0-3)
        + thematic alignment (0-4)
        + implementation quality (0-3)

Keyword relevance uses the category lexicon over description and Kiro
usage together, thematic alignment uses the category's rule table, and
implementation quality looks only at the Kiro usage text.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from kiroweenscore.categories import CATEGORY_DEFINITIONS, KiroweenCategory, category_name
from kiroweenscore.config import CATEGORY_SCORE_LIMITS
from kiroweenscore.lexicons import IMPLEMENTATION_RULES, THEMATIC_RULES
from kiroweenscore.numeric import clamp, round_half_up
from kiroweenscore.submission import ProjectSubmission

from .explanations import best_match_reason, category_explanation, improvement_suggestions
from .rules import SubmissionText, apply_rules

logger = logging.getLogger(__name__)

CategoryTag = Union[KiroweenCategory, str]


def _tag(category: CategoryTag) -> str:
    return category.value if isinstance(category, KiroweenCategory) else str(category)


@dataclass(frozen=True)
class CategoryEvaluation:
    """Fit of one submission to one category."""
    category: CategoryTag
    fit_score: float                    # 0-10, one decimal
    explanation: str
    improvement_suggestions: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict:
        return {
            "category": _tag(self.category),
            "fitScore": self.fit_score,
            "explanation": self.explanation,
            "improvementSuggestions": list(self.improvement_suggestions),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "CategoryEvaluation":
        tag = data["category"]
        return cls(
            category=KiroweenCategory.parse(tag) or tag,
            fit_score=float(data["fitScore"]),
            explanation=data.get("explanation", ""),
            improvement_suggestions=tuple(data.get("improvementSuggestions", ())),
        )


@dataclass(frozen=True)
class CategoryAnalysis:
    """Evaluations for all four categories plus the best match."""
    evaluations: Tuple[CategoryEvaluation, ...]
    best_match: KiroweenCategory
    best_match_reason: str

    @property
    def best_evaluation(self) -> CategoryEvaluation:
        for evaluation in self.evaluations:
            if evaluation.category == self.best_match:
                return evaluation
        raise LookupError(f"No evaluation for best match {self.best_match.value}")

    def evaluation_for(self, category: CategoryTag) -> Optional[CategoryEvaluation]:
        member = KiroweenCategory.parse(category)
        for evaluation in self.evaluations:
            if evaluation.category == member:
                return evaluation
        return None

    def to_dict(self) -> Dict:
        return {
            "evaluations": [e.to_dict() for e in self.evaluations],
            "bestMatch": self.best_match.value,
            "bestMatchReason": self.best_match_reason,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "CategoryAnalysis":
        return cls(
            evaluations=tuple(CategoryEvaluation.from_dict(e) for e in data["evaluations"]),
            best_match=KiroweenCategory(data["bestMatch"]),
            best_match_reason=data.get("bestMatchReason", ""),
        )


class CategoryFitEvaluator:
    """Scores one submission against one category."""

    def __init__(self):
        self.limits = CATEGORY_SCORE_LIMITS
        self.thematic_rules = THEMATIC_RULES
        self.implementation_rules = IMPLEMENTATION_RULES

    def evaluate(self, submission: ProjectSubmission, category: CategoryTag) -> CategoryEvaluation:
        """
        Evaluate category fit.

        Unknown category tags never raise: they get zero keyword and
        thematic score, so only implementation quality contributes.
        """
        member = KiroweenCategory.parse(category)
        tag = member.value if member is not None else str(category)
        if member is None:
            logger.warning(f"Unknown category tag {tag!r}; keyword and thematic scores are zero")

        text = SubmissionText.from_submission(submission)

        keyword = self.keyword_score(text, member)
        thematic = self.thematic_score(text, member)
        implementation = self.implementation_score(text)

        fit_score = clamp(
            round_half_up(keyword + thematic + implementation, 1), 0.0, self.limits["fit"]
        )

        logger.debug(
            f"{tag}: fit={fit_score} (keyword={keyword:.2f}, thematic={thematic:.2f}, "
            f"implementation={implementation:.2f})"
        )

        definition = CATEGORY_DEFINITIONS.get(member) if member is not None else None
        name = category_name(tag)
        return CategoryEvaluation(
            category=member if member is not None else tag,
            fit_score=fit_score,
            explanation=category_explanation(
                name, definition, fit_score, keyword, thematic, implementation
            ),
            improvement_suggestions=tuple(improvement_suggestions(
                member, tag, keyword, thematic, implementation
            )),
        )

    def keyword_score(self, text: SubmissionText, category: Optional[KiroweenCategory]) -> float:
        """0.5 per lexicon term found in description + Kiro usage, up to 3."""
        if category is None:
            return 0.0
        combined = text.combined
        matches = sum(1 for keyword in CATEGORY_DEFINITIONS[category].keywords if keyword in combined)
        return min(matches * self.limits["keyword_per_match"], self.limits["keyword"])

    def thematic_score(self, text: SubmissionText, category: Optional[KiroweenCategory]) -> float:
        """Category-specific alignment, up to 4."""
        rules = self.thematic_rules.get(category) if category is not None else None
        if rules is None:
            return 0.0
        return min(apply_rules(rules, text), self.limits["thematic"])

    def implementation_score(self, text: SubmissionText) -> float:
        """Kiro capability variety, depth and strategy, up to 3."""
        return min(apply_rules(self.implementation_rules, text), self.limits["implementation"])


class CategoryAggregator:
    """Evaluates all categories and picks the best match."""

    def __init__(self, evaluator: Optional[CategoryFitEvaluator] = None):
        self.evaluator = evaluator or CategoryFitEvaluator()

    def analyze(self, submission: ProjectSubmission) -> CategoryAnalysis:
        evaluations = [
            self.evaluator.evaluate(submission, category) for category in KiroweenCategory
        ]

        # Strictly greater keeps the first category on ties
        best = evaluations[0]
        for evaluation in evaluations[1:]:
            if evaluation.fit_score > best.fit_score:
                best = evaluation

        reason = best_match_reason(
            category_name(best.category), best.fit_score, best.explanation
        )
        logger.debug(f"Best category match: {best.category.value} ({best.fit_score}/10)")

        return CategoryAnalysis(
            evaluations=tuple(evaluations),
            best_match=best.category,
            best_match_reason=reason,
        )
