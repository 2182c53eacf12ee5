"""Scoring system for kiroweenscore"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Union
import logging

from kiroweenscore.categories import KiroweenCategory
from kiroweenscore.config import VIABILITY_CONFIG
from kiroweenscore.evaluators import (
    CategoryAggregator,
    CategoryAnalysis,
    CategoryEvaluation,
    CategoryFitEvaluator,
    CriteriaAggregator,
    CriteriaAnalysis,
)
from kiroweenscore.numeric import round_half_up, snap_to_half
from kiroweenscore.submission import ProjectSubmission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HackathonScore:
    """Complete rule-based result for one submission."""
    category_analysis: CategoryAnalysis
    criteria_analysis: CriteriaAnalysis
    combined_viability: float           # 0-5, one decimal
    project_name: Optional[str] = None

    @property
    def best_match(self) -> KiroweenCategory:
        return self.category_analysis.best_match

    @property
    def final_score(self) -> float:
        return self.criteria_analysis.final_score

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "projectName": self.project_name,
            "combinedViability": self.combined_viability,
            "categoryAnalysis": self.category_analysis.to_dict(),
            "criteriaAnalysis": self.criteria_analysis.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "HackathonScore":
        return cls(
            category_analysis=CategoryAnalysis.from_dict(data["categoryAnalysis"]),
            criteria_analysis=CriteriaAnalysis.from_dict(data["criteriaAnalysis"]),
            combined_viability=float(data["combinedViability"]),
            project_name=data.get("projectName"),
        )


class ViabilityCombiner:
    """
    Blends the best category fit and the judged final score into one 0-5 figure.

    Formula:
        category5 = snap(best fit / 2)      (nearest half point)
        criteria5 = snap(final score)
        combined  = round((category5 + criteria5) / 2, 1)

    A missing analysis contributes 0 to the average.
    """

    def __init__(self):
        self.divisor = VIABILITY_CONFIG["category_scale_divisor"]
        self.step = VIABILITY_CONFIG["snap_step"]

    def combine(self, category_analysis: Optional[CategoryAnalysis],
                criteria_analysis: Optional[CriteriaAnalysis]) -> float:
        best = self._best_evaluation(category_analysis)
        category5 = snap_to_half(best.fit_score / self.divisor, self.step) if best else 0.0

        final_score = criteria_analysis.final_score if criteria_analysis else 0.0
        criteria5 = snap_to_half(final_score, self.step)

        return round_half_up((category5 + criteria5) / 2, 1)

    def _best_evaluation(self, analysis: Optional[CategoryAnalysis]) -> Optional[CategoryEvaluation]:
        if analysis is None or not analysis.evaluations:
            return None
        evaluation = analysis.evaluation_for(analysis.best_match)
        if evaluation is not None:
            return evaluation
        # Hand-built analyses may name a category they never evaluated
        best = analysis.evaluations[0]
        for candidate in analysis.evaluations[1:]:
            if candidate.fit_score > best.fit_score:
                best = candidate
        return best


class ScoringEngine:
    """Runs category and criteria analysis and combines them."""

    def __init__(self):
        self.category_evaluator = CategoryFitEvaluator()
        self.category_aggregator = CategoryAggregator(self.category_evaluator)
        self.criteria_aggregator = CriteriaAggregator()
        self.combiner = ViabilityCombiner()

    def evaluate_category(self, submission: ProjectSubmission,
                          category: Union[KiroweenCategory, str]) -> CategoryEvaluation:
        return self.category_evaluator.evaluate(submission, category)

    def analyze_categories(self, submission: ProjectSubmission) -> CategoryAnalysis:
        return self.category_aggregator.analyze(submission)

    def analyze_criteria(self, submission: ProjectSubmission) -> CriteriaAnalysis:
        return self.criteria_aggregator.analyze(submission)

    def combine_viability(self, category_analysis: Optional[CategoryAnalysis],
                          criteria_analysis: Optional[CriteriaAnalysis]) -> float:
        return self.combiner.combine(category_analysis, criteria_analysis)

    def score(self, submission: ProjectSubmission) -> HackathonScore:
        """Full analysis of one submission."""
        category_analysis = self.analyze_categories(submission)
        criteria_analysis = self.analyze_criteria(submission)
        combined = self.combine_viability(category_analysis, criteria_analysis)

        logger.info(
            f"Scored {submission.project_name or 'submission'}: viability {combined}/5 "
            f"(best match {category_analysis.best_match.value}, "
            f"criteria {criteria_analysis.final_score}/5)"
        )

        return HackathonScore(
            category_analysis=category_analysis,
            criteria_analysis=criteria_analysis,
            combined_viability=combined,
            project_name=submission.project_name,
        )

    def aggregate_results(self, results: List[HackathonScore]) -> Dict:
        """Aggregate statistics across many scored submissions."""
        viability = [r.combined_viability for r in results]
        final_scores = [r.final_score for r in results]
        best_matches = Counter(r.best_match.value for r in results)

        def avg(values): return sum(values) / len(values) if values else 0.0

        return {
            "total_submissions": len(results),
            "viability_avg": round_half_up(avg(viability), 2),
            "final_score_avg": round_half_up(avg(final_scores), 2),
            "top_viability": max(viability) if viability else 0.0,
            "best_match_counts": {
                category.value: best_matches.get(category.value, 0) for category in KiroweenCategory
            },
        }


# Stateless; shared by the module-level helpers below
_default_engine = ScoringEngine()


def evaluate_category(submission: ProjectSubmission,
                      category: Union[KiroweenCategory, str]) -> CategoryEvaluation:
    """Fit of a submission to a single category (0-10)."""
    return _default_engine.evaluate_category(submission, category)


def analyze_categories(submission: ProjectSubmission) -> CategoryAnalysis:
    """Fit to all four categories plus the best match."""
    return _default_engine.analyze_categories(submission)


def analyze_criteria(submission: ProjectSubmission) -> CriteriaAnalysis:
    """Judged rubric scores and their averaged final score (1-5)."""
    return _default_engine.analyze_criteria(submission)


def combine_viability(category_analysis: Optional[CategoryAnalysis],
                      criteria_analysis: Optional[CriteriaAnalysis]) -> float:
    """Combined 0-5 viability figure."""
    return _default_engine.combine_viability(category_analysis, criteria_analysis)


def score_submission(submission: ProjectSubmission) -> HackathonScore:
    return _default_engine.score(submission)
