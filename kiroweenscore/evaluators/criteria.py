"""
Judged Criteria Scorer

Three fixed rubric dimensions, each the weighted sum of three 1-5
sub-scores:

    Potential Value     = 0.4 Market Uniqueness + 0.3 UI Intuitiveness + 0.3 Scalability
    Implementation      = 0.4 Kiro Features Variety + 0.3 Depth of Understanding
                          + 0.3 Strategic Integration
    Quality and Design  = 0.4 Creativity + 0.3 Originality + 0.3 Polish

Final score = mean of the three criterion scores, rounded to one decimal.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from kiroweenscore.config import CRITERIA_WEIGHTS, SUB_SCORE_RANGE
from kiroweenscore.lexicons import CRITERIA_ORDER, SUB_CRITERIA, SubCriterionModel
from kiroweenscore.numeric import clamp, round_half_up
from kiroweenscore.submission import ProjectSubmission

from .explanations import criterion_justification, final_score_explanation, sub_score_explanation
from .rules import SubmissionText, apply_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubScore:
    score: float            # 1-5
    explanation: str

    def to_dict(self) -> Dict:
        return {"score": self.score, "explanation": self.explanation}


@dataclass(frozen=True)
class CriteriaScore:
    """Score for one judged criterion."""
    name: str
    score: float            # 1-5, one decimal
    justification: str
    sub_scores: Mapping[str, SubScore] = field(hash=False)

    def __post_init__(self):
        object.__setattr__(self, "sub_scores", MappingProxyType(dict(self.sub_scores)))

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "score": self.score,
            "justification": self.justification,
            "subScores": {key: sub.to_dict() for key, sub in self.sub_scores.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "CriteriaScore":
        return cls(
            name=data["name"],
            score=float(data["score"]),
            justification=data.get("justification", ""),
            sub_scores={
                key: SubScore(float(sub["score"]), sub.get("explanation", ""))
                for key, sub in (data.get("subScores") or {}).items()
            },
        )


@dataclass(frozen=True)
class CriteriaAnalysis:
    scores: Tuple[CriteriaScore, ...]
    final_score: float      # 1-5, one decimal
    final_score_explanation: str

    def score_for(self, name: str) -> Optional[CriteriaScore]:
        for score in self.scores:
            if score.name == name:
                return score
        return None

    def to_dict(self) -> Dict:
        return {
            "scores": [s.to_dict() for s in self.scores],
            "finalScore": self.final_score,
            "finalScoreExplanation": self.final_score_explanation,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "CriteriaAnalysis":
        return cls(
            scores=tuple(CriteriaScore.from_dict(s) for s in data["scores"]),
            final_score=float(data["finalScore"]),
            final_score_explanation=data.get("finalScoreExplanation", ""),
        )


class CriteriaScorer:
    """Scores a submission on one judged criterion."""

    def __init__(self):
        self.models = SUB_CRITERIA
        self.weights = CRITERIA_WEIGHTS
        self.lo, self.hi = SUB_SCORE_RANGE

    def sub_score(self, model: SubCriterionModel, text: SubmissionText) -> float:
        return clamp(apply_rules(model.rules, text, base=model.base), self.lo, self.hi)

    def score(self, submission: ProjectSubmission, criterion: str) -> CriteriaScore:
        if criterion not in self.models:
            raise KeyError(f"Unknown criterion: {criterion}")

        text = SubmissionText.from_submission(submission)
        weights = self.weights[criterion]

        values = {}
        for model in self.models[criterion]:
            values[model.name] = self.sub_score(model, text)

        weighted = 0.0
        for name, value in values.items():
            weighted += value * weights[name]
        score = round_half_up(weighted, 1)

        logger.debug(f"{criterion}: {score} from {values}")

        return CriteriaScore(
            name=criterion,
            score=score,
            justification=criterion_justification(criterion, score, list(values.values())),
            sub_scores={
                name: SubScore(value, sub_score_explanation(name, value, text.materials))
                for name, value in values.items()
            },
        )


class CriteriaAggregator:
    """Runs all three criteria and averages them."""

    def __init__(self, scorer: Optional[CriteriaScorer] = None):
        self.scorer = scorer or CriteriaScorer()

    def analyze(self, submission: ProjectSubmission) -> CriteriaAnalysis:
        scores = tuple(self.scorer.score(submission, name) for name in CRITERIA_ORDER)
        final_score = round_half_up(sum(s.score for s in scores) / len(scores), 1)

        potential_value, implementation, quality_design = (s.score for s in scores)
        return CriteriaAnalysis(
            scores=scores,
            final_score=final_score,
            final_score_explanation=final_score_explanation(
                final_score, potential_value, implementation, quality_design
            ),
        )
