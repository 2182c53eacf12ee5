"""
kiroweenscore evaluators

Rule-based, side-effect-free scorers:
- CategoryFitEvaluator / CategoryAggregator: 0-10 fit per Kiroween category
- CriteriaScorer / CriteriaAggregator: 1-5 judged rubric scores
"""

from .category_fit import (
    CategoryAggregator,
    CategoryAnalysis,
    CategoryEvaluation,
    CategoryFitEvaluator,
)
from .criteria import (
    CriteriaAggregator,
    CriteriaAnalysis,
    CriteriaScore,
    CriteriaScorer,
    SubScore,
)

__all__ = [
    # Category fit
    'CategoryFitEvaluator',
    'CategoryAggregator',
    'CategoryEvaluation',
    'CategoryAnalysis',

    # Judged criteria
    'CriteriaScorer',
    'CriteriaAggregator',
    'CriteriaScore',
    'CriteriaAnalysis',
    'SubScore',
]
