"""
kiroweenscore - rule-based scoring for Kiroween hackathon submissions

Scores a project submission on:
- Category fit (0-10) for Resurrection, Frankenstein, Skeleton Crew and Costume Contest
- Judged criteria (1-5): Potential Value, Implementation, Quality and Design
- Combined viability (0-5) blending the best category fit with the criteria score
"""

__version__ = "1.0.0"

from .categories import CATEGORY_DEFINITIONS, CategoryDefinition, KiroweenCategory
from .submission import (
    ProjectSubmission,
    SubmissionError,
    SupportingMaterials,
    load_submission,
    load_submissions,
)
from .evaluators import (
    CategoryAnalysis,
    CategoryEvaluation,
    CriteriaAnalysis,
    CriteriaScore,
    SubScore,
)
from .scoring import (
    HackathonScore,
    ScoringEngine,
    ViabilityCombiner,
    analyze_categories,
    analyze_criteria,
    combine_viability,
    evaluate_category,
    score_submission,
)
from .validation import SubmissionValidator, ValidationReport

__all__ = [
    '__version__',

    # Categories
    'KiroweenCategory',
    'CategoryDefinition',
    'CATEGORY_DEFINITIONS',

    # Input
    'ProjectSubmission',
    'SupportingMaterials',
    'SubmissionError',
    'load_submission',
    'load_submissions',

    # Results
    'CategoryEvaluation',
    'CategoryAnalysis',
    'CriteriaScore',
    'CriteriaAnalysis',
    'SubScore',
    'HackathonScore',

    # Scoring
    'ScoringEngine',
    'ViabilityCombiner',
    'evaluate_category',
    'analyze_categories',
    'analyze_criteria',
    'combine_viability',
    'score_submission',

    # Validation
    'SubmissionValidator',
    'ValidationReport',
]
