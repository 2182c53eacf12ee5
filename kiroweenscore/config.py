"""Configuration for kiroweenscore"""

import os
from pathlib import Path
from typing import Dict, Any

# Base paths
BASE_DIR = Path(__file__).parent.parent
RESULTS_DIR = Path(os.getenv("KIROWEENSCORE_RESULTS_DIR", str(BASE_DIR / "results")))

SUPPORTED_SUBMISSION_SUFFIXES = (".json", ".yaml", ".yml")

# ===========================================
# Category Fit Scoring (0-10)
# ===========================================
# fit = keyword (0-3) + thematic (0-4) + implementation (0-3)

CATEGORY_SCORE_LIMITS = {
    "keyword": 3.0,
    "keyword_per_match": 0.5,
    "thematic": 4.0,
    "implementation": 3.0,
    "fit": 10.0,
}

# Suggestion triggers (strictly below these values)
SUGGESTION_THRESHOLDS = {
    "keyword": 2.0,
    "thematic": 2.0,
    "implementation": 1.5,
}

# ===========================================
# Judged Criteria Weights (1-5)
# ===========================================

CRITERIA_WEIGHTS = {
    "Potential Value": {
        "Market Uniqueness": 0.4,
        "UI Intuitiveness": 0.3,
        "Scalability": 0.3,
    },
    "Implementation": {
        "Kiro Features Variety": 0.4,
        "Depth of Understanding": 0.3,
        "Strategic Integration": 0.3,
    },
    "Quality and Design": {
        "Creativity": 0.4,
        "Originality": 0.3,
        "Polish": 0.3,
    },
}

SUB_SCORE_RANGE = (1.0, 5.0)

# ===========================================
# Explanation Bands
# ===========================================
# (minimum score, band key), highest first; the last entry is the fallback

FIT_SCORE_BANDS = (
    (8.0, "excellent"),
    (6.0, "good"),
    (4.0, "some"),
    (float("-inf"), "limited"),
)

SUB_SCORE_BANDS = (
    (4.5, "exceptional"),
    (3.5, "good"),
    (2.5, "moderate"),
    (1.5, "limited"),
    (float("-inf"), "minimal"),
)

# ===========================================
# Combined Viability (0-5)
# ===========================================

VIABILITY_CONFIG = {
    "category_scale_divisor": 2.0,   # 0-10 fit -> 0-5
    "snap_step": 0.5,                # nearest half point
}

# ===========================================
# Submission Validation
# ===========================================

VALIDATION_LIMITS = {
    "description_min_length": 50,
    "kiro_usage_min_length": 30,
    "url_schemes": ("http", "https"),
}


def get_config() -> Dict[str, Any]:
    """Get full configuration dictionary"""
    return {
        "base_dir": str(BASE_DIR),
        "results_dir": str(RESULTS_DIR),
        "supported_submission_suffixes": list(SUPPORTED_SUBMISSION_SUFFIXES),
        "category_score_limits": CATEGORY_SCORE_LIMITS,
        "suggestion_thresholds": SUGGESTION_THRESHOLDS,
        "criteria_weights": CRITERIA_WEIGHTS,
        "sub_score_range": list(SUB_SCORE_RANGE),
        "fit_score_bands": [list(band) for band in FIT_SCORE_BANDS],
        "sub_score_bands": [list(band) for band in SUB_SCORE_BANDS],
        "viability": VIABILITY_CONFIG,
        "validation_limits": VALIDATION_LIMITS,
    }
