"""
Term models for category fit and judged-criteria scoring.

Every heuristic is expressed as an ordered list of rules over fixed
lexicons. Rules are applied in declaration order and their contributions
are summed left to right, so the tables below fully determine the scores.

Scopes:
    description  - lower-cased project description only
    kiro_usage   - lower-cased Kiro usage text only
    both         - a term counts if it occurs in either text

Frozen - DO NOT MODIFY the lexicons without recalibrating the tests.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

from .categories import KiroweenCategory

DESCRIPTION = "description"
KIRO_USAGE = "kiro_usage"
BOTH = "both"


@dataclass(frozen=True)
class TermRule:
    """Flat bonus when any term occurs, or per-term bonus up to a cap."""
    terms: Tuple[str, ...]
    bonus: float
    scope: str = BOTH
    per_term: bool = False
    cap: Optional[float] = None


@dataclass(frozen=True)
class MaterialRule:
    """Bonus when any of the named supporting-material fields is populated."""
    fields: Tuple[str, ...]
    bonus: float


@dataclass(frozen=True)
class LengthRule:
    """Bonus when the description is longer than min_length characters."""
    min_length: int
    bonus: float


@dataclass(frozen=True)
class BucketRule:
    """Discrete score from the number of distinct terms present."""
    terms: Tuple[str, ...]
    buckets: Tuple[Tuple[int, float], ...]   # (minimum hits, score), highest first
    floor: float
    scope: str = DESCRIPTION


@dataclass(frozen=True)
class SubCriterionModel:
    name: str
    base: float
    rules: tuple


# =========================================================================
# CATEGORY THEMATIC ALIGNMENT (each capped at 4)
# =========================================================================

THEMATIC_RULES = MappingProxyType({
    KiroweenCategory.RESURRECTION: (
        # obsolete technology
        TermRule(("legacy", "old", "vintage", "retro", "deprecated", "outdated", "ancient"),
                 1.5, scope=DESCRIPTION),
        # modernization approach
        TermRule(("modern", "update", "refresh", "revive", "reboot", "contemporary"), 1.5),
        # practical value beyond nostalgia
        TermRule(("useful", "practical", "solve", "improve", "benefit", "value"),
                 1.0, scope=DESCRIPTION),
    ),
    KiroweenCategory.FRANKENSTEIN: (
        TermRule(("combine", "integrate", "merge", "fusion", "hybrid", "mix", "blend"),
                 0.5, per_term=True, cap=2.0),
        TermRule(("different", "various", "multiple", "diverse", "incompatible"), 1.5),
        TermRule(("challenge", "difficult", "complex", "overcome"), 0.5, scope=DESCRIPTION),
    ),
    KiroweenCategory.SKELETON_CREW: (
        TermRule(("framework", "foundation", "platform", "base", "core", "skeleton"), 2.0),
        TermRule(("flexible", "extensible", "modular", "adaptable", "customizable",
                  "configurable"), 1.5),
        TermRule(("multiple", "various", "different uses", "versatile", "multi-purpose"),
                 0.5, scope=DESCRIPTION),
    ),
    KiroweenCategory.COSTUME_CONTEST: (
        TermRule(("ui", "ux", "design", "interface", "visual", "aesthetic", "beautiful",
                  "polished"), 0.4, per_term=True, cap=2.0),
        TermRule(("halloween", "spooky", "scary", "ghost", "pumpkin", "witch", "dark",
                  "theme"), 1.5),
        MaterialRule(("screenshots", "demo_link"), 0.5),
    ),
})


# =========================================================================
# IMPLEMENTATION QUALITY (kiroUsage only, capped at 3)
# =========================================================================

IMPLEMENTATION_RULES = (
    # capability variety
    TermRule(("agent", "tool", "function", "api", "integration", "automation", "workflow"),
             0.3, scope=KIRO_USAGE, per_term=True, cap=1.5),
    # depth of understanding
    TermRule(("because", "specifically", "detailed", "comprehensive", "strategic"),
             1.0, scope=KIRO_USAGE),
    # strategic thinking
    TermRule(("strategy", "approach", "methodology", "systematic"), 0.5, scope=KIRO_USAGE),
)


# =========================================================================
# JUDGED SUB-CRITERIA (description only, each clamped to 1-5)
# =========================================================================

SUB_CRITERIA = MappingProxyType({
    "Potential Value": (
        SubCriterionModel("Market Uniqueness", 3.0, (
            TermRule(("unique", "novel", "first", "innovative", "unprecedented", "new approach"),
                     0.3, scope=DESCRIPTION, per_term=True, cap=1.0),
            TermRule(("different", "unlike", "alternative", "better than", "improvement"),
                     0.5, scope=DESCRIPTION),
            TermRule(("problem", "issue", "challenge", "pain point", "solve"),
                     0.5, scope=DESCRIPTION),
        )),
        SubCriterionModel("UI Intuitiveness", 2.5, (
            TermRule(("ui", "ux", "user interface", "user experience", "intuitive",
                      "easy to use", "user-friendly"),
                     0.4, scope=DESCRIPTION, per_term=True, cap=1.5),
            TermRule(("design", "visual", "interface", "layout", "navigation"),
                     0.5, scope=DESCRIPTION),
            MaterialRule(("screenshots", "demo_link"), 0.5),
        )),
        SubCriterionModel("Scalability", 2.5, (
            TermRule(("scalable", "scale", "grow", "expand", "extensible", "modular"),
                     1.0, scope=DESCRIPTION),
            TermRule(("architecture", "framework", "platform", "infrastructure", "system"),
                     0.5, scope=DESCRIPTION),
            TermRule(("future", "roadmap", "plan", "vision", "potential"),
                     0.5, scope=DESCRIPTION),
        )),
    ),
    "Implementation": (
        SubCriterionModel("Kiro Features Variety", 0.0, (
            BucketRule(
                ("agent", "tool", "function", "api", "integration", "automation", "workflow",
                 "mcp", "context", "prompt", "model", "ai", "llm", "chat", "assistant",
                 "feature", "implement"),
                buckets=((6, 5.0), (4, 4.0), (3, 3.0), (2, 2.0)),
                floor=1.0,
            ),
        )),
        SubCriterionModel("Depth of Understanding", 2.0, (
            TermRule(("because", "specifically", "detailed", "comprehensive", "in-depth"),
                     1.0, scope=DESCRIPTION),
            TermRule(("implementation", "architecture", "integration", "configuration", "setup"),
                     0.5, scope=DESCRIPTION),
            TermRule(("challenge", "limitation", "consideration", "trade-off"),
                     0.5, scope=DESCRIPTION),
            LengthRule(200, 0.5),
        )),
        SubCriterionModel("Strategic Integration", 2.5, (
            TermRule(("strategy", "approach", "methodology", "systematic", "strategic"),
                     1.0, scope=DESCRIPTION),
            TermRule(("why", "reason", "benefit", "advantage", "purpose"),
                     0.5, scope=DESCRIPTION),
            TermRule(("workflow", "process", "pipeline", "automation", "integration"),
                     0.5, scope=DESCRIPTION),
        )),
    ),
    "Quality and Design": (
        SubCriterionModel("Creativity", 2.5, (
            TermRule(("creative", "innovative", "novel", "unique", "original", "inventive"),
                     0.3, scope=DESCRIPTION, per_term=True, cap=1.0),
            TermRule(("unconventional", "different", "alternative", "new way", "fresh"),
                     0.5, scope=DESCRIPTION),
            TermRule(("solution", "solve", "approach", "method", "technique"),
                     0.5, scope=DESCRIPTION),
        )),
        SubCriterionModel("Originality", 3.0, (
            TermRule(("original", "first", "never been done", "unprecedented", "groundbreaking"),
                     1.0, scope=DESCRIPTION),
            TermRule(("combine", "merge", "fusion", "hybrid", "mix"), 0.5, scope=DESCRIPTION),
            # generic boilerplate is penalized
            TermRule(("simple", "basic", "standard", "typical", "common"),
                     -0.5, scope=DESCRIPTION),
        )),
        SubCriterionModel("Polish", 2.0, (
            TermRule(("polished", "refined", "professional", "high-quality", "well-designed"),
                     1.0, scope=DESCRIPTION),
            TermRule(("detail", "careful", "thorough", "complete", "comprehensive"),
                     0.5, scope=DESCRIPTION),
            MaterialRule(("screenshots",), 0.5),
            MaterialRule(("demo_link",), 0.5),
            MaterialRule(("additional_notes",), 0.25),
            LengthRule(300, 0.25),
        )),
    ),
})

CRITERIA_ORDER = ("Potential Value", "Implementation", "Quality and Design")
