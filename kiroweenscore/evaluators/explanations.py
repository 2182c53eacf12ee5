"""
Explanation text for category fits and judged criteria.

All text is produced from explicit band tables so that wording changes
never touch scoring code. Output is English only; localization belongs
to whatever renders the results.
"""

import re
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from kiroweenscore.categories import KiroweenCategory, CategoryDefinition
from kiroweenscore.config import FIT_SCORE_BANDS, SUB_SCORE_BANDS, SUGGESTION_THRESHOLDS
from kiroweenscore.numeric import format_score
from kiroweenscore.submission import SupportingMaterials


def select_band(score: float, bands: Sequence[Tuple[float, str]]) -> str:
    """Return the key of the first band whose minimum the score reaches."""
    for minimum, key in bands:
        if score >= minimum:
            return key
    return bands[-1][1]


# =========================================================================
# CATEGORY FIT
# =========================================================================

FIT_BAND_TEXT = {
    "excellent": "This is an excellent fit!",
    "good": "This is a good fit with room for improvement.",
    "some": "This shows some alignment but needs significant enhancement.",
    "limited": "This project has limited alignment with this category.",
}

THEMATIC_SUGGESTIONS = {
    KiroweenCategory.RESURRECTION: (
        "Clearly identify the obsolete technology you're reviving and explain why it's worth bringing back",
        "Describe the modern innovations and techniques you're applying to update the old technology",
    ),
    KiroweenCategory.FRANKENSTEIN: (
        "Explicitly mention the different technologies you're combining and why they're typically incompatible",
        "Describe the technical challenges you're overcoming to make these technologies work together",
    ),
    KiroweenCategory.SKELETON_CREW: (
        "Emphasize how your project serves as a flexible foundation that others can build upon",
        "Provide specific examples of different use cases your framework can support",
    ),
    KiroweenCategory.COSTUME_CONTEST: (
        "Highlight the visual design elements and UI polish in your project",
        "Include Halloween or spooky themed elements to match the category spirit",
        "Add screenshots or demo links to showcase your visual design work",
    ),
}

KIRO_USAGE_SUGGESTIONS = (
    "Provide more detail about how you're using Kiro's features and capabilities",
    "Explain the strategic reasoning behind your Kiro integration choices",
)

BEST_MATCH_FALLBACK = "it demonstrates strong alignment with the category criteria"

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def category_explanation(name: str, definition: Optional[CategoryDefinition], fit_score: float,
                         keyword: float, thematic: float, implementation: float) -> str:
    parts = [
        f"This project scores {format_score(fit_score)}/10 for the {name} category.",
        FIT_BAND_TEXT[select_band(fit_score, FIT_SCORE_BANDS)],
        "The score breaks down as follows: "
        f"keyword relevance ({keyword:.1f}/3), "
        f"thematic alignment ({thematic:.1f}/4), "
        f"and implementation quality ({implementation:.1f}/3).",
    ]
    if definition is not None:
        parts.append(
            f"For the {name} category, we look for projects that {definition.description.lower()}."
        )
    return " ".join(parts)


def improvement_suggestions(category: Optional[KiroweenCategory], tag: str,
                            keyword: float, thematic: float, implementation: float) -> List[str]:
    suggestions = []

    if keyword < SUGGESTION_THRESHOLDS["keyword"]:
        suggestions.append(f"Include more {tag}-specific terminology in your project description")

    if category is not None and thematic < SUGGESTION_THRESHOLDS["thematic"]:
        suggestions.extend(THEMATIC_SUGGESTIONS[category])

    if implementation < SUGGESTION_THRESHOLDS["implementation"]:
        suggestions.extend(KIRO_USAGE_SUGGESTIONS)

    return suggestions


def second_sentence(text: str) -> str:
    """Second sentence of text, without terminal punctuation; '' if absent."""
    sentences = _SENTENCE_BOUNDARY.split(text.strip())
    if len(sentences) < 2:
        return ""
    return sentences[1].strip().rstrip(".!?").strip()


def best_match_reason(name: str, fit_score: float, explanation: str) -> str:
    clause = second_sentence(explanation)
    if clause:
        clause = clause[0].lower() + clause[1:]
    else:
        clause = BEST_MATCH_FALLBACK
    return (
        f"This project scores highest ({format_score(fit_score)}/10) in the {name} "
        f"category because {clause}."
    )


# =========================================================================
# JUDGED SUB-CRITERIA
# =========================================================================

# One sentence per SUB_SCORE_BANDS key
SUB_SCORE_TEXT: Mapping[str, Dict[str, str]] = {
    "Market Uniqueness": {
        "exceptional": "Demonstrates exceptional market uniqueness with clear differentiation from existing solutions.",
        "good": "Shows good market uniqueness with some differentiation from competitors.",
        "moderate": "Has moderate market uniqueness but could benefit from clearer differentiation.",
        "limited": "Limited market uniqueness evident; needs stronger differentiation strategy.",
        "minimal": "Minimal market uniqueness shown; requires significant differentiation to stand out.",
    },
    "UI Intuitiveness": {
        "exceptional": "Excellent focus on UI intuitiveness with clear user experience considerations.",
        "good": "Good attention to UI intuitiveness and user experience design.",
        "moderate": "Moderate focus on UI intuitiveness with room for improvement.",
        "limited": "Limited attention to UI intuitiveness; needs more user experience focus.",
        "minimal": "Minimal UI intuitiveness considerations; requires significant UX improvement.",
    },
    "Scalability": {
        "exceptional": "Strong scalability potential with clear growth and expansion considerations.",
        "good": "Good scalability potential with some growth planning evident.",
        "moderate": "Moderate scalability potential; could benefit from more architectural planning.",
        "limited": "Limited scalability considerations; needs more focus on growth potential.",
        "minimal": "Minimal scalability planning; requires significant architectural improvements for growth.",
    },
    "Kiro Features Variety": {
        "exceptional": "Excellent variety of technical features utilized, demonstrating comprehensive implementation.",
        "good": "Good variety of technical features used, showing solid implementation understanding.",
        "moderate": "Moderate use of technical features; could explore additional capabilities.",
        "limited": "Limited variety of technical features; needs broader implementation.",
        "minimal": "Minimal technical feature variety; requires significant expansion of implementation.",
    },
    "Depth of Understanding": {
        "exceptional": "Demonstrates deep understanding of technical capabilities with detailed implementation insights.",
        "good": "Shows good understanding with solid implementation details.",
        "moderate": "Moderate understanding; could provide more implementation depth.",
        "limited": "Limited understanding of technical capabilities; needs more detailed explanation.",
        "minimal": "Minimal understanding demonstrated; requires significant improvement in technical knowledge.",
    },
    "Strategic Integration": {
        "exceptional": "Excellent strategic integration with clear rationale and workflow considerations.",
        "good": "Good strategic thinking in integration with solid reasoning.",
        "moderate": "Moderate strategic integration; could benefit from clearer rationale.",
        "limited": "Limited strategic thinking in integration; needs better justification.",
        "minimal": "Minimal strategic integration; requires significant improvement in approach rationale.",
    },
    "Creativity": {
        "exceptional": "Highly creative approach with innovative problem-solving and unique perspectives.",
        "good": "Good creativity demonstrated with solid innovative elements.",
        "moderate": "Moderate creativity shown; could benefit from more innovative approaches.",
        "limited": "Limited creativity evident; needs more innovative thinking.",
        "minimal": "Minimal creativity demonstrated; requires significant improvement in innovative approach.",
    },
    "Originality": {
        "exceptional": "Highly original concept with unique approach and unprecedented elements.",
        "good": "Good originality with solid unique elements and fresh perspective.",
        "moderate": "Moderate originality; could benefit from more unique differentiation.",
        "limited": "Limited originality; needs more distinctive and unique elements.",
        "minimal": "Minimal originality; requires significant improvement in uniqueness and differentiation.",
    },
    "Polish": {
        "exceptional": "Excellent polish and attention to detail with professional presentation.",
        "good": "Good polish and quality with solid attention to detail.",
        "moderate": "Moderate polish; could benefit from more refinement and detail.",
        "limited": "Limited polish evident; needs more attention to quality and detail.",
        "minimal": "Minimal polish; requires significant improvement in quality and presentation.",
    },
}


def sub_score_explanation(name: str, score: float, materials: SupportingMaterials) -> str:
    explanation = SUB_SCORE_TEXT[name][select_band(score, SUB_SCORE_BANDS)]
    if name == "UI Intuitiveness" and materials.has_visuals:
        explanation += " Supporting visual materials enhance the evaluation."
    elif name == "Polish" and not materials.is_empty:
        explanation += " Supporting materials contribute positively to the overall polish."
    return explanation


# (lead sentence, labels for the three sub-scores in order)
JUSTIFICATION_TEMPLATES = {
    "Potential Value": (
        "reflects the project's market potential and user value proposition",
        ("market uniqueness", "UI intuitiveness", "scalability potential"),
    ),
    "Implementation": (
        "evaluates the technical execution and Kiro integration",
        ("Kiro features variety", "depth of understanding", "strategic integration"),
    ),
    "Quality and Design": (
        "assesses the creative and design aspects of the project",
        ("creativity", "originality", "overall polish"),
    ),
}


def criterion_justification(name: str, score: float, sub_scores: Sequence[float]) -> str:
    lead, labels = JUSTIFICATION_TEMPLATES[name]
    first, second, third = (
        f"{label} ({format_score(value)}/5)" for label, value in zip(labels, sub_scores)
    )
    return (
        f"The {name} score of {format_score(score)}/5 {lead}. "
        f"This combines {first}, {second}, and {third}."
    )


def final_score_explanation(final_score: float, potential_value: float,
                            implementation: float, quality_design: float) -> str:
    return (
        f"The final score of {format_score(final_score)}/5 is calculated as the average of all "
        f"three judging criteria: Potential Value ({format_score(potential_value)}/5), "
        f"Implementation ({format_score(implementation)}/5), and Quality & Design "
        f"({format_score(quality_design)}/5). This provides a comprehensive evaluation of the "
        "project's overall strength across market potential, technical execution, and creative design."
    )
