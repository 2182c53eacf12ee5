"""Tests for combined viability and the scoring engine."""

import pytest

from kiroweenscore import (
    HackathonScore,
    KiroweenCategory,
    ProjectSubmission,
    ScoringEngine,
    SupportingMaterials,
    combine_viability,
    score_submission,
)
from kiroweenscore.config import get_config
from kiroweenscore.evaluators import CategoryAnalysis, CategoryEvaluation, CriteriaAnalysis
from kiroweenscore.numeric import clamp, format_score, round_half_up, snap_to_half

LEGACY_SUBMISSION = ProjectSubmission(
    description="Reviving legacy systems and obsolete vintage technology with modern updates",
    kiro_usage="Agent hooks and tool integration because the strategy needed automation",
    supporting_materials=SupportingMaterials(screenshots=("https://example.com/a.png",)),
    project_name="Legacy Revival",
)


def category_analysis(fit, best=KiroweenCategory.RESURRECTION):
    return CategoryAnalysis(
        evaluations=(CategoryEvaluation(best, fit, "explanation"),),
        best_match=best,
        best_match_reason="reason",
    )


def criteria_analysis(final):
    return CriteriaAnalysis(scores=(), final_score=final, final_score_explanation="")


class TestNumeric:
    """Rounding helpers"""

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(6.25, 1) == 6.3
        assert round_half_up(1.75, 1) == 1.8
        assert round_half_up(1.74, 1) == 1.7

    def test_snap_to_half(self):
        assert snap_to_half(3.75) == 4.0
        assert snap_to_half(3.7) == 3.5
        assert snap_to_half(3.2) == 3.0
        assert snap_to_half(0.0) == 0.0

    def test_clamp(self):
        assert clamp(6.0, 1.0, 5.0) == 5.0
        assert clamp(0.5, 1.0, 5.0) == 1.0

    def test_format_score(self):
        assert format_score(7.0) == "7"
        assert format_score(7.5) == "7.5"
        assert format_score(0.0) == "0"


class TestViabilityCombiner:
    """Combined 0-5 viability figure"""

    def test_half_point_snapping(self):
        # fit 7.5 -> 3.75 -> 4.0 ; final 3.2 -> 3.0 ; mean 3.5
        assert combine_viability(category_analysis(7.5), criteria_analysis(3.2)) == 3.5

    def test_rounds_mean_half_up(self):
        # fit 6.1 -> 3.05 -> 3.0 ; final 2.3 -> 2.5 ; mean 2.75 -> 2.8
        assert combine_viability(category_analysis(6.1), criteria_analysis(2.3)) == 2.8

    def test_missing_analyses_contribute_zero(self):
        assert combine_viability(None, None) == 0.0
        assert combine_viability(category_analysis(10.0), None) == 2.5
        assert combine_viability(None, criteria_analysis(5.0)) == 2.5

    def test_best_match_without_evaluation_uses_max_fit(self):
        analysis = CategoryAnalysis(
            evaluations=(
                CategoryEvaluation(KiroweenCategory.RESURRECTION, 4.0, ""),
                CategoryEvaluation(KiroweenCategory.FRANKENSTEIN, 8.0, ""),
            ),
            best_match=KiroweenCategory.COSTUME_CONTEST,
            best_match_reason="",
        )
        # 8.0 -> 4.0 ; final 4.0 -> 4.0
        assert combine_viability(analysis, criteria_analysis(4.0)) == 4.0

    def test_maximum(self):
        assert combine_viability(category_analysis(10.0), criteria_analysis(5.0)) == 5.0


class TestScoringEngine:
    """End-to-end scoring"""

    def test_score_fields(self):
        result = ScoringEngine().score(LEGACY_SUBMISSION)

        assert isinstance(result, HackathonScore)
        assert result.project_name == "Legacy Revival"
        assert result.best_match == KiroweenCategory.RESURRECTION
        assert result.final_score == result.criteria_analysis.final_score
        assert 0.0 <= result.combined_viability <= 5.0
        assert result.combined_viability == combine_viability(
            result.category_analysis, result.criteria_analysis
        )

    def test_deterministic(self):
        assert score_submission(LEGACY_SUBMISSION) == score_submission(LEGACY_SUBMISSION)

    def test_serialization(self):
        result = score_submission(LEGACY_SUBMISSION)
        data = result.to_dict()

        assert data["projectName"] == "Legacy Revival"
        assert data["categoryAnalysis"]["bestMatch"] == "resurrection"
        assert len(data["categoryAnalysis"]["evaluations"]) == 4
        assert [s["name"] for s in data["criteriaAnalysis"]["scores"]] == [
            "Potential Value", "Implementation", "Quality and Design"
        ]
        assert HackathonScore.from_dict(data) == result

    def test_aggregate_results(self):
        engine = ScoringEngine()
        results = [
            engine.score(LEGACY_SUBMISSION),
            engine.score(ProjectSubmission(description="A spooky halloween theme with a polished ui")),
        ]
        summary = engine.aggregate_results(results)

        assert summary["total_submissions"] == 2
        assert sum(summary["best_match_counts"].values()) == 2
        assert set(summary["best_match_counts"]) == {c.value for c in KiroweenCategory}
        assert summary["top_viability"] == max(r.combined_viability for r in results)

    def test_aggregate_averages_round_half_up(self):
        results = [
            HackathonScore(category_analysis(6.0), criteria_analysis(0.25), 0.25),
            HackathonScore(category_analysis(6.0), criteria_analysis(0.0), 0.0),
        ]
        summary = ScoringEngine().aggregate_results(results)

        # mean is 0.125; round() would give 0.12
        assert summary["viability_avg"] == 0.13
        assert summary["final_score_avg"] == 0.13

    def test_aggregate_empty(self):
        summary = ScoringEngine().aggregate_results([])
        assert summary["total_submissions"] == 0
        assert summary["viability_avg"] == 0.0


def test_get_config():
    config = get_config()

    assert config["category_score_limits"]["fit"] == 10.0
    assert config["viability"]["snap_step"] == 0.5
    assert set(config["criteria_weights"]) == {"Potential Value", "Implementation", "Quality and Design"}


@pytest.mark.parametrize("category", list(KiroweenCategory))
def test_enum_values_render_as_tags(category):
    assert category.value in {"resurrection", "frankenstein", "skeleton-crew", "costume-contest"}
    assert category_analysis(5.0, category).to_dict()["bestMatch"] == category.value
