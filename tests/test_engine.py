"""End-to-end tests for the public engine entry points"""
import random

import pytest

from ergorisk import engine
from ergorisk.exceptions import InvalidAssessmentError
from ergorisk.models.risk_model import FactorCategory, RiskLevel
from helpers import (
    FIXED_NOW,
    make_assessment,
    movement_data,
    posture_data,
    profile_data,
    scenario_assessment,
    scenario_profile,
    symptom,
    workspace_data,
)


class TestScore:
    """Test cases for engine.score"""

    def setup_method(self):
        self.analysis = engine.score(scenario_assessment(), scenario_profile(), now=FIXED_NOW)

    def test_scenario_lands_in_high_band(self):
        assert self.analysis.risk_score == 50
        assert self.analysis.overall_risk == RiskLevel.HIGH
        assert self.analysis.assessment_id == "assess_001"
        assert self.analysis.analysis_date == FIXED_NOW

    def test_scenario_factors(self):
        names = [f.name for f in self.analysis.factors]
        assert names == [
            "Poor Posture Alignment",
            "Existing Discomfort/Pain",
            "Suboptimal Workspace Setup",
            "Extended Work Hours",
        ]
        assert self.analysis.factors[0].severity == RiskLevel.CRITICAL
        assert {f.category for f in self.analysis.factors} >= {
            FactorCategory.POSTURE,
            FactorCategory.EQUIPMENT,
        }

    def test_component_scores_are_reported(self):
        scores = self.analysis.component_scores
        assert scores.posture == pytest.approx(85.8)
        assert scores.workspace == 40
        assert scores.movement == 20
        assert scores.symptoms == 48

    def test_scoring_is_idempotent(self):
        again = engine.score(scenario_assessment(), scenario_profile(), now=FIXED_NOW)
        assert again == self.analysis

    def test_camel_case_dict_input(self):
        payload = scenario_assessment().model_dump(by_alias=True)
        profile = {"age": 45, "height": 175, "weight": 70, "workHoursPerDay": 9}
        analysis = engine.score(payload, profile, now=FIXED_NOW)
        assert analysis == self.analysis

    def test_invalid_profile_raises(self):
        with pytest.raises(InvalidAssessmentError):
            engine.score(scenario_assessment(), profile_data(age=-3))

    def test_invalid_assessment_raises(self):
        payload = scenario_assessment().model_dump(by_alias=True)
        payload["postureData"]["shoulderPosition"] = "shrugged"
        with pytest.raises(InvalidAssessmentError):
            engine.score(payload, scenario_profile())

    def test_neutral_assessment_is_low_risk(self):
        analysis = engine.score(make_assessment(), profile_data(), now=FIXED_NOW)
        assert analysis.risk_score == 0
        assert analysis.overall_risk == RiskLevel.LOW
        assert analysis.factors == []
        assert analysis.priority_areas == []

    def test_score_input_matches_score(self):
        assessment = scenario_assessment()
        calc_input = {
            "userProfile": profile_data(age=45, work_hours_per_day=9),
            "workspace": assessment.workspace_setup,
            "posture": assessment.posture_data,
            "movement": assessment.movement_patterns,
            "symptoms": assessment.symptoms,
        }
        analysis = engine.score_input(calc_input, now=FIXED_NOW)
        assert analysis.risk_score == self.analysis.risk_score
        assert analysis.factors == self.analysis.factors


class TestScoreProperties:
    """Randomised inputs keep every output within its documented bounds"""

    def _random_assessment(self, rng):
        return make_assessment(
            workspace=workspace_data(
                desk_height=rng.uniform(50, 110),
                chair_height=rng.uniform(30, 65),
                monitor_distance=rng.uniform(20, 120),
                monitor_height=rng.uniform(-30, 30),
                keyboard_position=rng.choice(["desktop", "tray", "adjustable"]),
                mouse_position=rng.choice(["desktop", "tray", "adjustable"]),
                lumbar_support=rng.random() < 0.5,
                foot_support=rng.random() < 0.5,
                armrest_support=rng.random() < 0.5,
                lighting_quality=rng.choice(["poor", "fair", "good", "excellent"]),
            ),
            posture=posture_data(
                neck_angle=rng.uniform(-60, 60),
                shoulder_position=rng.choice(["relaxed", "elevated", "hunched", "forward"]),
                back_curvature=rng.choice(["natural", "straight", "slouched", "arched"]),
                elbow_angle=rng.uniform(40, 160),
                wrist_position=rng.choice(["neutral", "extended", "flexed", "deviated"]),
                hip_angle=rng.uniform(60, 140),
                feet_position=rng.choice(["flat-floor", "footrest", "dangling", "crossed"]),
            ),
            movement=movement_data(
                repetitive={
                    "typing": rng.uniform(0, 500),
                    "mouse_clicks": rng.uniform(0, 200),
                    "reaching_movements": rng.uniform(0, 60),
                },
                screen_break_frequency=rng.uniform(0, 4),
                stretching_frequency=rng.uniform(0, 6),
                walking_frequency=rng.uniform(0, 2),
                posture_changes=rng.uniform(0, 4),
            ),
            symptoms=[
                symptom(
                    rng.choice(["neck", "shoulder", "back", "wrist", "eye", "hip", "knee", "foot"]),
                    rng.choice(["none", "mild", "moderate", "severe"]),
                    rng.choice(["never", "rarely", "sometimes", "often", "always"]),
                )
                for _ in range(rng.randint(0, 6))
            ],
        )

    def test_random_inputs_stay_in_bounds(self):
        rng = random.Random(7)
        for _ in range(200):
            profile = profile_data(
                age=rng.randint(18, 75),
                height=rng.uniform(150, 200),
                work_hours_per_day=rng.uniform(0, 14),
            )
            analysis = engine.score(self._random_assessment(rng), profile, now=FIXED_NOW)

            assert 0 <= analysis.risk_score <= 100
            for value in analysis.component_scores.model_dump().values():
                assert 0 <= value <= 100
            factor_scores = [f.score for f in analysis.factors]
            assert factor_scores == sorted(factor_scores, reverse=True)
            assert len(analysis.priority_areas) <= 5
            assert len(set(analysis.priority_areas)) == len(analysis.priority_areas)


class TestBuildReport:
    """Test cases for engine.build_report"""

    def setup_method(self):
        self.report = engine.build_report(scenario_assessment(), scenario_profile(), now=FIXED_NOW)

    def test_report_wires_every_stage(self):
        assert self.report.assessment_id == "assess_001"
        assert self.report.risk_analysis.risk_score == 50
        assert self.report.recommendations.ai_generated is False
        assert [r.id for r in self.report.recommendations.recommendations] == ["rec_0", "rec_1", "rec_2"]
        assert self.report.generated_date == FIXED_NOW

    def test_executive_summary(self):
        summary = self.report.executive_summary
        assert summary.startswith("ERGONOMIC ASSESSMENT EXECUTIVE SUMMARY")
        assert "Assessment Date: 2026-02-27" in summary
        assert "Overall Risk Level: HIGH" in summary
        assert "Risk Score: 50/100" in summary
        assert "Primary risk factors identified: Poor Posture Alignment, Existing Discomfort/Pain, " \
               "Suboptimal Workspace Setup" in summary
        assert "- Total recommendations: 3" in summary
        assert summary.endswith("This assessment was generated using standard protocols.")

    def test_report_is_deterministic(self):
        again = engine.build_report(scenario_assessment(), scenario_profile(), now=FIXED_NOW)
        assert again == self.report


class TestSummarize:
    """Test cases for engine.summarize"""

    def test_scenario_summary(self):
        analysis = engine.score(scenario_assessment(), scenario_profile(), now=FIXED_NOW)
        text = engine.summarize(analysis)
        assert text.startswith("Risk Level: HIGH (Score: 50/100)")
        assert "Primary concerns: Poor Posture Alignment" in text
        assert text.endswith("Recommended action timeframe: Immediate attention required within 1 week")

    def test_low_risk_summary_omits_concerns(self):
        analysis = engine.score(make_assessment(), profile_data(), now=FIXED_NOW)
        text = engine.summarize(analysis)
        assert "Primary concerns" not in text
        assert "Preventive measures recommended" in text


class TestRecommendationEntryPoints:
    """Test cases for the recommendation helpers exposed by the engine"""

    def setup_method(self):
        assessment = scenario_assessment()
        analysis = engine.score(assessment, scenario_profile(), now=FIXED_NOW)
        self.recs = engine.synthesize_recommendations(assessment, analysis)

    def test_filter_accepts_dict(self):
        filtered = engine.filter_recommendations(self.recs, {"type": "posture"})
        assert filtered
        assert all(r.type.value == "posture" for r in filtered)

    def test_filter_rejects_unknown_value(self):
        with pytest.raises(InvalidAssessmentError):
            engine.filter_recommendations(self.recs, {"priority": "urgent"})

    def test_rank_accepts_dicts(self):
        payload = [r.model_dump(by_alias=True) for r in self.recs]
        ranked = engine.rank_recommendations(payload)
        assert sorted(r.id for r in ranked) == sorted(r.id for r in self.recs)


class TestHistoryEntryPoints:
    """Test cases for trend and improvement helpers"""

    def test_trend_from_dicts(self):
        history = [
            {"date": "2026-01-01T00:00:00Z", "score": 70},
            {"date": "2026-01-31T00:00:00Z", "score": 40},
        ]
        result = engine.trend(history)
        assert result.trend.value == "improving"
        assert result.change_rate == pytest.approx(1.0)

    def test_improvement(self):
        result = engine.improvement(80, 60)
        assert result.percentage == 25
        assert result.trend.value == "improving"

    def test_trend_mixes_naive_and_aware_dates(self):
        history = [
            {"date": "2026-01-31T00:00:00Z", "score": 40},
            {"date": "2026-01-01T00:00:00", "score": 70},
        ]
        result = engine.trend(history)
        assert result.trend.value == "improving"
        assert result.change_rate == pytest.approx(1.0)
        assert [p.score for p in result.risk_progression] == [70, 40]


class TestResultOwnership:
    """Results carry their own list copies"""

    def test_analyses_do_not_share_lists(self):
        first = engine.score(scenario_assessment(), scenario_profile(), now=FIXED_NOW)
        second = engine.score(scenario_assessment(), scenario_profile(), now=FIXED_NOW)
        first.factors.clear()
        first.priority_areas.append("extra")

        assert len(second.factors) == 4
        assert "extra" not in second.priority_areas
