"""Tests for liftout_health/tracker_updates.py."""

from datetime import datetime, timezone

from pydantic import ValidationError
import pytest

from liftout_health.engine.culture_compatibility import assess_culture_compatibility
from liftout_health.engine.culture_signals import RISK_RULES
from liftout_health.engine.health_scoring import calculate_health_score, round_half_up
from liftout_health.fixtures import (
    build_company_profile,
    build_culture_profile,
    build_integration_tracker,
    build_minimal_tracker,
    build_team_profile,
)
from liftout_health.integration_tracker import (
    ClientMetric,
    DeliveryMetric,
    ProductivityMetric,
    QualityMetric,
    RevenueMetric,
    ROIMetric,
)
from liftout_health.tracker_updates import (
    append_delivery,
    append_productivity,
    append_quality,
    create_tracker,
    culture_risk_to_factor,
    record_client,
    record_revenue,
    record_roi,
    seed_risk_register,
    update_cultural_fit,
    update_milestone_status,
    update_risk_status,
)


START = datetime(2025, 4, 1, tzinfo=timezone.utc)
TARGET = datetime(2025, 5, 1, tzinfo=timezone.utc)


def _risky_assessment():
    team = build_culture_profile(
        "team",
        communication_style={"directness": 0, "formality": 50, "frequency": 50},
        decision_making={"centralization": 0, "speed": 50, "data_orientation": 50, "consensus_building": 50},
    )
    company = build_culture_profile(
        "company",
        communication_style={"directness": 100, "formality": 50, "frequency": 50},
        decision_making={"centralization": 100, "speed": 50, "data_orientation": 50, "consensus_building": 50},
    )
    return assess_culture_compatibility(team, company, assessed_at=START)


def _tracker_with_risk(status="identified"):
    return build_minimal_tracker(risk_factors=[{
        "id": "r1",
        "category": "cultural",
        "risk": "Values clash",
        "probability": "medium",
        "impact": "medium",
        "severity": "medium",
        "status": status,
    }])


def _tracker_with_milestone(status="pending"):
    return build_minimal_tracker(milestones=[{
        "id": "m1", "name": "Kickoff", "phase": "onboarding", "target_date": TARGET, "status": status,
    }])


class TestSeeding:
    def test_culture_risk_to_factor(self):
        factor = culture_risk_to_factor(RISK_RULES[0].template)
        assert factor.id == "culture-comm-directness"
        assert factor.category == "cultural"
        assert factor.probability == "high"
        assert factor.impact == "high"
        assert factor.severity == "high"
        assert factor.status == "identified"
        assert factor.description == RISK_RULES[0].template.impact

    def test_medium_probability(self):
        factor = culture_risk_to_factor(RISK_RULES[1].template)
        assert factor.probability == "medium"
        assert factor.impact == "medium"

    def test_seed_risk_register(self):
        register = seed_risk_register(_risky_assessment())
        assert [r.id for r in register] == ["culture-comm-directness", "culture-decision-centralization"]

    def test_create_tracker_defaults_fit_to_overall_score(self):
        assessment = assess_culture_compatibility(build_team_profile(), build_company_profile(), assessed_at=START)
        tracker = create_tracker("trk-1", "lo-1", assessment, "team-1", "company-1", START)
        assert tracker.status == "pre_start"
        assert tracker.current_phase == "pre_boarding"
        assert tracker.cultural_integration.cultural_fit_score == pytest.approx(assessment.overall_score)
        assert tracker.risk_factors == []

    def test_create_tracker_scores_opening_snapshot(self):
        assessment = assess_culture_compatibility(build_team_profile(), build_company_profile(), assessed_at=START)
        tracker = create_tracker("trk-1", "lo-1", assessment, "team-1", "company-1", START)
        # no performance data yet, so performance scores 0
        assert tracker.retention_risk == "high"
        assert tracker.health_score == calculate_health_score(tracker)
        assert tracker.health_score == round_half_up(assessment.overall_score * 0.25 + 20)
        assert tracker.early_warnings == []

    def test_create_tracker_warns_on_seeded_risks(self):
        tracker = create_tracker("trk-1", "lo-1", _risky_assessment(), "team-1", "company-1", START,
                                 cultural_fit_score=55)
        assert tracker.early_warnings == [
            "Cultural integration concerns identified",
            "1 high-impact risks require attention",
        ]

    def test_create_tracker_explicit_fit_and_seeded_risks(self):
        tracker = create_tracker("trk-1", "lo-1", _risky_assessment(), "team-1", "company-1", START,
                                 cultural_fit_score=55)
        assert tracker.cultural_integration.cultural_fit_score == 55
        assert len(tracker.risk_factors) == 2


class TestMetricSeries:
    def test_append_productivity_goes_to_end(self):
        tracker = build_integration_tracker()
        updated = append_productivity(tracker, ProductivityMetric(period="2025-03", velocity_score=70))
        assert [p.period for p in updated.performance_metrics.productivity] == ["2025-02", "2025-03"]
        assert len(tracker.performance_metrics.productivity) == 1

    def test_append_quality_and_delivery(self):
        tracker = build_minimal_tracker()
        tracker = append_quality(tracker, QualityMetric(period="2025-01", customer_satisfaction_score=7))
        tracker = append_delivery(tracker, DeliveryMetric(period="2025-01", on_time_delivery=88))
        assert len(tracker.performance_metrics.quality) == 1
        assert tracker.performance_metrics.delivery[0].on_time_delivery == 88

    def test_record_business_metrics_go_to_front(self):
        tracker = build_integration_tracker()
        tracker = record_revenue(tracker, RevenueMetric(period="2025-03", revenue_growth=40))
        tracker = record_roi(tracker, ROIMetric(period="2025-03", roi=50))
        tracker = record_client(tracker, ClientMetric(client_satisfaction_score=6))
        results = tracker.business_results
        assert [r.period for r in results.revenue_metrics] == ["2025-03", "2025-02"]
        assert results.roi_metrics[0].roi == 50
        assert results.client_metrics[0].client_satisfaction_score == 6

    def test_update_cultural_fit(self):
        tracker = build_integration_tracker()
        updated = update_cultural_fit(tracker, 72)
        assert updated.cultural_integration.cultural_fit_score == 72
        assert len(updated.cultural_integration.culture_shock_indicators) == 1
        assert tracker.cultural_integration.cultural_fit_score == 84

    def test_update_cultural_fit_rejects_out_of_range(self):
        with pytest.raises(ValidationError):
            update_cultural_fit(build_minimal_tracker(), 101)


class TestRiskStatus:
    def test_identified_to_monitoring(self):
        tracker = _tracker_with_risk()
        updated = update_risk_status(tracker, "r1", "monitoring")
        assert updated.risk_factors[0].status == "monitoring"
        assert tracker.risk_factors[0].status == "identified"

    def test_escalated_can_be_mitigated(self):
        updated = update_risk_status(_tracker_with_risk("escalated"), "r1", "mitigating")
        assert updated.risk_factors[0].status == "mitigating"

    def test_resolved_is_terminal(self):
        with pytest.raises(ValueError, match="Invalid risk transition for 'r1': resolved -> monitoring"):
            update_risk_status(_tracker_with_risk("resolved"), "r1", "monitoring")

    def test_no_going_back(self):
        with pytest.raises(ValueError, match="Invalid risk transition"):
            update_risk_status(_tracker_with_risk("mitigating"), "r1", "identified")

    def test_unknown_risk(self):
        with pytest.raises(ValueError, match="Risk factor 'nope' not found"):
            update_risk_status(_tracker_with_risk(), "nope", "monitoring")


class TestMilestoneStatus:
    def test_pending_to_in_progress(self):
        updated = update_milestone_status(_tracker_with_milestone(), "m1", "in_progress")
        assert updated.milestones[0].status == "in_progress"
        assert updated.milestones[0].actual_date is None

    def test_completion_sets_percentage_and_date(self):
        done_at = datetime(2025, 4, 28, tzinfo=timezone.utc)
        updated = update_milestone_status(_tracker_with_milestone("in_progress"), "m1", "completed", done_at)
        milestone = updated.milestones[0]
        assert milestone.status == "completed"
        assert milestone.completion_percentage == 100
        assert milestone.actual_date == done_at

    def test_completion_defaults_to_target_date(self):
        updated = update_milestone_status(_tracker_with_milestone("at_risk"), "m1", "completed")
        assert updated.milestones[0].actual_date == TARGET

    def test_pending_cannot_complete_directly(self):
        with pytest.raises(ValueError, match="Invalid milestone transition for 'm1': pending -> completed"):
            update_milestone_status(_tracker_with_milestone(), "m1", "completed")

    def test_completed_is_terminal(self):
        with pytest.raises(ValueError, match="Invalid milestone transition"):
            update_milestone_status(_tracker_with_milestone("completed"), "m1", "delayed")

    def test_unknown_milestone(self):
        with pytest.raises(ValueError, match="Milestone 'm9' not found"):
            update_milestone_status(_tracker_with_milestone(), "m9", "in_progress")
