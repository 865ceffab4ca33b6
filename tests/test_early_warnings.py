"""Tests for liftout_health/engine/early_warnings.py."""

from datetime import datetime, timezone

from liftout_health.engine.early_warnings import WARNING_RULES, generate_early_warnings
from liftout_health.fixtures import build_integration_tracker, build_minimal_tracker


TARGET = datetime(2025, 3, 1, tzinfo=timezone.utc)


def _velocity_series(*scores):
    return {
        "productivity": [
            {"period": f"2025-{i + 1:02d}", "velocity_score": score} for i, score in enumerate(scores)
        ],
    }


def _milestone(id, status):
    return {"id": id, "name": id, "phase": "team_formation", "target_date": TARGET, "status": status}


def _risk(id, impact, status):
    return {
        "id": id,
        "category": "business",
        "risk": "Client churn",
        "probability": "medium",
        "impact": impact,
        "severity": "medium",
        "status": status,
    }


class TestProductivityDecline:
    def test_drop_of_15_warns(self):
        tracker = build_minimal_tracker(performance_metrics=_velocity_series(80, 65))
        assert "Declining productivity trend detected" in generate_early_warnings(tracker)

    def test_drop_of_5_does_not_warn(self):
        tracker = build_minimal_tracker(performance_metrics=_velocity_series(80, 75))
        assert generate_early_warnings(tracker) == []

    def test_drop_of_exactly_10_does_not_warn(self):
        tracker = build_minimal_tracker(performance_metrics=_velocity_series(80, 70))
        assert generate_early_warnings(tracker) == []

    def test_only_last_two_periods_compared(self):
        tracker = build_minimal_tracker(performance_metrics=_velocity_series(95, 60, 62))
        assert generate_early_warnings(tracker) == []

    def test_single_period_does_not_warn(self):
        tracker = build_minimal_tracker(performance_metrics=_velocity_series(10))
        assert generate_early_warnings(tracker) == []


class TestCulturalFit:
    def test_below_70_warns(self):
        tracker = build_minimal_tracker(cultural_integration={"cultural_fit_score": 69.9})
        assert generate_early_warnings(tracker) == ["Cultural integration concerns identified"]

    def test_at_70_does_not_warn(self):
        tracker = build_minimal_tracker(cultural_integration={"cultural_fit_score": 70})
        assert generate_early_warnings(tracker) == []


class TestTroubledMilestones:
    def test_three_troubled_milestones_warn(self):
        tracker = build_minimal_tracker(milestones=[
            _milestone("m1", "delayed"),
            _milestone("m2", "at_risk"),
            _milestone("m3", "delayed"),
        ])
        assert generate_early_warnings(tracker) == ["3 milestones are delayed or at risk"]

    def test_two_troubled_milestones_do_not_warn(self):
        tracker = build_minimal_tracker(milestones=[
            _milestone("m1", "delayed"),
            _milestone("m2", "at_risk"),
            _milestone("m3", "completed"),
        ])
        assert generate_early_warnings(tracker) == []


class TestHighImpactRisks:
    def test_open_high_impact_risks_warn(self):
        tracker = build_minimal_tracker(risk_factors=[
            _risk("r1", "high", "identified"),
            _risk("r2", "high", "monitoring"),
            _risk("r3", "medium", "identified"),
        ])
        assert generate_early_warnings(tracker) == ["2 high-impact risks require attention"]

    def test_mitigating_and_escalated_not_counted(self):
        tracker = build_minimal_tracker(risk_factors=[
            _risk("r1", "high", "mitigating"),
            _risk("r2", "high", "escalated"),
            _risk("r3", "high", "resolved"),
        ])
        assert generate_early_warnings(tracker) == []


class TestGenerateEarlyWarnings:
    def test_fixture_tracker_has_no_warnings(self):
        assert generate_early_warnings(build_integration_tracker()) == []

    def test_all_rules_fire_in_table_order(self):
        tracker = build_minimal_tracker(
            performance_metrics=_velocity_series(90, 50),
            cultural_integration={"cultural_fit_score": 40},
            milestones=[_milestone(f"m{i}", "at_risk") for i in range(3)],
            risk_factors=[_risk("r1", "high", "identified")],
        )
        assert generate_early_warnings(tracker) == [
            "Declining productivity trend detected",
            "Cultural integration concerns identified",
            "3 milestones are delayed or at risk",
            "1 high-impact risks require attention",
        ]
        assert len(WARNING_RULES) == 4

    def test_custom_rules(self):
        tracker = build_minimal_tracker()
        rules = [lambda t: None, lambda t: f"Tracker {t.id} checked"]
        assert generate_early_warnings(tracker, rules=rules) == ["Tracker tracker-test checked"]
