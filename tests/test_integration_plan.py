"""Tests for liftout_health/engine/integration_plan.py."""

from datetime import datetime, timedelta, timezone

from liftout_health.engine.culture_signals import RISK_RULES
from liftout_health.engine.integration_plan import generate_integration_plan


PLANNED_AT = datetime(2025, 3, 1, tzinfo=timezone.utc)


class TestGenerateIntegrationPlan:
    def test_identity_and_timeline(self):
        plan = generate_integration_plan("team-a", "company-b", [], PLANNED_AT)
        assert plan.id == "integration-team-a-company-b"
        assert plan.timeline_days == 90

    def test_two_phases(self):
        plan = generate_integration_plan("t", "c", [], PLANNED_AT)
        assert [p.id for p in plan.phases] == ["phase-1", "phase-2"]
        assert [p.duration_days for p in plan.phases] == [30, 60]
        assert [a.id for a in plan.phases[0].activities] == ["cultural-immersion", "buddy-system"]
        assert [a.id for a in plan.phases[1].activities] == ["process-training"]

    def test_baseline_milestone_two_weeks_out(self):
        plan = generate_integration_plan("t", "c", [], PLANNED_AT)
        assert len(plan.milestones) == 1
        assert plan.milestones[0].name == "Cultural Baseline Established"
        assert plan.milestones[0].target_date == PLANNED_AT + timedelta(days=14)

    def test_resources(self):
        plan = generate_integration_plan("t", "c", [], PLANNED_AT)
        assert [(r.type, r.cost) for r in plan.resources] == [("facilitator", 50000), ("training_materials", 15000)]
        assert len(plan.success_metrics) == 3

    def test_risks_do_not_change_shape(self):
        risks = [rule.template for rule in RISK_RULES]
        with_risks = generate_integration_plan("t", "c", risks, PLANNED_AT)
        without = generate_integration_plan("t", "c", [], PLANNED_AT)
        assert with_risks == without

    def test_plans_are_independent(self):
        first = generate_integration_plan("t", "c", [], PLANNED_AT)
        first.phases[0].risks.append("extra")
        second = generate_integration_plan("t", "c", [], PLANNED_AT)
        assert "extra" not in second.phases[0].risks
