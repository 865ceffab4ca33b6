"""Tests for liftout_health/culture_profile.py and integration_tracker.py models."""

from pydantic import ValidationError
import pytest

from liftout_health.culture_profile import CULTURE_DIMENSION_FIELDS, CoreValue, CultureDimensions
from liftout_health.fixtures import build_culture_profile, build_minimal_tracker, build_team_profile
from liftout_health.integration_tracker import ClientMetric, IntegrationTracker, ProductivityMetric, QualityMetric


class TestCultureDimensions:
    def test_eight_dimensions(self):
        assert len(CULTURE_DIMENSION_FIELDS) == 8
        assert CULTURE_DIMENSION_FIELDS[0] == "power_distance"

    def test_out_of_range_rejected(self):
        values = {name: 50 for name in CULTURE_DIMENSION_FIELDS}
        values["risk_tolerance"] = 101
        with pytest.raises(ValidationError):
            CultureDimensions(**values)

    def test_negative_rejected(self):
        values = {name: 50 for name in CULTURE_DIMENSION_FIELDS}
        values["power_distance"] = -1
        with pytest.raises(ValidationError):
            CultureDimensions(**values)


class TestCoreValue:
    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            CoreValue(id="v", name="Speed", importance=50, category="speed")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            CoreValue(id="v", name="", importance=50, category="quality")


class TestCultureProfile:
    def test_frozen(self):
        profile = build_team_profile()
        with pytest.raises(ValidationError):
            profile.confidence_level = 10

    def test_team_dynamics_allowed_on_team(self):
        assert build_team_profile().team_dynamics is not None

    def test_team_dynamics_rejected_on_company(self):
        dynamics = build_team_profile().team_dynamics
        with pytest.raises(ValidationError, match="team_dynamics is only allowed on team profiles"):
            build_culture_profile("company", team_dynamics=dynamics)

    def test_unknown_leadership_approach_rejected(self):
        with pytest.raises(ValidationError):
            build_culture_profile("team", leadership_style={
                "approach": "charismatic", "accessibility": 50, "supportiveness": 50,
                "vision_communication": 50, "empowerment": 50,
            })

    def test_unknown_entity_type_rejected(self):
        with pytest.raises(ValidationError):
            build_culture_profile("division")


class TestTrackerModels:
    def test_velocity_required(self):
        with pytest.raises(ValidationError):
            ProductivityMetric(period="2025-01")

    def test_nan_roi_rejected(self):
        with pytest.raises(ValidationError):
            build_minimal_tracker(business_results={"roi_metrics": [{"period": "2025-01", "roi": float("nan")}]})

    def test_inf_velocity_rejected(self):
        with pytest.raises(ValidationError):
            ProductivityMetric(period="2025-01", velocity_score=float("inf"))

    def test_nan_revenue_growth_from_json_rejected(self):
        with pytest.raises(ValidationError):
            IntegrationTracker.model_validate_json(
                '{"id": "t", "liftout_id": "l", "team_id": "a", "company_id": "b",'
                ' "start_date": "2025-01-01T00:00:00Z",'
                ' "cultural_integration": {"cultural_fit_score": 80},'
                ' "business_results": {"revenue_metrics": [{"period": "2025-01", "revenue_growth": "NaN"}]}}'
            )

    def test_non_finite_dimension_rejected(self):
        values = {name: 50 for name in CULTURE_DIMENSION_FIELDS}
        values["power_distance"] = float("nan")
        with pytest.raises(ValidationError):
            CultureDimensions(**values)

    def test_satisfaction_on_ten_point_scale(self):
        with pytest.raises(ValidationError):
            QualityMetric(period="2025-01", customer_satisfaction_score=11)
        with pytest.raises(ValidationError):
            ClientMetric(client_satisfaction_score=10.5)

    def test_cultural_fit_range(self):
        with pytest.raises(ValidationError):
            build_minimal_tracker(cultural_integration={"cultural_fit_score": 120})

    def test_unknown_milestone_status_rejected(self):
        with pytest.raises(ValidationError):
            build_minimal_tracker(milestones=[{
                "id": "m1", "name": "Kickoff", "phase": "onboarding",
                "target_date": "2025-01-01T00:00:00Z", "status": "skipped",
            }])

    def test_defaults(self):
        tracker = build_minimal_tracker()
        assert tracker.status == "pre_start"
        assert tracker.current_phase == "pre_boarding"
        assert tracker.health_score == 0
        assert tracker.retention_risk == "low"
        assert tracker.performance_metrics.productivity == []
