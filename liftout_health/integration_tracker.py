"""Integration tracker models for a placed team.

The tracker accumulates phase progress, metric series, risks and milestones
over the life of a liftout. Snapshots are frozen; updates go through
``liftout_health.tracker_updates`` which returns new snapshots.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------
IntegrationPhaseId = Literal[
    "pre_boarding",
    "onboarding",
    "team_formation",
    "productivity_ramp",
    "optimization",
    "full_integration",
]
PhaseStatus = Literal["not_started", "in_progress", "completed", "delayed"]
TrackerStatus = Literal["pre_start", "onboarding", "integration", "stabilization", "optimization", "completed"]
RiskFactorCategory = Literal["retention", "performance", "cultural", "business", "technical"]
RiskLevel = Literal["low", "medium", "high"]
RiskFactorSeverity = Literal["low", "medium", "high", "critical"]
RiskFactorStatus = Literal["identified", "monitoring", "mitigating", "resolved", "escalated"]
MilestoneStatus = Literal["pending", "in_progress", "completed", "delayed", "at_risk"]
RetentionRisk = Literal["low", "medium", "high"]


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------
class PhaseTracker(_Snapshot):
    """Progress of one integration phase."""

    phase: IntegrationPhaseId
    name: str
    description: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    target_duration_days: int = Field(default=0, ge=0)
    actual_duration_days: int | None = Field(default=None, ge=0)
    status: PhaseStatus = "not_started"
    progress: float = Field(default=0, ge=0, le=100)


# ---------------------------------------------------------------------------
# Performance metrics
# ---------------------------------------------------------------------------
class ProductivityMetric(_Snapshot):
    period: str
    tasks_completed: int = Field(default=0, ge=0)
    projects_delivered: int = Field(default=0, ge=0)
    hours_worked: float = Field(default=0, ge=0)
    utilization_rate: float = Field(default=0, ge=0, le=100)
    velocity_score: float = Field(ge=0)
    benchmark_comparison: float = 0


class QualityMetric(_Snapshot):
    period: str
    code_quality_score: float | None = Field(default=None, ge=0, le=10)
    bug_rate: float = Field(default=0, ge=0)
    customer_satisfaction_score: float = Field(ge=0, le=10)
    peer_review_score: float = Field(default=0, ge=0, le=10)
    accuracy_rate: float = Field(default=0, ge=0, le=100)
    rework_rate: float = Field(default=0, ge=0, le=100)


class DeliveryMetric(_Snapshot):
    period: str
    on_time_delivery: float = Field(ge=0, le=100)
    budget_compliance: float = Field(default=0, ge=0, le=100)
    scope_compliance: float = Field(default=0, ge=0, le=100)
    stakeholder_satisfaction: float = Field(default=0, ge=0, le=10)
    client_feedback_score: float = Field(default=0, ge=0, le=10)


class PerformanceTracker(_Snapshot):
    """Metric series, each ordered oldest → newest by period."""

    productivity: list[ProductivityMetric] = Field(default_factory=list)
    quality: list[QualityMetric] = Field(default_factory=list)
    delivery: list[DeliveryMetric] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Cultural integration
# ---------------------------------------------------------------------------
class CultureShockIndicator(_Snapshot):
    indicator: str
    severity: Literal["mild", "moderate", "severe"]
    frequency: Literal["rare", "occasional", "frequent"]
    trend: Literal["improving", "stable", "worsening"]
    description: str = ""
    recommended_actions: list[str] = Field(default_factory=list)


class CulturalFeedback(_Snapshot):
    source: Literal["team_member", "manager", "peer", "client", "hr"]
    feedback_type: Literal["positive", "constructive", "concern"]
    category: Literal["communication", "collaboration", "values_alignment", "work_style"]
    feedback: str
    action_taken: str | None = None
    date: datetime


class CulturalIntegrationTracker(_Snapshot):
    cultural_fit_score: float = Field(ge=0, le=100)
    network_integration: float = Field(default=0, ge=0, le=100)
    culture_shock_indicators: list[CultureShockIndicator] = Field(default_factory=list)
    cultural_feedback: list[CulturalFeedback] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Business results
# ---------------------------------------------------------------------------
class RevenueMetric(_Snapshot):
    period: str
    direct_revenue: float = 0
    indirect_revenue: float = 0
    revenue_growth: float
    new_client_revenue: float = 0
    expanded_client_revenue: float = 0
    projected_annual_impact: float = 0


class CostMetric(_Snapshot):
    category: Literal["integration", "training", "infrastructure", "support", "overhead"]
    actual_cost: float = Field(ge=0)
    budgeted_cost: float = Field(ge=0)
    variance: float = 0
    cost_per_employee: float = Field(default=0, ge=0)
    one_time_costs: float = Field(default=0, ge=0)
    recurring_costs: float = Field(default=0, ge=0)


class ROIMetric(_Snapshot):
    period: str
    total_investment: float = Field(default=0, ge=0)
    total_returns: float = 0
    roi: float
    payback_period_months: float = Field(default=0, ge=0)
    npv: float = 0
    irr: float = 0
    risk_adjusted_return: float = 0


class MarketMetric(_Snapshot):
    new_markets_entered: int = Field(default=0, ge=0)
    market_share_gain: float = 0
    competitive_advantage: list[str] = Field(default_factory=list)
    brand_impact: float = Field(default=0, ge=0, le=10)
    market_reception: float = Field(default=0, ge=0, le=10)


class InnovationMetric(_Snapshot):
    new_products_launched: int = Field(default=0, ge=0)
    patents_applied: int = Field(default=0, ge=0)
    process_improvements: int = Field(default=0, ge=0)
    innovation_index: float = Field(default=0, ge=0, le=100)
    r_and_d_efficiency: float = 0


class ClientMetric(_Snapshot):
    new_clients_acquired: int = Field(default=0, ge=0)
    client_retention_rate: float = Field(default=0, ge=0, le=100)
    client_satisfaction_score: float = Field(ge=0, le=10)
    upsell_rate: float = Field(default=0, ge=0, le=100)
    referral_rate: float = Field(default=0, ge=0, le=100)
    client_lifetime_value: float = Field(default=0, ge=0)


class BusinessResultsTracker(_Snapshot):
    """Business metric series; entry 0 is the most recent snapshot."""

    revenue_metrics: list[RevenueMetric] = Field(default_factory=list)
    cost_metrics: list[CostMetric] = Field(default_factory=list)
    roi_metrics: list[ROIMetric] = Field(default_factory=list)
    market_metrics: list[MarketMetric] = Field(default_factory=list)
    innovation_metrics: list[InnovationMetric] = Field(default_factory=list)
    client_metrics: list[ClientMetric] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Risks & milestones
# ---------------------------------------------------------------------------
class RiskFactor(_Snapshot):
    """An entry in the integration risk register."""

    id: str = Field(..., min_length=1)
    category: RiskFactorCategory
    risk: str
    probability: RiskLevel
    impact: RiskLevel
    severity: RiskFactorSeverity
    description: str = ""
    mitigation_strategies: list[str] = Field(default_factory=list)
    early_warning_signals: list[str] = Field(default_factory=list)
    responsible: str = ""
    status: RiskFactorStatus = "identified"


class IntegrationMilestone(_Snapshot):
    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    phase: IntegrationPhaseId
    target_date: datetime
    actual_date: datetime | None = None
    status: MilestoneStatus = "pending"
    completion_percentage: float = Field(default=0, ge=0, le=100)
    business_impact: Literal["low", "medium", "high", "critical"] = "medium"


# ---------------------------------------------------------------------------
# Tracker
# ---------------------------------------------------------------------------
class IntegrationTracker(_Snapshot):
    """Longitudinal record of a placed team's integration."""

    id: str = Field(..., min_length=1)
    liftout_id: str = Field(..., min_length=1)
    team_id: str = Field(..., min_length=1)
    company_id: str = Field(..., min_length=1)
    team_name: str = ""
    company_name: str = ""
    start_date: datetime
    current_phase: IntegrationPhaseId = "pre_boarding"
    phases: list[PhaseTracker] = Field(default_factory=list)
    performance_metrics: PerformanceTracker = Field(default_factory=PerformanceTracker)
    cultural_integration: CulturalIntegrationTracker
    business_results: BusinessResultsTracker = Field(default_factory=BusinessResultsTracker)
    risk_factors: list[RiskFactor] = Field(default_factory=list)
    milestones: list[IntegrationMilestone] = Field(default_factory=list)

    # Derived; written only by apply_health_report
    health_score: int = Field(default=0, ge=0, le=100)
    retention_risk: RetentionRisk = "low"
    early_warnings: list[str] = Field(default_factory=list)

    status: TrackerStatus = "pre_start"
    overall_progress: float = Field(default=0, ge=0, le=100)
