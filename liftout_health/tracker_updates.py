"""Immutable update helpers for integration trackers.

Every helper returns a new tracker snapshot via ``model_copy``; the input is
never modified. Apart from ``create_tracker``, health fields are not touched
here; call ``apply_health_report`` after applying updates.
"""

from __future__ import annotations

from datetime import datetime
import logging

from liftout_health.engine.culture_compatibility import CompatibilityAssessment
from liftout_health.engine.culture_signals import CultureRisk
from liftout_health.engine.health_scoring import apply_health_report
from liftout_health.integration_tracker import (
    ClientMetric,
    CulturalIntegrationTracker,
    DeliveryMetric,
    IntegrationTracker,
    MilestoneStatus,
    ProductivityMetric,
    QualityMetric,
    RevenueMetric,
    RiskFactor,
    RiskFactorCategory,
    RiskFactorStatus,
    RiskLevel,
    ROIMetric,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifecycles
# ---------------------------------------------------------------------------
RISK_TRANSITIONS: dict[str, set[str]] = {
    "identified": {"monitoring", "mitigating", "resolved", "escalated"},
    "monitoring": {"mitigating", "resolved", "escalated"},
    "mitigating": {"resolved", "escalated"},
    "escalated": {"mitigating", "resolved"},
    "resolved": set(),
}

MILESTONE_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"in_progress", "delayed", "at_risk"},
    "in_progress": {"completed", "delayed", "at_risk"},
    "delayed": {"in_progress", "completed", "at_risk"},
    "at_risk": {"in_progress", "completed", "delayed"},
    "completed": set(),
}


# ---------------------------------------------------------------------------
# Seeding from a culture assessment
# ---------------------------------------------------------------------------
_RISK_CATEGORY_MAP: dict[str, RiskFactorCategory] = {
    "values": "cultural",
    "communication": "cultural",
    "leadership": "cultural",
    "work_style": "cultural",
    "performance": "performance",
}

_SEVERITY_TO_IMPACT: dict[str, RiskLevel] = {
    "critical": "high",
    "high": "high",
    "medium": "medium",
    "low": "low",
}


def _probability_level(probability: int) -> RiskLevel:
    if probability < 40:
        return "low"
    if probability < 70:
        return "medium"
    return "high"


def culture_risk_to_factor(risk: CultureRisk) -> RiskFactor:
    """Convert a detected culture risk into an ``identified`` register entry."""
    return RiskFactor(
        id=f"culture-{risk.id}",
        category=_RISK_CATEGORY_MAP[risk.category],
        risk=risk.description,
        probability=_probability_level(risk.probability),
        impact=_SEVERITY_TO_IMPACT[risk.severity],
        severity=risk.severity,
        description=risk.impact,
        mitigation_strategies=list(risk.mitigation_strategies),
        status="identified",
    )


def seed_risk_register(assessment: CompatibilityAssessment) -> list[RiskFactor]:
    """Initial risk register for a placement, one entry per culture risk."""
    return [culture_risk_to_factor(r) for r in assessment.risk_areas]


def create_tracker(
    tracker_id: str,
    liftout_id: str,
    assessment: CompatibilityAssessment,
    team_id: str,
    company_id: str,
    start_date: datetime,
    cultural_fit_score: float | None = None,
) -> IntegrationTracker:
    """Open a ``pre_start`` tracker seeded from a compatibility assessment.

    The cultural fit score defaults to the assessment's overall score. Health
    fields are computed for the opening snapshot.
    """
    fit = assessment.overall_score if cultural_fit_score is None else cultural_fit_score
    tracker = IntegrationTracker(
        id=tracker_id,
        liftout_id=liftout_id,
        team_id=team_id,
        company_id=company_id,
        start_date=start_date,
        cultural_integration=CulturalIntegrationTracker(cultural_fit_score=fit),
        risk_factors=seed_risk_register(assessment),
    )
    logger.info("Created tracker %s with %d seeded risks", tracker_id, len(tracker.risk_factors))
    return apply_health_report(tracker)


# ---------------------------------------------------------------------------
# Metric series
# ---------------------------------------------------------------------------
def _with_performance(tracker: IntegrationTracker, **series: list) -> IntegrationTracker:
    metrics = tracker.performance_metrics.model_copy(update=series)
    return tracker.model_copy(update={"performance_metrics": metrics})


def _with_business(tracker: IntegrationTracker, **series: list) -> IntegrationTracker:
    results = tracker.business_results.model_copy(update=series)
    return tracker.model_copy(update={"business_results": results})


def append_productivity(tracker: IntegrationTracker, metric: ProductivityMetric) -> IntegrationTracker:
    return _with_performance(tracker, productivity=[*tracker.performance_metrics.productivity, metric])


def append_quality(tracker: IntegrationTracker, metric: QualityMetric) -> IntegrationTracker:
    return _with_performance(tracker, quality=[*tracker.performance_metrics.quality, metric])


def append_delivery(tracker: IntegrationTracker, metric: DeliveryMetric) -> IntegrationTracker:
    return _with_performance(tracker, delivery=[*tracker.performance_metrics.delivery, metric])


def record_revenue(tracker: IntegrationTracker, metric: RevenueMetric) -> IntegrationTracker:
    """Record the current revenue snapshot as entry 0 (the one business scoring reads)."""
    return _with_business(tracker, revenue_metrics=[metric, *tracker.business_results.revenue_metrics])


def record_roi(tracker: IntegrationTracker, metric: ROIMetric) -> IntegrationTracker:
    return _with_business(tracker, roi_metrics=[metric, *tracker.business_results.roi_metrics])


def record_client(tracker: IntegrationTracker, metric: ClientMetric) -> IntegrationTracker:
    return _with_business(tracker, client_metrics=[metric, *tracker.business_results.client_metrics])


def update_cultural_fit(tracker: IntegrationTracker, score: float) -> IntegrationTracker:
    cultural = CulturalIntegrationTracker(
        **{**tracker.cultural_integration.model_dump(), "cultural_fit_score": score}
    )
    return tracker.model_copy(update={"cultural_integration": cultural})


# ---------------------------------------------------------------------------
# Status lifecycles
# ---------------------------------------------------------------------------
def update_risk_status(
    tracker: IntegrationTracker,
    risk_id: str,
    status: RiskFactorStatus,
) -> IntegrationTracker:
    """Move one risk factor along identified → monitoring → mitigating → resolved | escalated."""
    idx = next((i for i, rf in enumerate(tracker.risk_factors) if rf.id == risk_id), None)
    if idx is None:
        raise ValueError(f"Risk factor '{risk_id}' not found")

    current = tracker.risk_factors[idx]
    if status not in RISK_TRANSITIONS[current.status]:
        raise ValueError(f"Invalid risk transition for '{risk_id}': {current.status} -> {status}")

    risks = [*tracker.risk_factors]
    risks[idx] = current.model_copy(update={"status": status})
    return tracker.model_copy(update={"risk_factors": risks})


def update_milestone_status(
    tracker: IntegrationTracker,
    milestone_id: str,
    status: MilestoneStatus,
    actual_date: datetime | None = None,
) -> IntegrationTracker:
    """Move one milestone along pending → in_progress → completed | delayed | at_risk."""
    idx = next((i for i, m in enumerate(tracker.milestones) if m.id == milestone_id), None)
    if idx is None:
        raise ValueError(f"Milestone '{milestone_id}' not found")

    current = tracker.milestones[idx]
    if status not in MILESTONE_TRANSITIONS[current.status]:
        raise ValueError(f"Invalid milestone transition for '{milestone_id}': {current.status} -> {status}")

    updates: dict[str, object] = {"status": status}
    if status == "completed":
        updates["completion_percentage"] = 100
        updates["actual_date"] = actual_date or current.target_date

    milestones = [*tracker.milestones]
    milestones[idx] = current.model_copy(update=updates)
    return tracker.model_copy(update={"milestones": milestones})
