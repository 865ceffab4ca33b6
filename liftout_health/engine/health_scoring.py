"""Integration health scoring for a placed team.

health = performance × 0.30 + cultural × 0.25 + business × 0.25 + milestones × 0.20
All sub-scores and the health score are rounded half-up to integers.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
import math

from pydantic import BaseModel, Field

from liftout_health.engine.early_warnings import generate_early_warnings
from liftout_health.integration_tracker import (
    BusinessResultsTracker,
    IntegrationMilestone,
    IntegrationTracker,
    PerformanceTracker,
    RetentionRisk,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class IntegrationHealthReport(BaseModel):
    """Recomputed health of one tracker snapshot."""

    health_score: int = Field(ge=0, le=100)
    retention_risk: RetentionRisk
    warnings: list[str] = Field(default_factory=list)
    performance_score: int
    cultural_score: float
    business_score: int
    milestone_score: int


# ---------------------------------------------------------------------------
# Weights & thresholds
# ---------------------------------------------------------------------------
HEALTH_WEIGHTS: dict[str, float] = {
    "performance": 0.30,
    "cultural": 0.25,
    "business": 0.25,
    "milestones": 0.20,
}

_HIGH_RISK_FLOOR = 60
_MEDIUM_RISK_FLOOR = 75
_ACTIVE_RISK_EXCLUDED = "resolved"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def round_half_up(value: float) -> int:
    """Round .5 upward, unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def _mean(values: Iterable[float]) -> float:
    """Mean of *values*; an empty series counts as 0."""
    items = list(values)
    return sum(items) / len(items) if items else 0.0


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------
def calculate_performance_score(metrics: PerformanceTracker) -> int:
    """Average of mean velocity, mean satisfaction (×10) and mean on-time delivery.

    Each mean spans the whole series. An empty series contributes 0 rather than
    failing, so sparse trackers score low instead of erroring.
    """
    productivity = _mean(p.velocity_score for p in metrics.productivity)
    quality = _mean(q.customer_satisfaction_score * 10 for q in metrics.quality)
    delivery = _mean(d.on_time_delivery for d in metrics.delivery)
    return round_half_up((productivity + quality + delivery) / 3)


def calculate_business_score(results: BusinessResultsTracker) -> int:
    """Average of capped ROI, capped revenue growth and client satisfaction (×10).

    NOTE: only entry 0 of each series is read, whereas performance averages the
    whole history. Business entries are treated as current-state snapshots; a
    missing entry contributes 0.
    """
    roi = min(results.roi_metrics[0].roi, 100) if results.roi_metrics else 0
    growth = min(results.revenue_metrics[0].revenue_growth, 100) if results.revenue_metrics else 0
    client = results.client_metrics[0].client_satisfaction_score * 10 if results.client_metrics else 0
    return round_half_up((roi + growth + client) / 3)


def calculate_milestone_score(milestones: list[IntegrationMilestone]) -> int:
    """Percentage of completed milestones; 100 when there are none."""
    if not milestones:
        return 100
    completed = sum(1 for m in milestones if m.status == "completed")
    return round_half_up(completed / len(milestones) * 100)


def calculate_health_score(tracker: IntegrationTracker) -> int:
    score = (
        calculate_performance_score(tracker.performance_metrics) * HEALTH_WEIGHTS["performance"]
        + tracker.cultural_integration.cultural_fit_score * HEALTH_WEIGHTS["cultural"]
        + calculate_business_score(tracker.business_results) * HEALTH_WEIGHTS["business"]
        + calculate_milestone_score(tracker.milestones) * HEALTH_WEIGHTS["milestones"]
    )
    return max(0, min(100, round_half_up(score)))


def assess_retention_risk(tracker: IntegrationTracker) -> RetentionRisk:
    """Classify the chance the team leaves early.

    Only unresolved retention-category risk factors count.
    """
    retention_risks = [
        rf for rf in tracker.risk_factors
        if rf.category == "retention" and rf.status != _ACTIVE_RISK_EXCLUDED
    ]
    critical = sum(1 for rf in retention_risks if rf.severity == "critical")
    high = sum(1 for rf in retention_risks if rf.severity == "high")

    cultural_fit = tracker.cultural_integration.cultural_fit_score
    performance = calculate_performance_score(tracker.performance_metrics)

    if critical > 0 or cultural_fit < _HIGH_RISK_FLOOR or performance < _HIGH_RISK_FLOOR:
        return "high"
    if high > 1 or cultural_fit < _MEDIUM_RISK_FLOOR or performance < _MEDIUM_RISK_FLOOR:
        return "medium"
    return "low"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def score_integration_health(tracker: IntegrationTracker) -> IntegrationHealthReport:
    """Recompute health score, retention risk and early warnings for *tracker*."""
    report = IntegrationHealthReport(
        health_score=calculate_health_score(tracker),
        retention_risk=assess_retention_risk(tracker),
        warnings=generate_early_warnings(tracker),
        performance_score=calculate_performance_score(tracker.performance_metrics),
        cultural_score=tracker.cultural_integration.cultural_fit_score,
        business_score=calculate_business_score(tracker.business_results),
        milestone_score=calculate_milestone_score(tracker.milestones),
    )
    logger.debug(
        "Scored tracker %s: health=%d retention=%s warnings=%d",
        tracker.id, report.health_score, report.retention_risk, len(report.warnings),
    )
    return report


def apply_health_report(tracker: IntegrationTracker) -> IntegrationTracker:
    """Return a copy of *tracker* with its derived health fields recomputed."""
    report = score_integration_health(tracker)
    return tracker.model_copy(update={
        "health_score": report.health_score,
        "retention_risk": report.retention_risk,
        "early_warnings": list(report.warnings),
    })
