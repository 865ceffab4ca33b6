"""Early-warning rules for integration trackers.

Rules are evaluated independently, in table order; each returns a message or
``None``.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Callable

from liftout_health.integration_tracker import IntegrationTracker


WarningRule = Callable[[IntegrationTracker], str | None]

PRODUCTIVITY_DROP_THRESHOLD = -10
CULTURAL_FIT_WARNING_FLOOR = 70
MAX_TROUBLED_MILESTONES = 2


def _rule_productivity_decline(tracker: IntegrationTracker) -> str | None:
    """Velocity fell by more than 10 between the last two periods."""
    recent = tracker.performance_metrics.productivity[-2:]
    if len(recent) < 2:
        return None
    previous, latest = recent
    if latest.velocity_score - previous.velocity_score < PRODUCTIVITY_DROP_THRESHOLD:
        return "Declining productivity trend detected"
    return None


def _rule_cultural_fit(tracker: IntegrationTracker) -> str | None:
    if tracker.cultural_integration.cultural_fit_score < CULTURAL_FIT_WARNING_FLOOR:
        return "Cultural integration concerns identified"
    return None


def _rule_troubled_milestones(tracker: IntegrationTracker) -> str | None:
    troubled = [m for m in tracker.milestones if m.status in ("delayed", "at_risk")]
    if len(troubled) > MAX_TROUBLED_MILESTONES:
        return f"{len(troubled)} milestones are delayed or at risk"
    return None


def _rule_high_impact_risks(tracker: IntegrationTracker) -> str | None:
    """Count identified/monitoring risks with high impact."""
    pending = [
        rf for rf in tracker.risk_factors
        if rf.status in ("identified", "monitoring") and rf.impact == "high"
    ]
    if pending:
        return f"{len(pending)} high-impact risks require attention"
    return None


WARNING_RULES: list[WarningRule] = [
    _rule_productivity_decline,
    _rule_cultural_fit,
    _rule_troubled_milestones,
    _rule_high_impact_risks,
]


def generate_early_warnings(
    tracker: IntegrationTracker,
    rules: list[WarningRule] | None = None,
) -> list[str]:
    """Return the warning messages that fire for *tracker*, in rule order."""
    active = WARNING_RULES if rules is None else rules
    warnings: list[str] = []
    for rule in active:
        message = rule(tracker)
        if message is not None:
            warnings.append(message)
    return warnings
