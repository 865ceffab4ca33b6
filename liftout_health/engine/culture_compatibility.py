"""Culture compatibility scoring between a team and a hiring company.

Four factors feed the overall score: culture dimensions, core values,
communication style and leadership approach.

All functions are *pure*: no side-effects, no I/O.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Literal

from pydantic import BaseModel, Field

from liftout_health.culture_profile import (
    CULTURE_DIMENSION_FIELDS,
    CommunicationStyle,
    CoreValue,
    CultureDimensions,
    CultureProfile,
    LeadershipApproach,
)
from liftout_health.engine.culture_signals import (
    CultureRisk,
    CultureStrength,
    detect_culture_risks,
    detect_culture_strengths,
)
from liftout_health.engine.dimension_breakdown import (
    DimensionCompatibility,
    calculate_dimension_breakdown,
)
from liftout_health.engine.integration_plan import IntegrationPlan, generate_integration_plan


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
CompatibilityLevel = Literal["excellent", "good", "moderate", "poor", "mismatched"]


class CompatibilityFactors(BaseModel):
    """The four factor scores behind an overall compatibility score."""

    dimensions: float = Field(ge=0, le=100)
    values: float = Field(ge=0, le=100)
    communication: float = Field(ge=0, le=100)
    leadership: float = Field(ge=0, le=100)


class CompatibilityAssessment(BaseModel):
    """Derived comparison of a team profile against a company profile."""

    id: str
    team_profile_id: str
    company_profile_id: str
    overall_score: float = Field(ge=0, le=100)
    compatibility_level: CompatibilityLevel
    factor_scores: CompatibilityFactors
    dimension_compatibility: list[DimensionCompatibility]
    risk_areas: list[CultureRisk]
    strength_areas: list[CultureStrength]
    integration_plan: IntegrationPlan
    assessment_date: datetime
    confidence_level: float = Field(ge=0, le=100)


# ---------------------------------------------------------------------------
# Scoring tables
# ---------------------------------------------------------------------------
COMPATIBILITY_WEIGHTS: dict[str, float] = {
    "dimensions": 0.30,
    "values": 0.25,
    "communication": 0.25,
    "leadership": 0.20,
}

NEUTRAL_VALUE_SCORE = 50.0
SAME_LEADERSHIP_SCORE = 90
UNLISTED_LEADERSHIP_SCORE = 50

# Stored once per unordered pair, so lookups are symmetric.
_LEADERSHIP_MATRIX: dict[frozenset[str], int] = {
    frozenset({"democratic", "transformational"}): 85,
    frozenset({"democratic", "servant"}): 80,
    frozenset({"democratic", "laissez_faire"}): 60,
    frozenset({"democratic", "autocratic"}): 30,
    frozenset({"transformational", "servant"}): 75,
    frozenset({"transformational", "laissez_faire"}): 50,
    frozenset({"transformational", "autocratic"}): 40,
    frozenset({"servant", "laissez_faire"}): 65,
    frozenset({"servant", "autocratic"}): 25,
    frozenset({"laissez_faire", "autocratic"}): 20,
}

# (minimum score, level), checked top-down
_LEVEL_THRESHOLDS: list[tuple[float, CompatibilityLevel]] = [
    (85, "excellent"),
    (70, "good"),
    (55, "moderate"),
    (40, "poor"),
]


# ---------------------------------------------------------------------------
# Factor scores
# ---------------------------------------------------------------------------
def calculate_dimension_compatibility(team: CultureDimensions, company: CultureDimensions) -> float:
    """Unweighted mean of ``max(0, 100 - gap)`` over all eight dimensions."""
    total = 0.0
    for name in CULTURE_DIMENSION_FIELDS:
        gap = abs(getattr(team, name) - getattr(company, name))
        total += max(0, 100 - gap)
    return total / len(CULTURE_DIMENSION_FIELDS)


def calculate_value_compatibility(team_values: list[CoreValue], company_values: list[CoreValue]) -> float:
    """Mean importance alignment over team values with a same-category company value.

    Returns the neutral 50 when either side has no values or no categories match.
    """
    if not team_values or not company_values:
        return NEUTRAL_VALUE_SCORE

    alignments: list[float] = []
    for value in team_values:
        match = next((cv for cv in company_values if cv.category == value.category), None)
        if match is None:
            continue
        alignments.append(max(0, 100 - abs(value.importance - match.importance)))

    return sum(alignments) / len(alignments) if alignments else NEUTRAL_VALUE_SCORE


def calculate_communication_compatibility(team: CommunicationStyle, company: CommunicationStyle) -> float:
    gaps = [
        abs(team.directness - company.directness),
        abs(team.formality - company.formality),
        abs(team.frequency - company.frequency),
    ]
    return max(0, 100 - sum(gaps) / len(gaps))


def calculate_leadership_compatibility(team: LeadershipApproach, company: LeadershipApproach) -> int:
    """Score two leadership approaches; same approach scores 90, never 100."""
    if team == company:
        return SAME_LEADERSHIP_SCORE
    return _LEADERSHIP_MATRIX.get(frozenset({team, company}), UNLISTED_LEADERSHIP_SCORE)


def get_compatibility_level(score: float) -> CompatibilityLevel:
    for threshold, level in _LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return "mismatched"


def calculate_overall_score(factors: CompatibilityFactors) -> float:
    return (
        factors.dimensions * COMPATIBILITY_WEIGHTS["dimensions"]
        + factors.values * COMPATIBILITY_WEIGHTS["values"]
        + factors.communication * COMPATIBILITY_WEIGHTS["communication"]
        + factors.leadership * COMPATIBILITY_WEIGHTS["leadership"]
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def assess_culture_compatibility(
    team: CultureProfile,
    company: CultureProfile,
    assessed_at: datetime | None = None,
) -> CompatibilityAssessment:
    """Assess culture fit of *team* joining *company*.

    Args:
        team: The team's culture profile.
        company: The hiring company's culture profile.
        assessed_at: Assessment timestamp; defaults to now (UTC). The plan's
            baseline milestone is scheduled relative to it.

    Returns:
        A new CompatibilityAssessment. Inputs are never modified.
    """
    when = assessed_at or datetime.now(timezone.utc)

    factors = CompatibilityFactors(
        dimensions=calculate_dimension_compatibility(team.culture_dimensions, company.culture_dimensions),
        values=calculate_value_compatibility(team.core_values, company.core_values),
        communication=calculate_communication_compatibility(
            team.communication_style, company.communication_style,
        ),
        leadership=calculate_leadership_compatibility(
            team.leadership_style.approach, company.leadership_style.approach,
        ),
    )
    overall = calculate_overall_score(factors)
    risks = detect_culture_risks(team, company)
    strengths = detect_culture_strengths(team, company)

    assessment = CompatibilityAssessment(
        id=f"compat-{team.id}-{company.id}",
        team_profile_id=team.id,
        company_profile_id=company.id,
        overall_score=overall,
        compatibility_level=get_compatibility_level(overall),
        factor_scores=factors,
        dimension_compatibility=calculate_dimension_breakdown(team, company),
        risk_areas=risks,
        strength_areas=strengths,
        integration_plan=generate_integration_plan(team.id, company.id, risks, when),
        assessment_date=when,
        confidence_level=min(team.confidence_level, company.confidence_level),
    )
    logger.debug(
        "Assessed %s: score=%.1f level=%s risks=%d strengths=%d",
        assessment.id, overall, assessment.compatibility_level, len(risks), len(strengths),
    )
    return assessment
