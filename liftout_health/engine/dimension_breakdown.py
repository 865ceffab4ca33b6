"""Per-dimension compatibility breakdown for display.

Covers a curated subset of six culture dimensions. The display weights here are
separate from the four-factor weights used for the overall score and never feed
into it.

All functions are *pure*.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from liftout_health.culture_profile import CultureProfile


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
Impact = Literal["critical", "high", "medium", "low"]


class DimensionCompatibility(BaseModel):
    """Compatibility of one culture dimension between team and company."""

    dimension: str
    team_score: float = Field(ge=0, le=100)
    company_score: float = Field(ge=0, le=100)
    compatibility: float = Field(ge=0, le=100)
    gap: float = Field(ge=0, le=100)
    impact: Impact
    weight: float = Field(ge=0, le=1.0)
    recommendation: str


# ---------------------------------------------------------------------------
# Display dimensions: (field, label, display weight)
# ---------------------------------------------------------------------------
DISPLAY_DIMENSION_WEIGHTS: dict[str, tuple[str, float]] = {
    "power_distance": ("Power Distance", 0.15),
    "individualism_vs_collectivism": ("Individual vs Team Focus", 0.20),
    "uncertainty_avoidance": ("Structure vs Flexibility", 0.15),
    "innovation_vs_stability": ("Innovation vs Stability", 0.20),
    "risk_tolerance": ("Risk Tolerance", 0.15),
    "transparency_vs_confidentiality": ("Transparency", 0.15),
}

_STRONG_ALIGNMENT_GAP = 15

# label → (team scores higher, company scores higher)
_PARTY_RECOMMENDATIONS: dict[str, tuple[str, str]] = {
    "Individual vs Team Focus": (
        "Team is more collaborative - create opportunities for team-based projects",
        "Team is more individual-focused - provide clear individual goals and recognition",
    ),
    "Innovation vs Stability": (
        "Team is more innovation-oriented - channel energy into R&D initiatives",
        "Team values stability - emphasize process improvement and optimization",
    ),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def classify_gap_impact(gap: float) -> Impact:
    """Map an absolute dimension gap to an impact tier."""
    if gap > 50:
        return "critical"
    if gap > 30:
        return "high"
    if gap > 15:
        return "medium"
    return "low"


def generate_dimension_recommendation(
    dimension: str,
    team_score: float,
    company_score: float,
    gap: float,
) -> str:
    """Return the integration advice for one display dimension."""
    if gap < _STRONG_ALIGNMENT_GAP:
        return f"Strong alignment on {dimension.lower()} - leverage this compatibility"

    texts = _PARTY_RECOMMENDATIONS.get(dimension)
    if texts is not None:
        team_higher, company_higher = texts
        return team_higher if team_score > company_score else company_higher

    return f"Moderate gap in {dimension.lower()} - develop bridging strategies during integration"


def calculate_dimension_breakdown(
    team: CultureProfile,
    company: CultureProfile,
) -> list[DimensionCompatibility]:
    """Compute the six-dimension display breakdown, in display order."""
    results: list[DimensionCompatibility] = []
    for field_name, (label, weight) in DISPLAY_DIMENSION_WEIGHTS.items():
        team_score = getattr(team.culture_dimensions, field_name)
        company_score = getattr(company.culture_dimensions, field_name)
        gap = abs(team_score - company_score)
        results.append(DimensionCompatibility(
            dimension=label,
            team_score=team_score,
            company_score=company_score,
            compatibility=max(0, 100 - gap),
            gap=gap,
            impact=classify_gap_impact(gap),
            weight=weight,
            recommendation=generate_dimension_recommendation(label, team_score, company_score, gap),
        ))
    return results
