"""Culture risk and strength detection rules.

Each detector is a (predicate, template) pair kept in an ordered table, so a new
rule is one more table entry. Rules fire independently; output order follows
table order.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from liftout_health.culture_profile import CultureProfile


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
RiskCategory = Literal["values", "communication", "leadership", "work_style", "performance"]
RiskSeverity = Literal["low", "medium", "high", "critical"]
RiskTimeframe = Literal["immediate", "short_term", "medium_term", "long_term"]


class CultureRisk(BaseModel):
    """A generated culture-integration risk."""

    id: str
    category: RiskCategory
    description: str
    severity: RiskSeverity
    probability: int = Field(ge=0, le=100)
    impact: str
    mitigation_strategies: list[str] = Field(default_factory=list)
    timeframe: RiskTimeframe


class CultureStrength(BaseModel):
    """A generated area of cultural synergy."""

    id: str
    description: str
    synergy: int = Field(ge=0, le=100)
    leverage_opportunities: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------
ProfilePredicate = Callable[[CultureProfile, CultureProfile], bool]


@dataclass(frozen=True)
class RiskRule:
    """Emit *template* when *predicate(team, company)* holds."""

    predicate: ProfilePredicate
    template: CultureRisk


@dataclass(frozen=True)
class StrengthRule:
    predicate: ProfilePredicate
    template: CultureStrength


def _directness_gap(team: CultureProfile, company: CultureProfile) -> float:
    return abs(team.communication_style.directness - company.communication_style.directness)


def _centralization_gap(team: CultureProfile, company: CultureProfile) -> float:
    return abs(team.decision_making.centralization - company.decision_making.centralization)


RISK_RULES: list[RiskRule] = [
    RiskRule(
        predicate=lambda t, c: _directness_gap(t, c) > 40,
        template=CultureRisk(
            id="comm-directness",
            category="communication",
            description="Significant difference in communication directness may lead to misunderstandings",
            severity="high",
            probability=75,
            impact="Potential for miscommunication, conflict, and reduced team effectiveness",
            mitigation_strategies=[
                "Communication style training for both teams",
                "Establish clear communication protocols",
                "Regular feedback sessions to address misunderstandings",
            ],
            timeframe="immediate",
        ),
    ),
    RiskRule(
        predicate=lambda t, c: _centralization_gap(t, c) > 35,
        template=CultureRisk(
            id="decision-centralization",
            category="leadership",
            description="Mismatch in decision-making approaches may cause frustration",
            severity="medium",
            probability=65,
            impact="Slower decision-making, role confusion, reduced autonomy satisfaction",
            mitigation_strategies=[
                "Define clear decision-making authority levels",
                "Gradual transition to company decision-making style",
                "Regular leadership alignment meetings",
            ],
            timeframe="short_term",
        ),
    ),
]

STRENGTH_RULES: list[StrengthRule] = [
    StrengthRule(
        predicate=lambda t, c: (
            t.culture_dimensions.innovation_vs_stability > 70
            and c.culture_dimensions.innovation_vs_stability > 70
        ),
        template=CultureStrength(
            id="innovation-synergy",
            description="Both team and company are highly innovation-oriented",
            synergy=85,
            leverage_opportunities=[
                "Lead next-generation product development",
                "Establish innovation lab or incubator",
                "Cross-pollinate ideas with other innovative teams",
            ],
        ),
    ),
    StrengthRule(
        predicate=lambda t, c: (
            t.performance_orientation.meritocracy > 80
            and c.performance_orientation.meritocracy > 80
        ),
        template=CultureStrength(
            id="performance-alignment",
            description="Strong mutual focus on merit-based performance",
            synergy=90,
            leverage_opportunities=[
                "Showcase team as performance benchmark",
                "Implement best practices across organization",
                "Fast-track high performers to leadership roles",
            ],
        ),
    ),
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def detect_culture_risks(
    team: CultureProfile,
    company: CultureProfile,
    rules: list[RiskRule] | None = None,
) -> list[CultureRisk]:
    """Return a fresh risk for every rule that fires, in rule order."""
    active = RISK_RULES if rules is None else rules
    return [rule.template.model_copy(deep=True) for rule in active if rule.predicate(team, company)]


def detect_culture_strengths(
    team: CultureProfile,
    company: CultureProfile,
    rules: list[StrengthRule] | None = None,
) -> list[CultureStrength]:
    """Return a fresh strength for every rule that fires, in rule order."""
    active = STRENGTH_RULES if rules is None else rules
    return [rule.template.model_copy(deep=True) for rule in active if rule.predicate(team, company)]
