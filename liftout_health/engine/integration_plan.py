"""Culture integration plan template.

The plan is a fixed two-phase, 90-day template. Detected risks are accepted so
callers can pass them through, but they do not change the plan's shape.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field

from liftout_health.engine.culture_signals import CultureRisk


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
ActivityType = Literal["workshop", "mentoring", "shadowing", "training", "social", "assessment"]
Participant = Literal["team_members", "company_leaders", "hr", "external_facilitator"]
ActivityFrequency = Literal["once", "weekly", "monthly", "as_needed"]
ResourceType = Literal["facilitator", "training_materials", "assessment_tools", "technology", "space"]


class PlanActivity(BaseModel):
    id: str
    name: str
    description: str
    type: ActivityType
    participants: list[Participant]
    duration_hours: float = Field(gt=0)
    frequency: ActivityFrequency


class PlanPhase(BaseModel):
    id: str
    name: str
    description: str
    duration_days: int = Field(gt=0)
    activities: list[PlanActivity]
    success_criteria: list[str]
    risks: list[str]


class PlanMilestone(BaseModel):
    id: str
    name: str
    description: str
    target_date: datetime
    success_metrics: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class PlanResource(BaseModel):
    type: ResourceType
    description: str
    cost: float | None = None
    timeline: str


class IntegrationPlan(BaseModel):
    """Phased culture-integration plan attached to an assessment."""

    id: str
    phases: list[PlanPhase]
    timeline_days: int = Field(gt=0)
    success_metrics: list[str]
    milestones: list[PlanMilestone]
    resources: list[PlanResource]


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------
PLAN_TIMELINE_DAYS = 90
BASELINE_MILESTONE_OFFSET = timedelta(days=14)


def _template_phases() -> list[PlanPhase]:
    return [
        PlanPhase(
            id="phase-1",
            name="Cultural Discovery & Alignment",
            description="Initial integration focused on understanding and aligning cultural differences",
            duration_days=30,
            activities=[
                PlanActivity(
                    id="cultural-immersion",
                    name="Cultural Immersion Sessions",
                    description="Joint sessions for team and company to share values, practices, and expectations",
                    type="workshop",
                    participants=["team_members", "company_leaders", "hr"],
                    duration_hours=4,
                    frequency="weekly",
                ),
                PlanActivity(
                    id="buddy-system",
                    name="Culture Buddy Program",
                    description="Pair team members with company culture ambassadors",
                    type="mentoring",
                    participants=["team_members", "company_leaders"],
                    duration_hours=2,
                    frequency="weekly",
                ),
            ],
            success_criteria=[
                "Team members report 80%+ comfort with company culture",
                "Zero major cultural conflicts reported",
                "Completion of cultural assessment surveys",
            ],
            risks=[
                "Initial resistance to change",
                "Information overload",
                "Superficial engagement",
            ],
        ),
        PlanPhase(
            id="phase-2",
            name="Operational Integration",
            description="Integrate team into company processes and working methods",
            duration_days=60,
            activities=[
                PlanActivity(
                    id="process-training",
                    name="Company Process Training",
                    description="Training on company-specific processes, tools, and methodologies",
                    type="training",
                    participants=["team_members", "hr"],
                    duration_hours=8,
                    frequency="as_needed",
                ),
            ],
            success_criteria=[
                "Team operating at 90% efficiency in company processes",
                "Successful completion of first major project",
            ],
            risks=[
                "Process adaptation difficulties",
                "Productivity temporary decline",
            ],
        ),
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def generate_integration_plan(
    team_profile_id: str,
    company_profile_id: str,
    risks: list[CultureRisk],
    planned_at: datetime,
) -> IntegrationPlan:
    """Build the baseline integration plan for a team/company pairing.

    Args:
        team_profile_id: Id of the team's culture profile.
        company_profile_id: Id of the company's culture profile.
        risks: Risks detected for the pairing (informational).
        planned_at: Reference time; the baseline milestone is due 14 days later.

    Returns:
        A new IntegrationPlan built from the fixed template.
    """
    return IntegrationPlan(
        id=f"integration-{team_profile_id}-{company_profile_id}",
        phases=_template_phases(),
        timeline_days=PLAN_TIMELINE_DAYS,
        success_metrics=[
            "Team retention rate >95% at 6 months",
            "Cultural integration score >80%",
            "Performance metrics maintained or improved",
        ],
        milestones=[
            PlanMilestone(
                id="milestone-1",
                name="Cultural Baseline Established",
                description="Initial cultural assessment completed and integration plan finalized",
                target_date=planned_at + BASELINE_MILESTONE_OFFSET,
                success_metrics=["Assessment completion", "Plan approval"],
            ),
        ],
        resources=[
            PlanResource(
                type="facilitator",
                description="Organizational psychology consultant for cultural integration",
                cost=50000,
                timeline="90 days",
            ),
            PlanResource(
                type="training_materials",
                description="Custom cultural integration materials and assessments",
                cost=15000,
                timeline="30 days",
            ),
        ],
    )
