"""Culture profile models for teams and companies.

A CultureProfile is an immutable snapshot of one party's cultural dimensions,
values and working style. Every score lives on a 0-100 scale; pydantic rejects
anything outside that range or any categorical value outside its literal set.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


Score = float

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------
EntityType = Literal["team", "company"]
ValueCategory = Literal[
    "performance",
    "integrity",
    "innovation",
    "collaboration",
    "customer_focus",
    "quality",
    "diversity",
    "sustainability",
    "growth",
    "accountability",
]
LeadershipApproach = Literal["autocratic", "democratic", "laissez_faire", "transformational", "servant"]
AssessmentMethod = Literal["survey", "interview", "observation", "combined"]
FeedbackStyle = Literal["immediate", "scheduled", "informal", "formal_only"]
ChannelType = Literal["email", "slack", "meetings", "one_on_one", "presentations", "informal"]
RiskAssessmentStyle = Literal["comprehensive", "moderate", "minimal", "intuitive"]
ConflictApproach = Literal["avoidance", "accommodation", "competition", "compromise", "collaboration"]
MediationPreference = Literal["internal", "external", "peer", "hierarchical"]
ResolutionFocus = Literal["relationship", "task", "balanced"]
SpaceType = Literal["remote", "hybrid", "office", "flexible"]
OvertimeExpectation = Literal["rare", "seasonal", "regular", "constant"]
RecognitionStyle = Literal["private", "team", "public", "monetary", "mixed"]
ImprovementFocus = Literal["strengths", "weaknesses", "balanced"]


class _Snapshot(BaseModel):
    """Base for immutable profile records."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Dimensions & values
# ---------------------------------------------------------------------------
class CultureDimensions(_Snapshot):
    """Hofstede-style dimensions adapted for corporate culture."""

    power_distance: Score = Field(ge=0, le=100)
    individualism_vs_collectivism: Score = Field(ge=0, le=100)
    uncertainty_avoidance: Score = Field(ge=0, le=100)
    long_term_orientation: Score = Field(ge=0, le=100)
    innovation_vs_stability: Score = Field(ge=0, le=100)
    process_vs_results: Score = Field(ge=0, le=100)
    risk_tolerance: Score = Field(ge=0, le=100)
    transparency_vs_confidentiality: Score = Field(ge=0, le=100)


CULTURE_DIMENSION_FIELDS: tuple[str, ...] = tuple(CultureDimensions.model_fields)


class CoreValue(_Snapshot):
    """A value held by a team or company, with observable evidence."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    importance: Score = Field(ge=0, le=100)
    category: ValueCategory
    evidence_points: list[str] = Field(default_factory=list)


class WorkingPrinciple(_Snapshot):
    id: str = Field(..., min_length=1)
    principle: str = Field(..., min_length=1)
    description: str = ""
    frequency: Score = Field(ge=0, le=100)
    criticality: Score = Field(ge=0, le=100)


# ---------------------------------------------------------------------------
# Behavioural styles
# ---------------------------------------------------------------------------
class CommunicationChannel(_Snapshot):
    type: ChannelType
    usage: Score = Field(ge=0, le=100)
    effectiveness: Score = Field(ge=0, le=100)


class CommunicationStyle(_Snapshot):
    """0 = indirect / informal / minimal, 100 = direct / formal / frequent."""

    directness: Score = Field(ge=0, le=100)
    formality: Score = Field(ge=0, le=100)
    frequency: Score = Field(ge=0, le=100)
    channels: list[CommunicationChannel] = Field(default_factory=list)
    feedback_style: FeedbackStyle = "scheduled"


class DecisionMakingStyle(_Snapshot):
    centralization: Score = Field(ge=0, le=100)
    speed: Score = Field(ge=0, le=100)
    data_orientation: Score = Field(ge=0, le=100)
    consensus_building: Score = Field(ge=0, le=100)
    risk_assessment: RiskAssessmentStyle = "moderate"


class ConflictResolutionStyle(_Snapshot):
    approach: ConflictApproach
    escalation_speed: Score = Field(ge=0, le=100)
    mediation_preference: MediationPreference = "internal"
    resolution_focus: ResolutionFocus = "balanced"


class PhysicalSpace(_Snapshot):
    type: SpaceType
    openness: Score = Field(ge=0, le=100)
    interaction: Score = Field(ge=0, le=100)
    flexibility: Score = Field(ge=0, le=100)


class WorkSchedule(_Snapshot):
    flexibility: Score = Field(ge=0, le=100)
    intensity: Score = Field(ge=0, le=100)
    work_life_balance: Score = Field(ge=0, le=100)
    overtime_expectation: OvertimeExpectation = "seasonal"


class WorkEnvironment(_Snapshot):
    physical_space: PhysicalSpace
    work_schedule: WorkSchedule
    autonomy: Score = Field(ge=0, le=100)
    collaboration: Score = Field(ge=0, le=100)
    formality_level: Score = Field(ge=0, le=100)


class LeadershipStyle(_Snapshot):
    approach: LeadershipApproach
    accessibility: Score = Field(ge=0, le=100)
    supportiveness: Score = Field(ge=0, le=100)
    vision_communication: Score = Field(ge=0, le=100)
    empowerment: Score = Field(ge=0, le=100)


class PerformanceOrientation(_Snapshot):
    meritocracy: Score = Field(ge=0, le=100)
    goal_clarity: Score = Field(ge=0, le=100)
    feedback_frequency: Score = Field(ge=0, le=100)
    recognition_style: RecognitionStyle = "mixed"
    improvement_focus: ImprovementFocus = "balanced"


class TeamDynamics(_Snapshot):
    """Team-only indicators; informational, not used by the assessor."""

    cohesion: Score = Field(ge=0, le=100)
    trust: Score = Field(ge=0, le=100)
    psychological_safety: Score = Field(ge=0, le=100)
    diversity_appreciation: Score = Field(ge=0, le=100)
    role_clarity: Score = Field(ge=0, le=100)
    shared_goals: Score = Field(ge=0, le=100)
    knowledge_sharing: Score = Field(ge=0, le=100)
    adaptability: Score = Field(ge=0, le=100)


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------
class CultureProfile(_Snapshot):
    """One assessment-cycle snapshot of a team's or company's culture."""

    id: str = Field(..., min_length=1)
    entity_id: str = Field(..., min_length=1)
    entity_type: EntityType
    culture_dimensions: CultureDimensions
    core_values: list[CoreValue] = Field(default_factory=list)
    working_principles: list[WorkingPrinciple] = Field(default_factory=list)
    communication_style: CommunicationStyle
    decision_making: DecisionMakingStyle
    conflict_resolution: ConflictResolutionStyle
    work_environment: WorkEnvironment
    leadership_style: LeadershipStyle
    performance_orientation: PerformanceOrientation
    team_dynamics: TeamDynamics | None = None
    assessment_date: datetime
    assessment_method: AssessmentMethod = "combined"
    confidence_level: Score = Field(ge=0, le=100)

    @model_validator(mode="after")
    def validate_team_dynamics_owner(self) -> CultureProfile:
        if self.team_dynamics is not None and self.entity_type != "team":
            raise ValueError("team_dynamics is only allowed on team profiles")
        return self
