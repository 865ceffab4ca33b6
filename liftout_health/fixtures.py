"""Named builders for example profiles and trackers.

Used by tests and the demo dashboard; the engine never imports this module.
Each call returns fresh objects; there is no shared module-level instance.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from liftout_health.culture_profile import (
    CommunicationChannel,
    CommunicationStyle,
    ConflictResolutionStyle,
    CoreValue,
    CultureDimensions,
    CultureProfile,
    DecisionMakingStyle,
    LeadershipStyle,
    PerformanceOrientation,
    PhysicalSpace,
    TeamDynamics,
    WorkEnvironment,
    WorkingPrinciple,
    WorkSchedule,
)
from liftout_health.integration_tracker import (
    BusinessResultsTracker,
    ClientMetric,
    CostMetric,
    CulturalFeedback,
    CulturalIntegrationTracker,
    CultureShockIndicator,
    DeliveryMetric,
    InnovationMetric,
    IntegrationMilestone,
    IntegrationTracker,
    MarketMetric,
    PerformanceTracker,
    PhaseTracker,
    ProductivityMetric,
    QualityMetric,
    RevenueMetric,
    RiskFactor,
    ROIMetric,
)


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Culture profiles
# ---------------------------------------------------------------------------
def build_team_profile() -> CultureProfile:
    """Quantitative investment strategies team: innovative, results-driven."""
    return CultureProfile(
        id="culture-gs-qis",
        entity_id="team-gs-qis",
        entity_type="team",
        culture_dimensions=CultureDimensions(
            power_distance=65,
            individualism_vs_collectivism=45,
            uncertainty_avoidance=75,
            long_term_orientation=80,
            innovation_vs_stability=85,
            process_vs_results=30,
            risk_tolerance=90,
            transparency_vs_confidentiality=40,
        ),
        core_values=[
            CoreValue(
                id="val-1",
                name="Analytical Excellence",
                description="Commitment to rigorous quantitative analysis and data-driven decision making",
                importance=95,
                category="performance",
                evidence_points=["Complex model development", "Peer review processes", "Continuous learning"],
            ),
            CoreValue(
                id="val-2",
                name="Innovation in Finance",
                description="Pioneering new quantitative methods and trading strategies",
                importance=90,
                category="innovation",
                evidence_points=["Patent applications", "Research publications", "Industry recognition"],
            ),
        ],
        working_principles=[
            WorkingPrinciple(
                id="wp-1",
                principle="Data-Driven Decisions",
                description="All strategic decisions must be supported by quantitative analysis",
                frequency=95,
                criticality=90,
            ),
        ],
        communication_style=CommunicationStyle(
            directness=80,
            formality=70,
            frequency=60,
            channels=[
                CommunicationChannel(type="email", usage=80, effectiveness=75),
                CommunicationChannel(type="meetings", usage=60, effectiveness=85),
            ],
            feedback_style="immediate",
        ),
        decision_making=DecisionMakingStyle(
            centralization=40, speed=70, data_orientation=95, consensus_building=60,
            risk_assessment="comprehensive",
        ),
        conflict_resolution=ConflictResolutionStyle(
            approach="collaboration", escalation_speed=30,
            mediation_preference="peer", resolution_focus="task",
        ),
        work_environment=WorkEnvironment(
            physical_space=PhysicalSpace(type="hybrid", openness=60, interaction=70, flexibility=50),
            work_schedule=WorkSchedule(
                flexibility=70, intensity=85, work_life_balance=60, overtime_expectation="regular",
            ),
            autonomy=80,
            collaboration=75,
            formality_level=60,
        ),
        leadership_style=LeadershipStyle(
            approach="transformational", accessibility=75, supportiveness=80,
            vision_communication=85, empowerment=80,
        ),
        performance_orientation=PerformanceOrientation(
            meritocracy=90, goal_clarity=85, feedback_frequency=80,
            recognition_style="mixed", improvement_focus="strengths",
        ),
        team_dynamics=TeamDynamics(
            cohesion=85, trust=88, psychological_safety=80, diversity_appreciation=75,
            role_clarity=90, shared_goals=85, knowledge_sharing=80, adaptability=85,
        ),
        assessment_date=_utc(2024, 9, 15),
        assessment_method="combined",
        confidence_level=85,
    )


def build_company_profile() -> CultureProfile:
    """Private-equity firm: hierarchical, confidential, strongly results-focused."""
    return CultureProfile(
        id="culture-blackstone",
        entity_id="company-blackstone",
        entity_type="company",
        culture_dimensions=CultureDimensions(
            power_distance=70,
            individualism_vs_collectivism=55,
            uncertainty_avoidance=60,
            long_term_orientation=85,
            innovation_vs_stability=75,
            process_vs_results=25,
            risk_tolerance=85,
            transparency_vs_confidentiality=35,
        ),
        core_values=[
            CoreValue(
                id="val-comp-1",
                name="Excellence",
                description="Pursuit of the highest standards in everything we do",
                importance=95,
                category="performance",
                evidence_points=["Industry-leading returns", "Top talent recruitment", "Client satisfaction"],
            ),
            CoreValue(
                id="val-comp-2",
                name="Entrepreneurship",
                description="Thinking like owners and taking calculated risks for superior returns",
                importance=90,
                category="innovation",
                evidence_points=["New fund launches", "Market entry strategies", "Innovation investments"],
            ),
        ],
        working_principles=[
            WorkingPrinciple(
                id="wp-comp-1",
                principle="Client First",
                description="Always prioritize client interests and long-term relationships",
                frequency=90,
                criticality=95,
            ),
        ],
        communication_style=CommunicationStyle(
            directness=85,
            formality=75,
            frequency=70,
            channels=[
                CommunicationChannel(type="email", usage=85, effectiveness=80),
                CommunicationChannel(type="meetings", usage=80, effectiveness=90),
            ],
            feedback_style="scheduled",
        ),
        decision_making=DecisionMakingStyle(
            centralization=60, speed=80, data_orientation=85, consensus_building=50,
            risk_assessment="comprehensive",
        ),
        conflict_resolution=ConflictResolutionStyle(
            approach="competition", escalation_speed=50,
            mediation_preference="hierarchical", resolution_focus="task",
        ),
        work_environment=WorkEnvironment(
            physical_space=PhysicalSpace(type="hybrid", openness=40, interaction=60, flexibility=60),
            work_schedule=WorkSchedule(
                flexibility=60, intensity=90, work_life_balance=50, overtime_expectation="regular",
            ),
            autonomy=70,
            collaboration=65,
            formality_level=75,
        ),
        leadership_style=LeadershipStyle(
            approach="transformational", accessibility=70, supportiveness=75,
            vision_communication=90, empowerment=75,
        ),
        performance_orientation=PerformanceOrientation(
            meritocracy=95, goal_clarity=90, feedback_frequency=75,
            recognition_style="mixed", improvement_focus="strengths",
        ),
        assessment_date=_utc(2024, 9, 10),
        assessment_method="survey",
        confidence_level=90,
    )


def build_culture_profile(entity_type: str = "team", **overrides: Any) -> CultureProfile:
    """A neutral profile (every score 50, democratic leadership) with overrides.

    Nested records can be overridden with either a model or a plain dict.
    """
    data: dict[str, Any] = {
        "id": f"culture-{entity_type}",
        "entity_id": f"{entity_type}-1",
        "entity_type": entity_type,
        "culture_dimensions": {
            "power_distance": 50,
            "individualism_vs_collectivism": 50,
            "uncertainty_avoidance": 50,
            "long_term_orientation": 50,
            "innovation_vs_stability": 50,
            "process_vs_results": 50,
            "risk_tolerance": 50,
            "transparency_vs_confidentiality": 50,
        },
        "core_values": [],
        "communication_style": {"directness": 50, "formality": 50, "frequency": 50},
        "decision_making": {"centralization": 50, "speed": 50, "data_orientation": 50, "consensus_building": 50},
        "conflict_resolution": {"approach": "compromise", "escalation_speed": 50},
        "work_environment": {
            "physical_space": {"type": "hybrid", "openness": 50, "interaction": 50, "flexibility": 50},
            "work_schedule": {"flexibility": 50, "intensity": 50, "work_life_balance": 50},
            "autonomy": 50,
            "collaboration": 50,
            "formality_level": 50,
        },
        "leadership_style": {
            "approach": "democratic", "accessibility": 50, "supportiveness": 50,
            "vision_communication": 50, "empowerment": 50,
        },
        "performance_orientation": {"meritocracy": 50, "goal_clarity": 50, "feedback_frequency": 50},
        "assessment_date": _utc(2025, 1, 1),
        "confidence_level": 80,
    }
    data.update(overrides)
    return CultureProfile.model_validate(data)


# ---------------------------------------------------------------------------
# Integration trackers
# ---------------------------------------------------------------------------
def build_integration_tracker() -> IntegrationTracker:
    """Analytics team placed at a medical-technology company, mid team formation."""
    return IntegrationTracker(
        id="integration-001",
        liftout_id="liftout-001",
        team_id="team-goldman-analytics",
        company_id="medtech-innovations",
        team_name="Strategic Analytics Core",
        company_name="MedTech Innovations",
        start_date=_utc(2025, 1, 15),
        current_phase="team_formation",
        phases=[
            PhaseTracker(
                phase="pre_boarding",
                name="Pre-boarding Preparation",
                description="Preparing systems, workspace, and documentation before team arrival",
                start_date=_utc(2025, 1, 1),
                end_date=_utc(2025, 1, 14),
                target_duration_days=14,
                actual_duration_days=14,
                status="completed",
                progress=100,
            ),
            PhaseTracker(
                phase="onboarding",
                name="Team Onboarding",
                description="First week orientation and initial team setup",
                start_date=_utc(2025, 1, 15),
                end_date=_utc(2025, 1, 22),
                target_duration_days=7,
                status="completed",
                progress=100,
            ),
            PhaseTracker(
                phase="team_formation",
                name="Team Formation & Integration",
                description="Building relationships and establishing team dynamics within the company",
                start_date=_utc(2025, 1, 23),
                end_date=_utc(2025, 2, 20),
                target_duration_days=28,
                status="in_progress",
                progress=65,
            ),
        ],
        performance_metrics=PerformanceTracker(
            productivity=[
                ProductivityMetric(
                    period="2025-02", tasks_completed=23, projects_delivered=2, hours_worked=160,
                    utilization_rate=87, velocity_score=92, benchmark_comparison=15,
                ),
            ],
            quality=[
                QualityMetric(
                    period="2025-02", code_quality_score=8.6, bug_rate=0.02,
                    customer_satisfaction_score=8.7, peer_review_score=8.9,
                    accuracy_rate=97, rework_rate=3,
                ),
            ],
            delivery=[
                DeliveryMetric(
                    period="2025-02", on_time_delivery=94, budget_compliance=98, scope_compliance=96,
                    stakeholder_satisfaction=8.5, client_feedback_score=8.8,
                ),
            ],
        ),
        cultural_integration=CulturalIntegrationTracker(
            cultural_fit_score=84,
            network_integration=70,
            culture_shock_indicators=[
                CultureShockIndicator(
                    indicator="Meeting culture adaptation",
                    severity="mild",
                    frequency="occasional",
                    trend="improving",
                    description="Team adjusting to more collaborative meeting style",
                    recommended_actions=[
                        "Provide meeting facilitation training",
                        "Pair with experienced facilitators",
                    ],
                ),
            ],
            cultural_feedback=[
                CulturalFeedback(
                    source="manager",
                    feedback_type="positive",
                    category="collaboration",
                    feedback="Excellent integration with existing teams, very collaborative approach",
                    date=_utc(2025, 2, 10),
                ),
            ],
        ),
        business_results=BusinessResultsTracker(
            revenue_metrics=[
                RevenueMetric(
                    period="2025-02", direct_revenue=450000, indirect_revenue=180000, revenue_growth=23,
                    new_client_revenue=280000, expanded_client_revenue=170000,
                    projected_annual_impact=5400000,
                ),
            ],
            cost_metrics=[
                CostMetric(
                    category="integration", actual_cost=125000, budgeted_cost=150000, variance=-16.7,
                    cost_per_employee=25000, one_time_costs=75000, recurring_costs=50000,
                ),
            ],
            roi_metrics=[
                ROIMetric(
                    period="2025-02", total_investment=850000, total_returns=1840000, roi=116,
                    payback_period_months=11, npv=990000, irr=89, risk_adjusted_return=94,
                ),
            ],
            market_metrics=[
                MarketMetric(
                    new_markets_entered=1, market_share_gain=3.2,
                    competitive_advantage=["Advanced healthcare AI capabilities", "Proven track record"],
                    brand_impact=8, market_reception=8.5,
                ),
            ],
            innovation_metrics=[
                InnovationMetric(
                    patents_applied=1, process_improvements=3, innovation_index=87, r_and_d_efficiency=23,
                ),
            ],
            client_metrics=[
                ClientMetric(
                    new_clients_acquired=4, client_retention_rate=98, client_satisfaction_score=8.7,
                    upsell_rate=34, referral_rate=28, client_lifetime_value=420000,
                ),
            ],
        ),
        risk_factors=[
            RiskFactor(
                id="risk-001",
                category="cultural",
                risk="Adjustment to healthcare regulatory environment",
                probability="medium",
                impact="medium",
                severity="medium",
                description="Team may need additional time to fully understand healthcare compliance requirements",
                mitigation_strategies=[
                    "Provide comprehensive healthcare compliance training",
                    "Assign healthcare domain experts as mentors",
                ],
                early_warning_signals=[
                    "Compliance-related questions increasing",
                    "Hesitation in decision-making",
                ],
                responsible="Jennifer Walsh",
                status="monitoring",
            ),
        ],
        milestones=[
            IntegrationMilestone(
                id="milestone-001",
                name="Full Team Onboarding Complete",
                description="All team members successfully onboarded and productive",
                phase="onboarding",
                target_date=_utc(2025, 1, 22),
                actual_date=_utc(2025, 1, 22),
                status="completed",
                completion_percentage=100,
                business_impact="high",
            ),
        ],
        health_score=86,
        retention_risk="low",
        status="integration",
        overall_progress=67,
    )


def build_minimal_tracker(**overrides: Any) -> IntegrationTracker:
    """A bare tracker with empty series and a cultural fit of 80, plus overrides."""
    data: dict[str, Any] = {
        "id": "tracker-test",
        "liftout_id": "liftout-test",
        "team_id": "team-test",
        "company_id": "company-test",
        "start_date": _utc(2025, 1, 1),
        "cultural_integration": {"cultural_fit_score": 80},
    }
    data.update(overrides)
    return IntegrationTracker.model_validate(data)
