"""📊 Liftout health dashboard — Streamlit app.

Two tabs:
1. Culture fit     – team vs company radar, factor scores, breakdown, risks & plan
2. Integration     – health gauge, sub-scores, warnings, risk & milestone updates

Run with ``streamlit run liftout_dashboard.py``. Stored snapshots are read
from LIFTOUT_DATA_DIR; the example profiles and tracker are seeded on first run.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging

from dotenv import load_dotenv
import plotly.graph_objects as go  # type: ignore[import-untyped]
import streamlit as st

from liftout_health.culture_profile import CULTURE_DIMENSION_FIELDS, CultureProfile
from liftout_health.engine.culture_compatibility import assess_culture_compatibility
from liftout_health.engine.health_scoring import apply_health_report, score_integration_health
from liftout_health.fixtures import build_company_profile, build_integration_tracker, build_team_profile
from liftout_health.integration_tracker import IntegrationTracker
from liftout_health.settings import configure_logging, load_settings
from liftout_health.snapshot_repository import SnapshotRepository
from liftout_health.tracker_updates import (
    MILESTONE_TRANSITIONS,
    RISK_TRANSITIONS,
    update_milestone_status,
    update_risk_status,
)


load_dotenv()
_SETTINGS = load_settings()
configure_logging(_SETTINGS)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Liftout Health", page_icon="📊", layout="wide")
st.title("📊 Liftout Culture & Integration Health")

_REPO = SnapshotRepository(root=_SETTINGS.data_dir)


def _seed_examples() -> None:
    if not _REPO.list_profile_ids():
        _REPO.save_profile(build_team_profile())
        _REPO.save_profile(build_company_profile())
        logger.info("Seeded example culture profiles")
    if not _REPO.list_tracker_ids():
        _REPO.save_tracker(apply_health_report(build_integration_tracker()))
        logger.info("Seeded example integration tracker")


def _save_tracker(tracker: IntegrationTracker) -> None:
    _REPO.save_tracker(apply_health_report(tracker))
    st.rerun()


_seed_examples()

_LEVEL_COLORS = {
    "excellent": "#4CAF50",
    "good": "#8BC34A",
    "moderate": "#FFC107",
    "poor": "#FF9800",
    "mismatched": "#F44336",
}
_RETENTION_ICONS = {"low": "🟢", "medium": "🟡", "high": "🔴"}


# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------
tab1, tab2 = st.tabs(["🤝 Culture fit", "📈 Integration health"])


# =========================================================================
# Tab 1: Culture compatibility
# =========================================================================
with tab1:
    profiles: dict[str, CultureProfile] = {}
    for pid in _REPO.list_profile_ids():
        try:
            profiles[pid] = _REPO.load_profile(pid)
        except ValueError as e:
            st.error(f"Skipping profile {pid}: {e}")
    teams = [pid for pid, p in profiles.items() if p.entity_type == "team"]
    companies = [pid for pid, p in profiles.items() if p.entity_type == "company"]

    if not teams or not companies:
        st.info("Store at least one team profile and one company profile to assess culture fit.")
    else:
        c1, c2 = st.columns(2)
        with c1:
            team_id = st.selectbox("Team profile", options=teams)
        with c2:
            company_id = st.selectbox("Company profile", options=companies)

        team = profiles[team_id]
        company = profiles[company_id]
        assessment = assess_culture_compatibility(team, company, assessed_at=datetime.now(timezone.utc))

        g1, g2 = st.columns(2)
        with g1:
            fig_gauge = go.Figure(go.Indicator(
                mode="gauge+number",
                value=assessment.overall_score,
                number={"valueformat": ".1f"},
                title={"text": f"Overall fit: {assessment.compatibility_level}"},
                gauge={
                    "axis": {"range": [0, 100]},
                    "bar": {"color": _LEVEL_COLORS[assessment.compatibility_level]},
                    "steps": [
                        {"range": [0, 40], "color": "#ffebee"},
                        {"range": [40, 70], "color": "#fff8e1"},
                        {"range": [70, 100], "color": "#e8f5e9"},
                    ],
                },
            ))
            fig_gauge.update_layout(height=320)
            st.plotly_chart(fig_gauge, use_container_width=True)
            st.caption(f"Confidence: {assessment.confidence_level:.0f}%")

        with g2:
            labels = [name.replace("_", " ").title() for name in CULTURE_DIMENSION_FIELDS]
            fig_radar = go.Figure()
            for profile, name in ((team, "Team"), (company, "Company")):
                values = [getattr(profile.culture_dimensions, f) for f in CULTURE_DIMENSION_FIELDS]
                fig_radar.add_trace(go.Scatterpolar(
                    r=[*values, values[0]],
                    theta=[*labels, labels[0]],
                    fill="toself",
                    name=name,
                ))
            fig_radar.update_layout(
                polar={"radialaxis": {"visible": True, "range": [0, 100]}},
                title="Culture dimensions",
                height=320,
            )
            st.plotly_chart(fig_radar, use_container_width=True)

        # --- Factor scores ---
        factors = assessment.factor_scores
        fig_factors = go.Figure(go.Bar(
            x=["Dimensions", "Values", "Communication", "Leadership"],
            y=[factors.dimensions, factors.values, factors.communication, factors.leadership],
            text=[f"{v:.0f}" for v in (factors.dimensions, factors.values, factors.communication, factors.leadership)],
            textposition="outside",
        ))
        fig_factors.update_layout(title="Factor scores", yaxis={"range": [0, 110]}, height=320)
        st.plotly_chart(fig_factors, use_container_width=True)

        # --- Breakdown ---
        st.subheader("Dimension breakdown")
        st.dataframe(
            [
                {
                    "Dimension": d.dimension,
                    "Team": d.team_score,
                    "Company": d.company_score,
                    "Gap": d.gap,
                    "Impact": d.impact,
                    "Recommendation": d.recommendation,
                }
                for d in assessment.dimension_compatibility
            ],
            use_container_width=True,
        )

        r1, r2 = st.columns(2)
        with r1:
            st.subheader("⚠️ Risks")
            if not assessment.risk_areas:
                st.success("No significant culture risks detected.")
            for risk in assessment.risk_areas:
                icon = "🔴" if risk.severity in ("high", "critical") else "🟡"
                st.markdown(f"{icon} **{risk.description}** ({risk.probability}% likely)")
                for strategy in risk.mitigation_strategies:
                    st.caption(f"• {strategy}")
        with r2:
            st.subheader("💪 Strengths")
            for strength in assessment.strength_areas:
                st.markdown(f"🟢 **{strength.description}** (synergy {strength.synergy})")
                for opportunity in strength.leverage_opportunities:
                    st.caption(f"• {opportunity}")

        # --- Plan ---
        plan = assessment.integration_plan
        with st.expander(f"🗺 Integration plan ({plan.timeline_days} days)"):
            for phase in plan.phases:
                st.markdown(f"**{phase.name}** · {phase.duration_days} days")
                for activity in phase.activities:
                    st.caption(f"{activity.name}: {activity.duration_hours:g}h {activity.frequency}")
            for milestone in plan.milestones:
                st.markdown(f"🏁 {milestone.name}: {milestone.target_date:%Y-%m-%d}")


# =========================================================================
# Tab 2: Integration health
# =========================================================================
with tab2:
    tracker_ids = _REPO.list_tracker_ids()
    if not tracker_ids:
        st.info("No integration trackers stored.")
    else:
        tracker_id = st.selectbox("Tracker", options=tracker_ids)
        tracker: IntegrationTracker | None = None
        try:
            tracker = _REPO.load_tracker(tracker_id)
        except ValueError as e:
            st.error(f"Failed to load tracker {tracker_id}: {e}")

        if tracker is not None:
            report = score_integration_health(tracker)

            st.markdown(
                f"**{tracker.team_name or tracker.team_id}** → **{tracker.company_name or tracker.company_id}** · "
                f"phase `{tracker.current_phase}` · status `{tracker.status}`"
            )

            h1, h2 = st.columns(2)
            with h1:
                fig_health = go.Figure(go.Indicator(
                    mode="gauge+number",
                    value=report.health_score,
                    title={"text": "Integration health"},
                    gauge={
                        "axis": {"range": [0, 100]},
                        "bar": {"color": "#4CAF50" if report.health_score >= 75 else "#FFC107"},
                        "steps": [
                            {"range": [0, 60], "color": "#ffebee"},
                            {"range": [60, 75], "color": "#fff8e1"},
                            {"range": [75, 100], "color": "#e8f5e9"},
                        ],
                    },
                ))
                fig_health.update_layout(height=300)
                st.plotly_chart(fig_health, use_container_width=True)
                st.markdown(f"{_RETENTION_ICONS[report.retention_risk]} Retention risk: **{report.retention_risk}**")

            with h2:
                fig_sub = go.Figure(go.Bar(
                    x=["Performance", "Cultural", "Business", "Milestones"],
                    y=[report.performance_score, report.cultural_score, report.business_score, report.milestone_score],
                    textposition="outside",
                    text=[
                        report.performance_score,
                        f"{report.cultural_score:.0f}",
                        report.business_score,
                        report.milestone_score,
                    ],
                ))
                fig_sub.update_layout(title="Sub-scores", yaxis={"range": [0, 110]}, height=300)
                st.plotly_chart(fig_sub, use_container_width=True)

            if report.warnings:
                for w in report.warnings:
                    st.warning(w)
            else:
                st.success("No early warnings.")

            productivity = tracker.performance_metrics.productivity
            if productivity:
                fig_trend = go.Figure(go.Scatter(
                    x=[p.period for p in productivity],
                    y=[p.velocity_score for p in productivity],
                    mode="lines+markers",
                ))
                fig_trend.update_layout(title="Velocity by period", height=280)
                st.plotly_chart(fig_trend, use_container_width=True)

            # --- Risk register ---
            st.subheader("Risk register")
            for rf in tracker.risk_factors:
                c1, c2 = st.columns([3, 1])
                with c1:
                    st.markdown(f"**{rf.risk}** · {rf.category} · impact {rf.impact} · `{rf.status}`")
                with c2:
                    options = sorted(RISK_TRANSITIONS[rf.status])
                    if options:
                        choice = st.selectbox("Move to", options=options, key=f"risk_{rf.id}")
                        if st.button("Update", key=f"risk_btn_{rf.id}"):
                            _save_tracker(update_risk_status(tracker, rf.id, choice))

            # --- Milestones ---
            st.subheader("Milestones")
            for m in tracker.milestones:
                c1, c2 = st.columns([3, 1])
                with c1:
                    st.markdown(f"**{m.name}** · target {m.target_date:%Y-%m-%d} · `{m.status}`")
                    st.progress(int(m.completion_percentage))
                with c2:
                    options = sorted(MILESTONE_TRANSITIONS[m.status])
                    if options:
                        choice = st.selectbox("Move to", options=options, key=f"ms_{m.id}")
                        if st.button("Update", key=f"ms_btn_{m.id}"):
                            _save_tracker(update_milestone_status(tracker, m.id, choice, datetime.now(timezone.utc)))
