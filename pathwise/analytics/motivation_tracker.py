"""
Motivation & Fatigue Tracking.

Scores each recent session on a bounded 0-100 scale and derives:
- current_level: score of the latest session
- trend: latest vs. previous session, with a deadband
- fatigue_risk: from the mean of the last few session scores
- recommendations: fixed interventions keyed by risk, trend and level

An empty history returns the neutral baseline (50, stable, low).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from pathwise.core.models import FatigueRisk, SessionRecord, Trend, coerce_records
from pathwise.core.reference_data import DEFAULT_REFERENCE, ReferenceData
from pathwise.core.scoring import clamp, mean

BASELINE_MOTIVATION = 50

THRESHOLDS = {
    # Completion
    "completed_bonus": 20,
    "high_completion_rate": 0.8,
    "high_completion_bonus": 15,
    "low_completion_rate": 0.3,
    "low_completion_penalty": 20,

    # Engagement (0-100)
    "high_engagement": 80,
    "high_engagement_bonus": 10,
    "low_engagement": 40,
    "low_engagement_penalty": 15,

    # Actual / planned duration
    "overrun_ratio": 1.2,
    "overrun_penalty": 10,
    "underrun_ratio": 0.5,
    "underrun_penalty": 5,

    # Trend & fatigue
    "trend_deadband": 5,
    "fatigue_window": 5,
    "high_fatigue_below": 30,
    "medium_fatigue_below": 60,
    "high_motivation_above": 80,
}


@dataclass
class MotivationReport:
    current_level: int = BASELINE_MOTIVATION
    trend: Trend = Trend.STABLE
    fatigue_risk: FatigueRisk = FatigueRisk.LOW
    recommendations: list[str] = field(default_factory=list)
    session_scores: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "current_level": self.current_level,
            "trend": self.trend.value,
            "fatigue_risk": self.fatigue_risk.value,
            "recommendations": list(self.recommendations),
            "session_scores": list(self.session_scores),
        }


def score_session(session: SessionRecord) -> int:
    """Motivation score for one session, clamped to [0, 100]."""
    score = BASELINE_MOTIVATION

    if session.completed:
        score += THRESHOLDS["completed_bonus"]

    rate = session.completion_rate or 0.0
    if rate > THRESHOLDS["high_completion_rate"]:
        score += THRESHOLDS["high_completion_bonus"]
    elif rate < THRESHOLDS["low_completion_rate"]:
        score -= THRESHOLDS["low_completion_penalty"]

    engagement = session.engagement_level or 0.0
    if engagement > THRESHOLDS["high_engagement"]:
        score += THRESHOLDS["high_engagement_bonus"]
    elif engagement < THRESHOLDS["low_engagement"]:
        score -= THRESHOLDS["low_engagement_penalty"]

    if session.planned_duration > 0:
        ratio = session.actual_duration / session.planned_duration
        if ratio > THRESHOLDS["overrun_ratio"]:
            score -= THRESHOLDS["overrun_penalty"]
        elif ratio < THRESHOLDS["underrun_ratio"]:
            score -= THRESHOLDS["underrun_penalty"]

    return int(clamp(score, 0, 100))


def _trend(scores: list[int]) -> Trend:
    if len(scores) < 2:
        return Trend.STABLE
    delta = scores[-1] - scores[-2]
    if delta > THRESHOLDS["trend_deadband"]:
        return Trend.IMPROVING
    if delta < -THRESHOLDS["trend_deadband"]:
        return Trend.DECLINING
    return Trend.STABLE


def _fatigue_risk(scores: list[int]) -> FatigueRisk:
    recent_mean = mean(scores[-THRESHOLDS["fatigue_window"]:], default=BASELINE_MOTIVATION)
    if recent_mean < THRESHOLDS["high_fatigue_below"]:
        return FatigueRisk.HIGH
    if recent_mean < THRESHOLDS["medium_fatigue_below"]:
        return FatigueRisk.MEDIUM
    return FatigueRisk.LOW


def _recommendations(
    level: int,
    trend: Trend,
    risk: FatigueRisk,
    reference: ReferenceData,
) -> list[str]:
    picks: list[str] = []
    interventions = reference.motivation_interventions

    if risk == FatigueRisk.HIGH:
        picks.extend(interventions.get("fatigue_high", ()))
    elif level > THRESHOLDS["high_motivation_above"]:
        picks.extend(interventions.get("high_level", ()))

    if trend == Trend.DECLINING:
        picks.extend(interventions.get("declining", ()))

    picks.extend(reference.preventive_measures.get(risk.value, ()))
    return list(dict.fromkeys(picks))


def track_motivation_level(
    recent_sessions: Optional[list],
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> MotivationReport:
    """
    Compute the motivation/fatigue report for recent sessions.

    Args:
        recent_sessions: SessionRecord instances or raw dicts, oldest first

    Returns:
        MotivationReport; the neutral baseline when there are no sessions
    """
    sessions = coerce_records(recent_sessions)
    if not sessions:
        return MotivationReport()

    scores = [score_session(s) for s in sessions]
    level = scores[-1]
    trend = _trend(scores)
    risk = _fatigue_risk(scores)

    logger.debug(f"Motivation level={level} trend={trend.value} fatigue={risk.value}")

    return MotivationReport(
        current_level=level,
        trend=trend,
        fatigue_risk=risk,
        recommendations=_recommendations(level, trend, risk, reference),
        session_scores=scores,
    )
