"""
Insight Generator.

Ordered rule list over profile state. Rules are independent and their
output keeps rule order (it is not re-sorted by priority).
"""
from __future__ import annotations

from pathwise.core.models import AIInsight, InsightType, Priority, UserLearningProfile

STREAK_CELEBRATION_DAYS = 7


def _streak_insight(profile: UserLearningProfile, streak_threshold: int) -> AIInsight | None:
    if profile.current_streak < streak_threshold:
        return None
    return AIInsight(
        type=InsightType.CELEBRATION,
        title="🔥 Amazing Streak!",
        message=f"You're on a {profile.current_streak}-day learning streak! Keep it up!",
        actionable=False,
        priority=Priority.MEDIUM,
        category="motivation",
    )


def _focus_area_insight(profile: UserLearningProfile) -> AIInsight | None:
    if not profile.weak_areas:
        return None
    area = profile.weak_areas[0]
    return AIInsight(
        type=InsightType.RECOMMENDATION,
        title="🎯 Focus Area Detected",
        message=f"Consider strengthening your {area} skills",
        actionable=True,
        action=f"practice-{area}",
        priority=Priority.HIGH,
        category="skill-development",
    )


def _learning_time_insight(profile: UserLearningProfile) -> AIInsight | None:
    if not profile.optimal_learning_time or not profile.optimal_learning_time[0]:
        return None
    optimal_time = profile.optimal_learning_time[0]
    return AIInsight(
        type=InsightType.TIP,
        title="⏰ Optimal Learning Time",
        message=f"You learn best around {optimal_time}. Schedule important topics then!",
        actionable=True,
        action="schedule-learning",
        priority=Priority.MEDIUM,
        category="optimization",
    )


def generate_insights(
    profile: UserLearningProfile,
    streak_threshold: int = STREAK_CELEBRATION_DAYS,
) -> list[AIInsight]:
    """
    Evaluate the insight rules against a profile.

    Returns zero, one or many insights in rule order: streak celebration,
    focus-area recommendation, optimal-time tip.
    """
    candidates = (
        _streak_insight(profile, streak_threshold),
        _focus_area_insight(profile),
        _learning_time_insight(profile),
    )
    return [insight for insight in candidates if insight is not None]
