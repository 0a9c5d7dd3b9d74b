"""
Multi-week Learning Path Planner.

Turns recent performance into a plan:
1. Average score over the last 10 records
2. Trend: mean of last 3 vs. the 3 before, with a +/-5 deadband
3. Difficulty: promote when strong and improving, demote when weak and declining
4. Topics: weak areas first, then goal-keyword topic lists (max 5)
5. Strategy: decision table keyed by (score bracket, learning style)
6. Weeks: topics x weeks-per-topic(difficulty) x pace multiplier
7. Confidence: recent average, consistency and goal alignment
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from pathwise.core.models import (
    DifficultyLevel,
    Pace,
    SessionRecord,
    Trend,
    UserLearningProfile,
)
from pathwise.core.reference_data import DEFAULT_REFERENCE, ReferenceData
from pathwise.core.scoring import clamp, mean, population_stddev, round_half_up

NEUTRAL_SCORE = 50.0

PLANNER_CONFIG = {
    "average_window": 10,
    "trend_window": 3,
    "trend_deadband": 5,
    "promote_above": 85,
    "demote_below": 60,
    "max_topics": 5,
    "confidence_window": 5,
    "goal_alignment_with_goals": 80,
    "goal_alignment_without_goals": 60,
}

WEEKS_PER_TOPIC = {
    DifficultyLevel.BEGINNER: 2,
    DifficultyLevel.INTERMEDIATE: 3,
    DifficultyLevel.ADVANCED: 4,
}

PACE_MULTIPLIER = {
    Pace.SLOW: 1.5,
    Pace.MEDIUM: 1.0,
    Pace.FAST: 0.7,
}

# (lower bound inclusive, bracket name), checked top-down
SCORE_BRACKETS = (
    (85, "high"),
    (60, "steady"),
)
LOWEST_BRACKET = "foundation"


@dataclass
class LearningPathPlan:
    avg_score: float
    trend: Trend
    current_difficulty: DifficultyLevel
    adjusted_difficulty: DifficultyLevel
    recommended_topics: list[str] = field(default_factory=list)
    learning_strategy: str = ""
    estimated_completion_weeks: int = 0
    confidence_level: int = 0

    def to_dict(self) -> dict:
        return {
            "avg_score": round(self.avg_score, 1),
            "trend": self.trend.value,
            "current_difficulty": self.current_difficulty.value,
            "adjusted_difficulty": self.adjusted_difficulty.value,
            "recommended_topics": list(self.recommended_topics),
            "learning_strategy": self.learning_strategy,
            "estimated_completion_weeks": self.estimated_completion_weeks,
            "confidence_level": self.confidence_level,
        }


def _score_of(item) -> float:
    if isinstance(item, (int, float)):
        return float(item)
    if isinstance(item, SessionRecord):
        return item.performance_score or 0.0
    if isinstance(item, dict):
        value = item.get("score", item.get("performance_score", item.get("performanceScore")))
        return float(value or 0.0)
    return 0.0


def extract_scores(performance_history: Optional[list]) -> list[float]:
    """Scores from numbers, SessionRecords or dicts, oldest first."""
    return [_score_of(item) for item in performance_history or []]


def compute_trend(scores: list[float]) -> Trend:
    window = PLANNER_CONFIG["trend_window"]
    recent = scores[-window:]
    prior = scores[-2 * window:-window]
    if not recent or not prior:
        return Trend.STABLE

    delta = mean(recent) - mean(prior)
    if delta > PLANNER_CONFIG["trend_deadband"]:
        return Trend.IMPROVING
    if delta < -PLANNER_CONFIG["trend_deadband"]:
        return Trend.DECLINING
    return Trend.STABLE


def score_bracket(avg_score: float) -> str:
    for lower_bound, name in SCORE_BRACKETS:
        if avg_score >= lower_bound:
            return name
    return LOWEST_BRACKET


def _adjusted_difficulty(current: DifficultyLevel, avg_score: float, trend: Trend) -> DifficultyLevel:
    if avg_score > PLANNER_CONFIG["promote_above"] and trend == Trend.IMPROVING:
        return current.promote()
    if avg_score < PLANNER_CONFIG["demote_below"] and trend == Trend.DECLINING:
        return current.demote()
    return current


def recommend_topics(
    weak_areas: list[str],
    goals: list[str],
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> list[str]:
    """Weak areas, then goal-triggered topics; de-duplicated and capped."""
    topics = list(weak_areas)
    for goal in goals:
        goal_text = goal.lower()
        for keyword, keyword_topics in reference.goal_topics.items():
            if keyword in goal_text:
                topics.extend(keyword_topics)

    return list(dict.fromkeys(topics))[:PLANNER_CONFIG["max_topics"]]


def estimate_completion_weeks(topic_count: int, difficulty: DifficultyLevel, pace: Pace) -> int:
    weeks = topic_count * WEEKS_PER_TOPIC[difficulty] * PACE_MULTIPLIER[pace]
    return round_half_up(weeks)


def compute_confidence(scores: list[float], has_goals: bool) -> int:
    window = scores[-PLANNER_CONFIG["confidence_window"]:]
    recent_avg = mean(window, default=NEUTRAL_SCORE)
    consistency = clamp(100 - 2 * population_stddev(window), 0, 100)
    alignment = (
        PLANNER_CONFIG["goal_alignment_with_goals"]
        if has_goals
        else PLANNER_CONFIG["goal_alignment_without_goals"]
    )
    return round_half_up(0.4 * recent_avg + 0.3 * consistency + 0.3 * alignment)


def adapt_learning_path(
    profile: UserLearningProfile,
    performance_history: Optional[list],
    current_goals: Optional[list[str]] = None,
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> LearningPathPlan:
    """
    Build an adaptive multi-week plan from recent performance.

    Args:
        profile: Learner profile (read only)
        performance_history: Scores (0-100) as numbers, SessionRecords or
            dicts with a `score`, oldest first
        current_goals: Goals to plan for; defaults to profile.goals
        reference: Goal-topic and strategy tables

    Returns:
        LearningPathPlan
    """
    goals = profile.goals if current_goals is None else current_goals
    scores = extract_scores(performance_history)

    avg_score = mean(scores[-PLANNER_CONFIG["average_window"]:], default=NEUTRAL_SCORE)
    trend = compute_trend(scores)
    adjusted = _adjusted_difficulty(profile.skill_level, avg_score, trend)

    topics = recommend_topics(profile.weak_areas, goals, reference)
    strategy = reference.strategy_for(score_bracket(avg_score), profile.learning_style.value)

    plan = LearningPathPlan(
        avg_score=avg_score,
        trend=trend,
        current_difficulty=profile.skill_level,
        adjusted_difficulty=adjusted,
        recommended_topics=topics,
        learning_strategy=strategy,
        estimated_completion_weeks=estimate_completion_weeks(
            len(topics), adjusted, profile.preferred_pace
        ),
        confidence_level=compute_confidence(scores, bool(goals)),
    )

    logger.debug(
        f"Learning path for {profile.id}: avg={avg_score:.1f} trend={trend.value} "
        f"difficulty={profile.skill_level.value}->{adjusted.value} topics={len(topics)}"
    )
    return plan
