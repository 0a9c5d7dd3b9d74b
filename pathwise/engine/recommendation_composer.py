"""
Recommendation Composer.

Merges three sources into one capped list, in this order:
1. Weak areas -> skill-building (high)
2. Interests -> exploration (medium), one tier above the current level
3. Best success-rate topic pattern -> optimized (high), or a fixed fallback
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from pathwise.analytics.pattern_analyzer import FALLBACK_TOPIC_TYPE, MIXED_TOPICS
from pathwise.core.models import LearningPattern, Priority, UserLearningProfile

DEFAULT_RECOMMENDATION_LIMIT = 5


@dataclass
class Recommendation:
    type: str
    title: str
    description: str
    difficulty: str
    estimated_time: str
    priority: str
    reason: str

    def to_dict(self) -> dict:
        return asdict(self)


def optimal_topic_type(patterns: Optional[list[LearningPattern]]) -> str:
    """
    Topic type of the best success-rate pattern, else the fallback.

    Time-of-day aggregates carry the "mixed" topic type and are skipped.
    """
    topic_patterns = [
        p for p in patterns or []
        if p.topic_type and p.topic_type != MIXED_TOPICS
    ]
    if not topic_patterns:
        return FALLBACK_TOPIC_TYPE
    # max() keeps the first pattern on ties
    return max(topic_patterns, key=lambda p: p.success_rate).topic_type


def compose_recommendations(
    profile: UserLearningProfile,
    patterns: Optional[list[LearningPattern]] = None,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> list[Recommendation]:
    """
    Build the capped recommendation list.

    Args:
        profile: Learner profile (read only)
        patterns: Analyzer output; defaults to profile.learning_patterns
        limit: Maximum number of entries returned
    """
    current = profile.skill_level
    recommendations: list[Recommendation] = []

    for area in profile.weak_areas:
        recommendations.append(Recommendation(
            type="skill-building",
            title=f"Master {area}",
            description=f"Focused practice to strengthen your {area} skills",
            difficulty=current.value,
            estimated_time="30-45 minutes",
            priority=Priority.HIGH.value,
            reason="Identified as a weak area in your profile",
        ))

    for interest in profile.interests:
        recommendations.append(Recommendation(
            type="exploration",
            title=f"Advanced {interest} Concepts",
            description=f"Dive deeper into {interest} with advanced topics",
            difficulty=current.promote().value,
            estimated_time="45-60 minutes",
            priority=Priority.MEDIUM.value,
            reason=f"Matches your interest in {interest}",
        ))

    source = profile.learning_patterns if patterns is None else patterns
    topic_type = optimal_topic_type(source)
    recommendations.append(Recommendation(
        type="optimized",
        title=f"{topic_type} Practice Session",
        description="Optimized for your learning style and patterns",
        difficulty=current.value,
        estimated_time="30 minutes",
        priority=Priority.HIGH.value,
        reason="Optimized based on your learning patterns",
    ))

    return recommendations[:max(0, limit)]
