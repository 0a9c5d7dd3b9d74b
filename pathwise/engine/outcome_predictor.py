"""
Outcome Predictor.

Multi-factor completion probability for a topic:

    p = 0.5
      + 0.3 (advanced) | 0.1 (intermediate)
      + 0.2 * related_experience      # matches / 10, NOT clamped
      + 0.2 * learning_velocity
      + 0.1 (streak > 5)

Only the final sum is clamped to [0, 0.95]; it is reported as an integer
percentage. Clamping related_experience on its own would change the result
for profiles with long topic histories.
"""
from __future__ import annotations

from loguru import logger

from pathwise.core.models import DifficultyLevel, PredictiveAnalysis, UserLearningProfile
from pathwise.core.reference_data import DEFAULT_REFERENCE, ReferenceData
from pathwise.core.scoring import clamp, round_half_up

BASE_PROBABILITY = 0.5
SKILL_BONUS = {
    DifficultyLevel.ADVANCED: 0.3,
    DifficultyLevel.INTERMEDIATE: 0.1,
    DifficultyLevel.BEGINNER: 0.0,
}
EXPERIENCE_WEIGHT = 0.2
EXPERIENCE_NORMALIZER = 10
VELOCITY_WEIGHT = 0.2
STREAK_BONUS = 0.1
STREAK_BONUS_ABOVE = 5
MAX_PROBABILITY = 0.95

# Fixed placeholders; not derived from history.
DEFAULT_LEARNING_VELOCITY = 0.7
DEFAULT_TIME_TO_GOAL = "2-3 weeks"


def related_experience(profile: UserLearningProfile, topic: str) -> float:
    """Completed topics containing `topic` (case-insensitive), divided by 10."""
    needle = topic.lower()
    related = [t for t in profile.completed_topics if needle in t.lower()]
    return len(related) / EXPERIENCE_NORMALIZER


def completion_probability(
    profile: UserLearningProfile,
    topic: str,
    learning_velocity: float = DEFAULT_LEARNING_VELOCITY,
) -> int:
    probability = BASE_PROBABILITY
    probability += SKILL_BONUS[profile.skill_level]
    probability += related_experience(profile, topic) * EXPERIENCE_WEIGHT
    probability += learning_velocity * VELOCITY_WEIGHT
    if profile.current_streak > STREAK_BONUS_ABOVE:
        probability += STREAK_BONUS

    return round_half_up(clamp(probability, 0.0, MAX_PROBABILITY) * 100)


def predict_learning_outcome(
    profile: UserLearningProfile,
    topic: str,
    timeframe: str = "",
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> PredictiveAnalysis:
    """
    Predict the chance of completing `topic` within `timeframe`.

    The advisory lists come from fixed templates; they do not vary by topic.
    """
    probability = completion_probability(profile, topic)
    logger.debug(f"Outcome for {profile.id} on '{topic}' ({timeframe or 'open'}): {probability}%")

    return PredictiveAnalysis(
        completion_probability=probability,
        estimated_time_to_goal=DEFAULT_TIME_TO_GOAL,
        recommended_actions=list(reference.outcome_actions),
        potential_obstacles=list(reference.outcome_obstacles),
        success_factors=list(reference.outcome_success_factors),
    )
