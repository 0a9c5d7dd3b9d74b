"""
Learning engine: insights, recommendations, predictions, achievements.

The LearningBrain facade wires every component to one set of reference
tables; the plain functions stay importable for direct use.
"""
from pathwise.engine.achievement_engine import (
    ACHIEVEMENT_RULES,
    AchievementRule,
    apply_achievements,
    check_achievements,
    level_for_xp,
    unlock_achievements,
)
from pathwise.engine.insight_generator import generate_insights
from pathwise.engine.learning_brain import EngineReport, LearningBrain
from pathwise.engine.outcome_predictor import predict_learning_outcome
from pathwise.engine.recommendation_composer import (
    Recommendation,
    compose_recommendations,
    optimal_topic_type,
)

__all__ = [
    "LearningBrain",
    "EngineReport",
    "generate_insights",
    "compose_recommendations",
    "optimal_topic_type",
    "Recommendation",
    "predict_learning_outcome",
    "check_achievements",
    "apply_achievements",
    "unlock_achievements",
    "level_for_xp",
    "AchievementRule",
    "ACHIEVEMENT_RULES",
]
