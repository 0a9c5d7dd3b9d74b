"""
Adaptive Controller.

Components:
- adjust_difficulty: three-tier promote/demote ladder
- adapt_learning_path: multi-week planner over recent performance
"""
from pathwise.adaptive.difficulty import DEMOTE_AT, PROMOTE_AT, adjust_difficulty
from pathwise.adaptive.path_planner import (
    LearningPathPlan,
    adapt_learning_path,
    compute_trend,
    estimate_completion_weeks,
    recommend_topics,
)

__all__ = [
    "adjust_difficulty",
    "PROMOTE_AT",
    "DEMOTE_AT",
    "adapt_learning_path",
    "LearningPathPlan",
    "compute_trend",
    "estimate_completion_weeks",
    "recommend_topics",
]
