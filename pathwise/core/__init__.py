"""
Core value types, reference tables and scoring helpers.
"""
from pathwise.core.models import (
    Achievement,
    AchievementCategory,
    AIInsight,
    DifficultyLevel,
    FatigueRisk,
    InsightType,
    LearningPattern,
    LearningStyle,
    Pace,
    PredictiveAnalysis,
    Priority,
    SessionRecord,
    Trend,
    UserLearningProfile,
    coerce_records,
    create_default_user_profile,
)
from pathwise.core.reference_data import (
    DEFAULT_REFERENCE,
    CareerPath,
    CareerPhase,
    ReferenceData,
    ReferenceDataError,
    TrendingSkill,
    load_reference_data,
)

__all__ = [
    # Profile & history
    "UserLearningProfile",
    "LearningPattern",
    "Achievement",
    "AIInsight",
    "PredictiveAnalysis",
    "SessionRecord",
    "coerce_records",
    "create_default_user_profile",
    # Enums
    "LearningStyle",
    "DifficultyLevel",
    "Pace",
    "AchievementCategory",
    "InsightType",
    "Priority",
    "Trend",
    "FatigueRisk",
    # Reference data
    "ReferenceData",
    "ReferenceDataError",
    "CareerPath",
    "CareerPhase",
    "TrendingSkill",
    "DEFAULT_REFERENCE",
    "load_reference_data",
]
