"""
Learner analytics over raw session history.

Components:
- Pattern analyzer: per time-of-day / topic-type performance buckets
- Style detector: arg-max learning style from interaction types
- Motivation tracker: bounded motivation score and fatigue risk
"""
from pathwise.analytics.motivation_tracker import (
    MotivationReport,
    score_session,
    track_motivation_level,
)
from pathwise.analytics.pattern_analyzer import (
    analyze_learning_patterns,
    default_pattern,
    detect_optimal_study_times,
    time_of_day_bucket,
)
from pathwise.analytics.style_detector import (
    StyleAnalysis,
    analyze_learning_style,
    detect_learning_style,
)

__all__ = [
    "analyze_learning_patterns",
    "default_pattern",
    "detect_optimal_study_times",
    "time_of_day_bucket",
    "detect_learning_style",
    "analyze_learning_style",
    "StyleAnalysis",
    "track_motivation_level",
    "score_session",
    "MotivationReport",
]
