"""
Career & Trend Advisor.
"""
from pathwise.career.career_advisor import (
    CareerPathScore,
    CareerPrediction,
    predict_career_path,
    rank_career_paths,
    score_career_path,
)
from pathwise.career.trend_analyzer import (
    IndustryTrendReport,
    SkillGapAnalysis,
    analyze_industry_trends,
)

__all__ = [
    "predict_career_path",
    "rank_career_paths",
    "score_career_path",
    "CareerPrediction",
    "CareerPathScore",
    "analyze_industry_trends",
    "IndustryTrendReport",
    "SkillGapAnalysis",
]
