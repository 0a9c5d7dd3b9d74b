"""
Learning Brain: engine facade.

Single entry point used by the API and CLI. The instance holds only
read-only reference data and defaults; every method takes the learner
profile (and history) explicitly, so one instance can serve concurrent
requests. Nothing here performs I/O or mutates its inputs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

from pathwise.adaptive.difficulty import adjust_difficulty
from pathwise.adaptive.path_planner import LearningPathPlan, adapt_learning_path
from pathwise.analytics.motivation_tracker import MotivationReport, track_motivation_level
from pathwise.analytics.pattern_analyzer import analyze_learning_patterns, detect_optimal_study_times
from pathwise.analytics.style_detector import StyleAnalysis, analyze_learning_style
from pathwise.career.career_advisor import CareerPrediction, predict_career_path
from pathwise.career.trend_analyzer import IndustryTrendReport, analyze_industry_trends
from pathwise.core.models import (
    Achievement,
    AIInsight,
    DifficultyLevel,
    LearningPattern,
    PredictiveAnalysis,
    UserLearningProfile,
)
from pathwise.core.reference_data import DEFAULT_REFERENCE, ReferenceData, load_reference_data
from pathwise.engine.achievement_engine import check_achievements, unlock_achievements
from pathwise.engine.insight_generator import STREAK_CELEBRATION_DAYS, generate_insights
from pathwise.engine.outcome_predictor import predict_learning_outcome
from pathwise.engine.recommendation_composer import (
    DEFAULT_RECOMMENDATION_LIMIT,
    Recommendation,
    compose_recommendations,
)


@dataclass
class EngineReport:
    """Combined output of build_report()."""

    insights: list[AIInsight] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    predictive: Optional[PredictiveAnalysis] = None
    achievements: list[Achievement] = field(default_factory=list)
    patterns: list[LearningPattern] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "insights": [i.to_dict() for i in self.insights],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "predictive": self.predictive.to_dict() if self.predictive else None,
            "achievements": [a.to_dict() for a in self.achievements],
            "patterns": [p.to_dict() for p in self.patterns],
        }


class LearningBrain:
    """
    Stateless learner-modeling engine.

    Args:
        reference: Reference tables (defaults to the built-in dataset)
        recommendation_limit: Default cap for compose_recommendations
        streak_celebration_days: Streak threshold for the celebration insight
    """

    def __init__(
        self,
        reference: Optional[ReferenceData] = None,
        recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT,
        streak_celebration_days: int = STREAK_CELEBRATION_DAYS,
    ):
        self.reference = reference or DEFAULT_REFERENCE
        self.recommendation_limit = recommendation_limit
        self.streak_celebration_days = streak_celebration_days

    @classmethod
    def from_settings(cls, settings) -> LearningBrain:
        return cls(
            reference=load_reference_data(settings.reference_data_path),
            recommendation_limit=settings.recommendation_limit,
            streak_celebration_days=settings.streak_celebration_days,
        )

    # ------------------------------------------------------------------
    # Profile-level operations
    # ------------------------------------------------------------------

    def generate_insights(self, profile: UserLearningProfile) -> list[AIInsight]:
        return generate_insights(profile, streak_threshold=self.streak_celebration_days)

    def recommend(
        self,
        profile: UserLearningProfile,
        history: Optional[list] = None,
        limit: Optional[int] = None,
    ) -> list[Recommendation]:
        patterns = analyze_learning_patterns(history) if history else None
        return compose_recommendations(
            profile,
            patterns=patterns,
            limit=self.recommendation_limit if limit is None else limit,
        )

    def predict_learning_outcome(
        self,
        profile: UserLearningProfile,
        topic: str,
        timeframe: str = "",
    ) -> PredictiveAnalysis:
        return predict_learning_outcome(profile, topic, timeframe, self.reference)

    def adjust_difficulty(self, current: DifficultyLevel | str, performance_score: float) -> DifficultyLevel:
        return adjust_difficulty(current, performance_score)

    def adapt_learning_path(
        self,
        profile: UserLearningProfile,
        performance_history: Optional[list],
        goals: Optional[list[str]] = None,
    ) -> LearningPathPlan:
        return adapt_learning_path(profile, performance_history, goals, self.reference)

    def check_achievements(
        self,
        profile: UserLearningProfile,
        action: str,
        event_data: Optional[dict[str, Any]] = None,
    ) -> list[Achievement]:
        return check_achievements(profile, action, event_data)

    def unlock_achievements(
        self,
        profile: UserLearningProfile,
        action: str,
        event_data: Optional[dict[str, Any]] = None,
    ) -> tuple[UserLearningProfile, list[Achievement]]:
        return unlock_achievements(profile, action, event_data)

    # ------------------------------------------------------------------
    # History-level operations
    # ------------------------------------------------------------------

    def analyze_learning_patterns(self, history: Optional[list]) -> list[LearningPattern]:
        return analyze_learning_patterns(history)

    def detect_optimal_study_times(self, history: Optional[list], limit: int = 2) -> list[str]:
        return detect_optimal_study_times(history, limit)

    def analyze_learning_style(self, interactions: Optional[list]) -> StyleAnalysis:
        return analyze_learning_style(interactions, self.reference)

    def track_motivation_level(self, sessions: Optional[list]) -> MotivationReport:
        return track_motivation_level(sessions, self.reference)

    # ------------------------------------------------------------------
    # Career guidance
    # ------------------------------------------------------------------

    def predict_career_path(
        self,
        current_skills: Optional[list[str]],
        interests: Optional[list[str]],
        timeframe: str = "",
    ) -> Optional[CareerPrediction]:
        return predict_career_path(current_skills, interests, timeframe, self.reference)

    def analyze_industry_trends(self, user_skills: Optional[list[str]]) -> IndustryTrendReport:
        return analyze_industry_trends(user_skills, self.reference)

    # ------------------------------------------------------------------
    # Aggregate
    # ------------------------------------------------------------------

    def build_report(
        self,
        profile: UserLearningProfile,
        history: Optional[list] = None,
        topic: Optional[str] = None,
        event: Optional[dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> EngineReport:
        """
        Everything a dashboard needs in one call.

        Args:
            profile: Learner profile (read only)
            history: Optional session records for pattern analysis
            topic: Topic to predict; defaults to the first goal, else skipped
            event: Optional {"action": ..., "data": {...}} to check achievements for
            limit: Recommendation cap
        """
        patterns = analyze_learning_patterns(history) if history else []
        recommendations = compose_recommendations(
            profile,
            patterns=patterns or None,
            limit=self.recommendation_limit if limit is None else limit,
        )

        target = topic or (profile.goals[0] if profile.goals else None)
        predictive = self.predict_learning_outcome(profile, target) if target else None

        achievements: list[Achievement] = []
        if event and event.get("action"):
            achievements = check_achievements(profile, event["action"], event.get("data"))

        logger.debug(
            f"Report for {profile.id}: {len(recommendations)} recommendations, "
            f"{len(achievements)} new achievements"
        )

        return EngineReport(
            insights=self.generate_insights(profile),
            recommendations=recommendations,
            predictive=predictive,
            achievements=achievements,
            patterns=patterns,
        )
