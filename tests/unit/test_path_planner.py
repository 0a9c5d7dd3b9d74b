"""
Unit tests for the multi-week learning path planner.

Run: pytest tests/unit/test_path_planner.py -v
"""

from pathwise.adaptive.path_planner import (
    adapt_learning_path,
    compute_confidence,
    compute_trend,
    estimate_completion_weeks,
    extract_scores,
    recommend_topics,
    score_bracket,
)
from pathwise.core.models import (
    DifficultyLevel,
    LearningStyle,
    Pace,
    SessionRecord,
    Trend,
    UserLearningProfile,
)
from pathwise.core.reference_data import DEFAULT_REFERENCE

RISING_SCORES = [78, 80, 82, 84, 86, 88, 90, 92, 94, 96]


def _profile(**kwargs) -> UserLearningProfile:
    return UserLearningProfile(id="user-1", name="Learner", **kwargs)


class TestComputeTrend:
    def test_improving(self):
        assert compute_trend([60, 60, 60, 70, 70, 70]) == Trend.IMPROVING

    def test_declining(self):
        assert compute_trend([70, 70, 70, 60, 60, 60]) == Trend.DECLINING

    def test_within_deadband(self):
        assert compute_trend([70, 70, 70, 74, 74, 74]) == Trend.STABLE

    def test_too_short(self):
        assert compute_trend([10, 90, 95]) == Trend.STABLE
        assert compute_trend([]) == Trend.STABLE


class TestHelpers:
    def test_extract_scores_from_mixed_inputs(self):
        history = [70, {"score": 80}, {"performanceScore": 90}, SessionRecord(performance_score=60)]
        assert extract_scores(history) == [70.0, 80.0, 90.0, 60.0]

    def test_score_brackets(self):
        assert score_bracket(85) == "high"
        assert score_bracket(84.9) == "steady"
        assert score_bracket(60) == "steady"
        assert score_bracket(59) == "foundation"

    def test_topics_weak_areas_first_and_capped(self):
        topics = recommend_topics(["Testing"], ["Build a React app with Node"], DEFAULT_REFERENCE)
        assert topics == [
            "Testing",
            "React Hooks",
            "State Management",
            "Component Patterns",
            "Express.js",
        ]

    def test_topics_deduplicated(self):
        topics = recommend_topics(["Docker"], ["devops"], DEFAULT_REFERENCE)
        assert topics.count("Docker") == 1

    def test_weeks(self):
        assert estimate_completion_weeks(5, DifficultyLevel.INTERMEDIATE, Pace.MEDIUM) == 15
        assert estimate_completion_weeks(1, DifficultyLevel.BEGINNER, Pace.SLOW) == 3
        assert estimate_completion_weeks(0, DifficultyLevel.ADVANCED, Pace.FAST) == 0

    def test_confidence(self):
        assert compute_confidence([80] * 5, has_goals=True) == 86
        assert compute_confidence([80] * 5, has_goals=False) == 80


class TestAdaptLearningPath:
    def test_strong_improving_learner_is_promoted(self):
        """Ten scores trending upward with a high average move up one tier."""
        profile = _profile(skill_level=DifficultyLevel.INTERMEDIATE)
        plan = adapt_learning_path(profile, RISING_SCORES)

        assert plan.avg_score == 87
        assert plan.trend == Trend.IMPROVING
        assert plan.current_difficulty == DifficultyLevel.INTERMEDIATE
        assert plan.adjusted_difficulty == DifficultyLevel.ADVANCED

    def test_promotion_is_one_tier_from_beginner(self):
        plan = adapt_learning_path(_profile(), RISING_SCORES)
        assert plan.adjusted_difficulty == DifficultyLevel.INTERMEDIATE

    def test_struggling_declining_learner_is_demoted(self):
        profile = _profile(skill_level=DifficultyLevel.INTERMEDIATE)
        plan = adapt_learning_path(profile, [65, 65, 65, 45, 45, 45])
        assert plan.trend == Trend.DECLINING
        assert plan.adjusted_difficulty == DifficultyLevel.BEGINNER

    def test_empty_history_is_neutral(self):
        plan = adapt_learning_path(_profile(skill_level=DifficultyLevel.ADVANCED), [])
        assert plan.avg_score == 50
        assert plan.trend == Trend.STABLE
        assert plan.adjusted_difficulty == DifficultyLevel.ADVANCED
        assert plan.confidence_level == 68

    def test_strategy_from_bracket_and_style(self):
        profile = _profile(learning_style=LearningStyle.KINESTHETIC)
        plan = adapt_learning_path(profile, RISING_SCORES)
        assert plan.learning_strategy == DEFAULT_REFERENCE.strategy_table["high:kinesthetic"]

    def test_goals_default_to_profile(self):
        profile = _profile(goals=["Learn Python"])
        plan = adapt_learning_path(profile, [70])
        assert plan.recommended_topics == list(DEFAULT_REFERENCE.goal_topics["python"])
        assert plan.estimated_completion_weeks == 6

    def test_explicit_goals_override_profile(self):
        profile = _profile(goals=["Learn Python"])
        plan = adapt_learning_path(profile, [70], ["database"])
        assert plan.recommended_topics == list(DEFAULT_REFERENCE.goal_topics["database"])

    def test_to_dict(self):
        data = adapt_learning_path(_profile(), RISING_SCORES).to_dict()
        assert data["trend"] == "improving"
        assert data["adjusted_difficulty"] == "intermediate"
