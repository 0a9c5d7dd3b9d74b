"""
Unit tests for the outcome predictor.

Run: pytest tests/unit/test_outcome_predictor.py -v
"""

from pathwise.core.models import DifficultyLevel, UserLearningProfile
from pathwise.core.reference_data import DEFAULT_REFERENCE
from pathwise.engine.outcome_predictor import (
    DEFAULT_TIME_TO_GOAL,
    completion_probability,
    predict_learning_outcome,
    related_experience,
)


def _profile(**kwargs) -> UserLearningProfile:
    return UserLearningProfile(id="user-1", name="Learner", **kwargs)


class TestRelatedExperience:
    def test_counts_case_insensitive_substring_matches(self):
        profile = _profile(completed_topics=["Python Basics", "advanced PYTHON", "SQL"])
        assert related_experience(profile, "python") == 0.2

    def test_not_capped_at_one(self):
        profile = _profile(completed_topics=[f"React part {i}" for i in range(25)])
        assert related_experience(profile, "react") == 2.5


class TestCompletionProbability:
    def test_beginner_baseline(self):
        """0.5 + 0.7 * 0.2 = 0.64."""
        assert completion_probability(_profile(), "Rust") == 64

    def test_intermediate_bonus(self):
        profile = _profile(skill_level=DifficultyLevel.INTERMEDIATE)
        assert completion_probability(profile, "Rust") == 74

    def test_streak_bonus_requires_more_than_five_days(self):
        assert completion_probability(_profile(current_streak=5), "Rust") == 64
        assert completion_probability(_profile(current_streak=6), "Rust") == 74

    def test_related_experience_adds_weight(self):
        profile = _profile(completed_topics=["Rust ownership", "Rust traits"])
        # 0.5 + 0.2 * 0.2 + 0.14 = 0.68
        assert completion_probability(profile, "rust") == 68

    def test_clamped_at_95_for_adversarial_profile(self):
        profile = _profile(
            skill_level=DifficultyLevel.ADVANCED,
            current_streak=365,
            completed_topics=[f"Go chapter {i}" for i in range(1000)],
        )
        assert completion_probability(profile, "go") == 95

    def test_never_negative(self):
        assert completion_probability(_profile(), "x", learning_velocity=-100) == 0


class TestPredictLearningOutcome:
    def test_returns_template_lists(self):
        analysis = predict_learning_outcome(_profile(), "Kubernetes", "3 months")

        assert analysis.completion_probability == 64
        assert analysis.estimated_time_to_goal == DEFAULT_TIME_TO_GOAL
        assert analysis.recommended_actions == list(DEFAULT_REFERENCE.outcome_actions)
        assert analysis.potential_obstacles == list(DEFAULT_REFERENCE.outcome_obstacles)
        assert analysis.success_factors == list(DEFAULT_REFERENCE.outcome_success_factors)

    def test_to_dict_is_json_ready(self):
        data = predict_learning_outcome(_profile(), "Kubernetes").to_dict()
        assert data["completion_probability"] == 64
        assert isinstance(data["recommended_actions"], list)
