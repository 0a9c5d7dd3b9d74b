"""
Unit tests for the insight generator.

Run: pytest tests/unit/test_insight_generator.py -v
"""

from pathwise.core.models import DifficultyLevel, InsightType, Priority, UserLearningProfile
from pathwise.engine.insight_generator import generate_insights


def _profile(**kwargs) -> UserLearningProfile:
    return UserLearningProfile(id="user-1", name="Learner", **kwargs)


class TestGenerateInsights:
    def test_empty_profile_yields_nothing(self):
        assert generate_insights(_profile()) == []

    def test_streak_below_threshold_not_celebrated(self):
        assert generate_insights(_profile(current_streak=6)) == []

    def test_streak_at_threshold_celebrated(self):
        insights = generate_insights(_profile(current_streak=7))
        assert [i.type for i in insights] == [InsightType.CELEBRATION]
        assert "7-day" in insights[0].message
        assert insights[0].actionable is False

    def test_custom_threshold(self):
        assert generate_insights(_profile(current_streak=3), streak_threshold=3)

    def test_focus_area_uses_first_weak_area(self):
        insights = generate_insights(_profile(weak_areas=["Testing", "CSS"]))
        assert len(insights) == 1
        assert insights[0].type == InsightType.RECOMMENDATION
        assert insights[0].priority == Priority.HIGH
        assert insights[0].action == "practice-Testing"
        assert "Testing" in insights[0].message

    def test_learning_time_tip(self):
        insights = generate_insights(_profile(optimal_learning_time=["evening"]))
        assert insights[0].type == InsightType.TIP
        assert insights[0].action == "schedule-learning"
        assert "evening" in insights[0].message

    def test_rule_order_preserved(self):
        profile = _profile(
            current_streak=10,
            weak_areas=["Testing"],
            optimal_learning_time=["morning"],
        )
        types = [i.type for i in generate_insights(profile)]
        assert types == [InsightType.CELEBRATION, InsightType.RECOMMENDATION, InsightType.TIP]

    def test_idempotent(self, sample_profile):
        first = [i.to_dict() for i in generate_insights(sample_profile)]
        second = [i.to_dict() for i in generate_insights(sample_profile)]
        assert first == second

    def test_streak_and_weak_area_scenario(self):
        """Intermediate learner on an 8-day streak who struggles with Testing."""
        profile = _profile(
            skill_level=DifficultyLevel.INTERMEDIATE,
            current_streak=8,
            weak_areas=["Testing"],
        )
        insights = generate_insights(profile)

        celebrations = [i for i in insights if i.type == InsightType.CELEBRATION]
        recommendations = [i for i in insights if i.type == InsightType.RECOMMENDATION]
        assert len(celebrations) == 1
        assert len(recommendations) == 1
        assert "Testing" in recommendations[0].message
