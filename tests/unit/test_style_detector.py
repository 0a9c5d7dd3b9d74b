"""
Unit tests for learning style detection.

Run: pytest tests/unit/test_style_detector.py -v
"""

from pathwise.analytics.style_detector import analyze_learning_style, detect_learning_style, score_styles
from pathwise.core.models import LearningStyle, SessionRecord


def _interactions(*types: str) -> list[SessionRecord]:
    return [SessionRecord(type=t) for t in types]


class TestDetectLearningStyle:
    def test_no_interactions_defaults_to_visual(self):
        assert detect_learning_style([]) == LearningStyle.VISUAL

    def test_unknown_types_default_to_visual(self):
        assert detect_learning_style(_interactions("mystery", "other")) == LearningStyle.VISUAL

    def test_arg_max_wins(self):
        assert detect_learning_style(_interactions("coding", "project", "video")) == LearningStyle.KINESTHETIC

    def test_tie_between_visual_and_reading_goes_to_visual(self):
        assert detect_learning_style(_interactions("video", "article")) == LearningStyle.VISUAL

    def test_tie_between_auditory_and_reading_goes_to_auditory(self):
        assert detect_learning_style(_interactions("article", "podcast")) == LearningStyle.AUDITORY

    def test_engagement_weights_interactions(self):
        interactions = [
            SessionRecord(type="video", engagement_score=1),
            SessionRecord(type="video", engagement_score=1),
            SessionRecord(type="podcast", engagement_score=5),
        ]
        assert detect_learning_style(interactions) == LearningStyle.AUDITORY

    def test_type_lookup_is_case_insensitive(self):
        assert detect_learning_style(_interactions("Podcast")) == LearningStyle.AUDITORY


class TestAnalyzeLearningStyle:
    def test_confidence_floor(self):
        assert analyze_learning_style(_interactions("video")).confidence == 60

    def test_confidence_grows_with_evidence(self):
        assert analyze_learning_style(_interactions(*["video"] * 14)).confidence == 70

    def test_confidence_cap(self):
        assert analyze_learning_style(_interactions(*["video"] * 40)).confidence == 95

    def test_includes_tips_and_scores(self):
        analysis = analyze_learning_style(_interactions("article", "documentation"))
        assert analysis.style == LearningStyle.READING
        assert analysis.recommendations
        assert analysis.explanation
        assert analysis.to_dict()["scores"]["reading"] == 2.0


class TestScoreStyles:
    def test_every_style_present(self):
        assert set(score_styles([])) == set(LearningStyle)
