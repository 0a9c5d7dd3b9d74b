"""
Unit tests for motivation and fatigue tracking.

Run: pytest tests/unit/test_motivation_tracker.py -v
"""

from pathwise.analytics.motivation_tracker import score_session, track_motivation_level
from pathwise.core.models import FatigueRisk, SessionRecord, Trend
from pathwise.core.reference_data import DEFAULT_REFERENCE

ENGAGED = dict(completed=True, completion_rate=0.9, engagement_level=85,
               planned_duration=30, actual_duration=30)
DISENGAGED: dict = {}


class TestScoreSession:
    def test_engaged_session(self):
        assert score_session(SessionRecord(**ENGAGED)) == 95

    def test_absent_metrics_count_as_zero(self):
        """Missing completion and engagement both trigger their penalties."""
        assert score_session(SessionRecord()) == 15

    def test_overrun_penalty(self):
        session = SessionRecord(completion_rate=0.5, engagement_level=60,
                                planned_duration=30, actual_duration=40)
        assert score_session(session) == 40

    def test_underrun_penalty(self):
        session = SessionRecord(completion_rate=0.5, engagement_level=60,
                                planned_duration=30, actual_duration=10)
        assert score_session(session) == 45

    def test_bounded(self):
        for kwargs in (ENGAGED, DISENGAGED, dict(planned_duration=10, actual_duration=100)):
            assert 0 <= score_session(SessionRecord(**kwargs)) <= 100


class TestTrackMotivationLevel:
    def test_empty_history_baseline(self):
        report = track_motivation_level([])
        assert report.current_level == 50
        assert report.trend == Trend.STABLE
        assert report.fatigue_risk == FatigueRisk.LOW

    def test_none_history_baseline(self):
        assert track_motivation_level(None).to_dict()["current_level"] == 50

    def test_high_fatigue(self):
        report = track_motivation_level([SessionRecord() for _ in range(5)])
        assert report.fatigue_risk == FatigueRisk.HIGH
        assert report.current_level == 15
        for tip in DEFAULT_REFERENCE.motivation_interventions["fatigue_high"]:
            assert tip in report.recommendations
        for tip in DEFAULT_REFERENCE.preventive_measures["high"]:
            assert tip in report.recommendations

    def test_declining_trend(self):
        report = track_motivation_level([SessionRecord(**ENGAGED), SessionRecord()])
        assert report.trend == Trend.DECLINING
        assert report.fatigue_risk == FatigueRisk.MEDIUM
        assert report.session_scores == [95, 15]
        for tip in DEFAULT_REFERENCE.motivation_interventions["declining"]:
            assert tip in report.recommendations

    def test_improving_trend_and_high_level(self):
        report = track_motivation_level([SessionRecord(), SessionRecord(**ENGAGED)])
        assert report.trend == Trend.IMPROVING
        assert report.current_level == 95
        for tip in DEFAULT_REFERENCE.motivation_interventions["high_level"]:
            assert tip in report.recommendations

    def test_accepts_dicts(self):
        report = track_motivation_level([
            {"completed": True, "completionRate": 0.9, "engagementLevel": 85},
        ])
        assert report.current_level == 95

    def test_recommendations_have_no_duplicates(self):
        report = track_motivation_level([SessionRecord(**ENGAGED), SessionRecord()])
        assert len(report.recommendations) == len(set(report.recommendations))
