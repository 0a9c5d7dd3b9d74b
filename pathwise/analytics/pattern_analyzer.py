"""
Learning Pattern Analyzer.

Aggregates raw session/interaction records into per-bucket statistics:
- Time-of-day buckets (morning, afternoon, evening, night)
- Topic-type buckets (the record's `type`)

Each bucket yields one LearningPattern with mean success rate, engagement
and completion. Empty history yields a single neutral pattern instead of
failing.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from loguru import logger

from pathwise.core.models import LearningPattern, SessionRecord, coerce_records
from pathwise.core.scoring import mean

ANY_TIME = "any"
MIXED_TOPICS = "mixed"
FALLBACK_TOPIC_TYPE = "hands-on-coding"
NEUTRAL_SCORE = 50.0
DEFAULT_SESSION_MINUTES = 30.0

# (label, start hour inclusive, end hour exclusive); anything else is night
TIME_BUCKETS = (
    ("morning", 5, 12),
    ("afternoon", 12, 17),
    ("evening", 17, 21),
)
NIGHT = "night"


def default_pattern() -> LearningPattern:
    """Neutral pattern returned when there is no history to analyze."""
    return LearningPattern(
        time_of_day=ANY_TIME,
        duration=DEFAULT_SESSION_MINUTES,
        topic_type=FALLBACK_TOPIC_TYPE,
        success_rate=NEUTRAL_SCORE,
        engagement_level=NEUTRAL_SCORE,
        completion_rate=NEUTRAL_SCORE,
    )


def time_of_day_bucket(timestamp: Optional[datetime]) -> str:
    if timestamp is None:
        return ANY_TIME
    hour = timestamp.hour
    for label, start, end in TIME_BUCKETS:
        if start <= hour < end:
            return label
    return NIGHT


def _completion_percent(record: SessionRecord) -> float:
    if record.completion_rate is not None:
        return record.completion_rate * 100
    return 100.0 if record.completed else 0.0


def _aggregate(records: list[SessionRecord], time_of_day: str, topic_type: str) -> LearningPattern:
    return LearningPattern(
        time_of_day=time_of_day,
        duration=round(mean([r.effective_duration for r in records]), 1),
        topic_type=topic_type,
        success_rate=round(mean([r.performance_score or 0.0 for r in records]), 1),
        engagement_level=round(mean([r.engagement_level or 0.0 for r in records]), 1),
        completion_rate=round(mean([_completion_percent(r) for r in records]), 1),
    )


def _group(records: Iterable[SessionRecord], key) -> dict[str, list[SessionRecord]]:
    groups: dict[str, list[SessionRecord]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


def analyze_time_patterns(records: list[SessionRecord]) -> list[LearningPattern]:
    """One pattern per time-of-day bucket present in the history."""
    groups = _group(records, lambda r: time_of_day_bucket(r.timestamp))
    return [_aggregate(group, bucket, MIXED_TOPICS) for bucket, group in groups.items()]


def analyze_topic_patterns(records: list[SessionRecord]) -> list[LearningPattern]:
    """One pattern per topic type present in the history."""
    groups = _group(records, lambda r: r.type or "general")
    return [_aggregate(group, ANY_TIME, topic) for topic, group in groups.items()]


def analyze_learning_patterns(records: Optional[list]) -> list[LearningPattern]:
    """
    Aggregate history into time-of-day and topic-type patterns.

    Args:
        records: SessionRecord instances or raw dicts, oldest first

    Returns:
        Time patterns followed by topic patterns, or [default_pattern()]
        when the history is empty
    """
    sessions = coerce_records(records)
    if not sessions:
        return [default_pattern()]

    patterns = analyze_time_patterns(sessions) + analyze_topic_patterns(sessions)
    logger.debug(f"Analyzed {len(sessions)} records into {len(patterns)} patterns")
    return patterns


def detect_optimal_study_times(records: Optional[list], limit: int = 2) -> list[str]:
    """
    Rank time-of-day buckets by mean success rate, then engagement.

    Records without a usable timestamp are ignored.
    """
    sessions = [r for r in coerce_records(records) if r.timestamp is not None]
    if not sessions:
        return []

    patterns = analyze_time_patterns(sessions)
    ranked = sorted(
        patterns,
        key=lambda p: (p.success_rate, p.engagement_level),
        reverse=True,
    )
    return [p.time_of_day for p in ranked[:limit]]
