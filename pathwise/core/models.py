"""
Learner Profile & History Model.

Value types read and written by every engine component:
- UserLearningProfile: durable learner record (skill tier, interests, streak, XP)
- LearningPattern: aggregated performance for a time-of-day or topic bucket
- Achievement: one-time milestone granting XP
- AIInsight: short advisory message derived from profile state
- PredictiveAnalysis: result of a single outcome prediction
- SessionRecord: one raw interaction/session log entry

The engine never persists or mutates these objects. Callers load a profile,
pass it in, and save whatever new profile the engine hands back.
"""
from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


# =============================================================================
# Enums
# =============================================================================


class LearningStyle(str, Enum):
    """Learning style buckets, in canonical tie-break order."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"
    READING = "reading"

    @classmethod
    def from_value(cls, value: Any) -> LearningStyle:
        try:
            return cls(value)
        except ValueError:
            return cls.VISUAL


class DifficultyLevel(str, Enum):
    """
    Three-tier difficulty ladder.

    Declaration order is the ladder order. promote()/demote() move exactly
    one tier and saturate at the ends.
    """

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def ladder(cls) -> list[DifficultyLevel]:
        return list(cls)

    @classmethod
    def from_value(cls, value: Any) -> DifficultyLevel:
        try:
            return cls(value)
        except ValueError:
            return cls.BEGINNER

    @property
    def rank(self) -> int:
        return DifficultyLevel.ladder().index(self)

    def promote(self) -> DifficultyLevel:
        ladder = DifficultyLevel.ladder()
        return ladder[min(self.rank + 1, len(ladder) - 1)]

    def demote(self) -> DifficultyLevel:
        ladder = DifficultyLevel.ladder()
        return ladder[max(self.rank - 1, 0)]


class Pace(str, Enum):
    """Preferred learning pace."""

    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"

    @classmethod
    def from_value(cls, value: Any) -> Pace:
        try:
            return cls(value)
        except ValueError:
            return cls.MEDIUM


class AchievementCategory(str, Enum):
    LEARNING = "learning"
    STREAK = "streak"
    SKILL = "skill"
    COMMUNITY = "community"
    PROJECT = "project"


class InsightType(str, Enum):
    RECOMMENDATION = "recommendation"
    WARNING = "warning"
    CELEBRATION = "celebration"
    TIP = "tip"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Trend(str, Enum):
    """Direction of a score series."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class FatigueRisk(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# =============================================================================
# Helpers
# =============================================================================


def _get(data: dict, key: str, alias: Optional[str] = None, default: Any = None) -> Any:
    """Read a snake_case key, falling back to its camelCase wire alias."""
    if key in data and data[key] is not None:
        return data[key]
    if alias and alias in data and data[alias] is not None:
        return data[alias]
    return default


def _non_negative_int(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class LearningPattern:
    """Aggregated statistics for a time-of-day or topic-type bucket."""

    time_of_day: str
    duration: float  # minutes
    topic_type: str
    success_rate: float  # 0-100
    engagement_level: float  # 0-100
    completion_rate: float  # 0-100

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> LearningPattern:
        return cls(
            time_of_day=str(_get(data, "time_of_day", "timeOfDay", "any")),
            duration=float(_get(data, "duration", default=0) or 0),
            topic_type=str(_get(data, "topic_type", "topicType", "general")),
            success_rate=float(_get(data, "success_rate", "successRate", 0) or 0),
            engagement_level=float(_get(data, "engagement_level", "engagementLevel", 0) or 0),
            completion_rate=float(_get(data, "completion_rate", "completionRate", 0) or 0),
        )


@dataclass
class Achievement:
    """An unlockable milestone. Ids are unique per profile."""

    id: str
    title: str
    description: str
    icon: str
    xp_reward: int
    category: AchievementCategory
    unlocked_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "unlocked_at": self.unlocked_at.isoformat(),
            "xp_reward": self.xp_reward,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Achievement:
        try:
            category = AchievementCategory(_get(data, "category", default="learning"))
        except ValueError:
            category = AchievementCategory.LEARNING
        return cls(
            id=str(data["id"]),
            title=str(_get(data, "title", default="")),
            description=str(_get(data, "description", default="")),
            icon=str(_get(data, "icon", default="")),
            xp_reward=_non_negative_int(_get(data, "xp_reward", "xpReward", 0)),
            category=category,
            unlocked_at=_parse_datetime(_get(data, "unlocked_at", "unlockedAt")) or datetime.now(),
        )


@dataclass
class UserLearningProfile:
    """
    Durable learner record.

    Owned by the caller's profile store. Engine functions take it as an
    explicit argument and return new instances instead of mutating it.
    """

    id: str
    name: str
    learning_style: LearningStyle = LearningStyle.VISUAL
    skill_level: DifficultyLevel = DifficultyLevel.BEGINNER
    interests: list[str] = field(default_factory=list)
    goals: list[str] = field(default_factory=list)
    weak_areas: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    preferred_pace: Pace = Pace.MEDIUM
    optimal_learning_time: list[str] = field(default_factory=list)
    completed_topics: list[str] = field(default_factory=list)
    current_streak: int = 0
    total_xp: int = 0
    level: int = 1
    achievements: list[Achievement] = field(default_factory=list)
    learning_patterns: list[LearningPattern] = field(default_factory=list)

    @property
    def achievement_ids(self) -> set[str]:
        return {a.id for a in self.achievements}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "learning_style": self.learning_style.value,
            "skill_level": self.skill_level.value,
            "interests": list(self.interests),
            "goals": list(self.goals),
            "weak_areas": list(self.weak_areas),
            "strengths": list(self.strengths),
            "preferred_pace": self.preferred_pace.value,
            "optimal_learning_time": list(self.optimal_learning_time),
            "completed_topics": list(self.completed_topics),
            "current_streak": self.current_streak,
            "total_xp": self.total_xp,
            "level": self.level,
            "achievements": [a.to_dict() for a in self.achievements],
            "learning_patterns": [p.to_dict() for p in self.learning_patterns],
        }

    @classmethod
    def from_dict(cls, data: dict) -> UserLearningProfile:
        """
        Build a profile, defaulting anything optional.

        Only `id` is required. Unknown enum values fall back to the defaults;
        strict validation belongs at the API boundary.
        """
        return cls(
            id=str(data["id"]),
            name=str(_get(data, "name", default="")),
            learning_style=LearningStyle.from_value(_get(data, "learning_style", "learningStyle")),
            skill_level=DifficultyLevel.from_value(_get(data, "skill_level", "skillLevel")),
            interests=list(_get(data, "interests", default=[])),
            goals=list(_get(data, "goals", default=[])),
            weak_areas=list(_get(data, "weak_areas", "weakAreas", [])),
            strengths=list(_get(data, "strengths", default=[])),
            preferred_pace=Pace.from_value(_get(data, "preferred_pace", "preferredPace")),
            optimal_learning_time=list(_get(data, "optimal_learning_time", "optimalLearningTime", [])),
            completed_topics=list(_get(data, "completed_topics", "completedTopics", [])),
            current_streak=_non_negative_int(_get(data, "current_streak", "currentStreak", 0)),
            total_xp=_non_negative_int(_get(data, "total_xp", "totalXP", 0)),
            level=max(1, _non_negative_int(_get(data, "level", default=1))),
            achievements=[Achievement.from_dict(a) for a in _get(data, "achievements", default=[])],
            learning_patterns=[
                LearningPattern.from_dict(p)
                for p in _get(data, "learning_patterns", "learningPatterns", [])
            ],
        )


@dataclass
class AIInsight:
    """Short advisory message. Recomputed on every call."""

    type: InsightType
    title: str
    message: str
    actionable: bool
    priority: Priority
    category: str
    action: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "actionable": self.actionable,
            "action": self.action,
            "priority": self.priority.value,
            "category": self.category,
        }


@dataclass
class PredictiveAnalysis:
    """Forward-looking estimate for a single topic/goal."""

    completion_probability: int  # 0-95
    estimated_time_to_goal: str
    recommended_actions: list[str] = field(default_factory=list)
    potential_obstacles: list[str] = field(default_factory=list)
    success_factors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SessionRecord:
    """
    One entry of the session/interaction log.

    Optional metrics stay None when absent; consumers treat None as zero/false.
    Rates are fractions (0-1); engagement and performance are 0-100.
    """

    timestamp: Optional[datetime] = None
    type: str = "general"
    duration: float = 0.0  # minutes
    planned_duration: float = 0.0
    actual_duration: float = 0.0
    engagement_score: Optional[float] = None
    completed: bool = False
    completion_rate: Optional[float] = None
    engagement_level: Optional[float] = None
    performance_score: Optional[float] = None

    @property
    def effective_duration(self) -> float:
        return self.actual_duration or self.duration

    def to_dict(self) -> dict:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat() if self.timestamp else None
        return data

    @classmethod
    def from_dict(cls, data: dict) -> SessionRecord:
        return cls(
            timestamp=_parse_datetime(_get(data, "timestamp", "startTime")),
            type=str(_get(data, "type", default="general")),
            duration=float(_get(data, "duration", default=0) or 0),
            planned_duration=float(_get(data, "planned_duration", "plannedDuration", 0) or 0),
            actual_duration=float(_get(data, "actual_duration", "actualDuration", 0) or 0),
            engagement_score=_optional_float(_get(data, "engagement_score", "engagementScore")),
            completed=bool(_get(data, "completed", default=False)),
            completion_rate=_optional_float(_get(data, "completion_rate", "completionRate")),
            engagement_level=_optional_float(_get(data, "engagement_level", "engagementLevel")),
            performance_score=_optional_float(_get(data, "performance_score", "performanceScore")),
        )


def coerce_records(records: Optional[list]) -> list[SessionRecord]:
    """Accept SessionRecord instances or plain dicts."""
    if not records:
        return []
    return [r if isinstance(r, SessionRecord) else SessionRecord.from_dict(r) for r in records]


def create_default_user_profile(name: str) -> UserLearningProfile:
    """Fresh profile created at signup."""
    return UserLearningProfile(
        id=f"user-{int(time.time() * 1000)}",
        name=name,
    )
