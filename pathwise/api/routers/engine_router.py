"""
Learning Engine API Router.

Endpoints wrapping the stateless LearningBrain:
- Dashboard report (insights, recommendations, prediction, achievements)
- Difficulty adjustment and learning path planning
- Career guidance and industry trends
- Motivation and learning-style detection
- Achievement unlocking

Profiles travel in the request body; nothing is persisted here.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Any, Literal

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from config import get_settings
from pathwise.core.models import SessionRecord, UserLearningProfile
from pathwise.engine.learning_brain import LearningBrain

router = APIRouter()

StyleValue = Literal["visual", "auditory", "kinesthetic", "reading"]
DifficultyValue = Literal["beginner", "intermediate", "advanced"]
PaceValue = Literal["slow", "medium", "fast"]
CategoryValue = Literal["learning", "streak", "skill", "community", "project"]


@lru_cache(maxsize=1)
def get_brain() -> LearningBrain:
    """Shared engine instance; holds only read-only reference data."""
    return LearningBrain.from_settings(get_settings())


# ========================================
# Request Models
# ========================================


class WireModel(BaseModel):
    """Accepts snake_case or camelCase keys; unknown keys are rejected."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class AchievementModel(WireModel):
    """An achievement already unlocked on the profile."""

    id: str
    title: str = ""
    description: str = ""
    icon: str = ""
    xp_reward: int = Field(0, ge=0)
    category: CategoryValue = "learning"
    unlocked_at: datetime | None = None


class LearningPatternModel(WireModel):
    time_of_day: str = "any"
    duration: float = 0
    topic_type: str = "general"
    success_rate: float = 0
    engagement_level: float = 0
    completion_rate: float = 0


class ProfileModel(WireModel):
    """Learner profile as sent by the client."""

    id: str = Field(..., description="Learner identifier")
    name: str = ""
    learning_style: StyleValue = "visual"
    skill_level: DifficultyValue = "beginner"
    interests: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)
    weak_areas: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    preferred_pace: PaceValue = "medium"
    optimal_learning_time: list[str] = Field(default_factory=list)
    completed_topics: list[str] = Field(default_factory=list)
    current_streak: int = Field(0, ge=0)
    total_xp: int = Field(0, ge=0, alias="totalXP")
    level: int = Field(1, ge=1)
    achievements: list[AchievementModel] = Field(default_factory=list)
    learning_patterns: list[LearningPatternModel] = Field(default_factory=list)

    def to_profile(self) -> UserLearningProfile:
        return UserLearningProfile.from_dict(self.model_dump())


class SessionModel(WireModel):
    """One session or interaction log entry."""

    timestamp: datetime | None = Field(None, alias="startTime")
    type: str = "general"
    duration: float = 0
    planned_duration: float = 0
    actual_duration: float = 0
    engagement_score: float | None = None
    completed: bool = False
    completion_rate: float | None = Field(None, ge=0, le=1)
    engagement_level: float | None = None
    performance_score: float | None = None

    def to_record(self) -> SessionRecord:
        return SessionRecord.from_dict(self.model_dump())


class EventModel(BaseModel):
    action: str = Field(..., description="daily-login, topic-completed, xp-gained, ...")
    data: dict[str, Any] = Field(default_factory=dict)


class RecommendationRequest(BaseModel):
    profile: ProfileModel
    history: list[SessionModel] = Field(default_factory=list)
    topic: str | None = Field(None, description="Topic to predict; defaults to the first goal")
    event: EventModel | None = None
    limit: int | None = Field(None, ge=0, le=50, description="Recommendation cap")


class DifficultyRequest(BaseModel):
    current: DifficultyValue
    performance_score: float = Field(..., description="Latest performance score (0-100)")


class LearningPathRequest(BaseModel):
    profile: ProfileModel
    performance_history: list[float] = Field(default_factory=list, description="Scores, oldest first")
    goals: list[str] | None = Field(None, description="Defaults to the profile's goals")


class CareerPathRequest(BaseModel):
    current_skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    timeframe: str = ""


class MotivationRequest(BaseModel):
    sessions: list[SessionModel] = Field(default_factory=list)


class LearningStyleRequest(BaseModel):
    interactions: list[SessionModel] = Field(default_factory=list)


class AchievementRequest(BaseModel):
    profile: ProfileModel
    action: str
    data: dict[str, Any] = Field(default_factory=dict)


# ========================================
# Endpoints
# ========================================


@router.post("/recommendations")
def get_recommendations(
    request: RecommendationRequest,
    brain: LearningBrain = Depends(get_brain),
) -> dict[str, Any]:
    """Insights, recommendations, predictive analysis and pending achievements."""
    try:
        profile = request.profile.to_profile()
        report = brain.build_report(
            profile,
            history=[s.to_record() for s in request.history],
            topic=request.topic,
            event=request.event.model_dump() if request.event else None,
            limit=request.limit,
        )
        return report.to_dict()
    except Exception as exc:
        logger.exception(f"Failed to build recommendations for {request.profile.id}")
        raise HTTPException(status_code=500, detail=str(exc))


@router.post("/difficulty")
def adjust_difficulty(
    request: DifficultyRequest,
    brain: LearningBrain = Depends(get_brain),
) -> dict[str, Any]:
    """Move one tier up or down the difficulty ladder."""
    adjusted = brain.adjust_difficulty(request.current, request.performance_score)
    return {
        "current": request.current,
        "adjusted": adjusted.value,
        "changed": adjusted.value != request.current,
    }


@router.post("/learning-path")
def adapt_learning_path(
    request: LearningPathRequest,
    brain: LearningBrain = Depends(get_brain),
) -> dict[str, Any]:
    """Adaptive multi-week plan from recent scores."""
    try:
        plan = brain.adapt_learning_path(
            request.profile.to_profile(),
            request.performance_history,
            request.goals,
        )
        return plan.to_dict()
    except Exception as exc:
        logger.exception(f"Failed to plan learning path for {request.profile.id}")
        raise HTTPException(status_code=500, detail=str(exc))


@router.post("/career-path")
def predict_career_path(
    request: CareerPathRequest,
    brain: LearningBrain = Depends(get_brain),
) -> dict[str, Any]:
    """Best-matching career path plus the skill-gap picture."""
    try:
        prediction = brain.predict_career_path(
            request.current_skills, request.interests, request.timeframe
        )
        trends = brain.analyze_industry_trends(request.current_skills)
        return {
            "prediction": prediction.to_dict() if prediction else None,
            "trends": trends.to_dict(),
        }
    except Exception as exc:
        logger.exception("Failed to predict career path")
        raise HTTPException(status_code=500, detail=str(exc))


@router.post("/motivation")
def track_motivation(
    request: MotivationRequest,
    brain: LearningBrain = Depends(get_brain),
) -> dict[str, Any]:
    """Motivation level, trend and fatigue risk over recent sessions."""
    report = brain.track_motivation_level([s.to_record() for s in request.sessions])
    return report.to_dict()


@router.post("/learning-style")
def detect_learning_style(
    request: LearningStyleRequest,
    brain: LearningBrain = Depends(get_brain),
) -> dict[str, Any]:
    """Dominant learning style from interaction types."""
    analysis = brain.analyze_learning_style([i.to_record() for i in request.interactions])
    return analysis.to_dict()


@router.post("/achievements")
def unlock_achievements(
    request: AchievementRequest,
    brain: LearningBrain = Depends(get_brain),
) -> dict[str, Any]:
    """Unlock achievements for an event and return the updated profile."""
    try:
        profile, unlocked = brain.unlock_achievements(
            request.profile.to_profile(), request.action, request.data
        )
        if unlocked:
            logger.info(f"Unlocked {[a.id for a in unlocked]} for {profile.id}")
        return {
            "profile": profile.to_dict(),
            "unlocked": [a.to_dict() for a in unlocked],
        }
    except Exception as exc:
        logger.exception(f"Failed to check achievements for {request.profile.id}")
        raise HTTPException(status_code=500, detail=str(exc))
