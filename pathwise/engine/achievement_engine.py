"""
Achievement Engine.

Event-driven rule table: (action, event data, profile) -> Achievement.

The engine is stateless, so non-duplication is enforced against the
profile passed in: an id already present on the profile is never returned
again. apply_achievements() folds unlocks back into a new profile (XP and
level), and unlock_achievements() re-checks XP milestones until nothing new
unlocks, so a reward that crosses a threshold is granted in the same call.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Callable, Optional

from loguru import logger

from pathwise.core.models import (
    Achievement,
    AchievementCategory,
    DifficultyLevel,
    UserLearningProfile,
)

XP_PER_LEVEL = 1000
STREAK_ACHIEVEMENT_DAYS = 7
XP_MILESTONE = 1000

ACTION_DAILY_LOGIN = "daily-login"
ACTION_TOPIC_COMPLETED = "topic-completed"
ACTION_XP_GAINED = "xp-gained"


@dataclass(frozen=True)
class AchievementRule:
    id: str
    action: str
    title: str
    description: str
    icon: str
    xp_reward: int
    category: AchievementCategory
    condition: Callable[[UserLearningProfile, dict], bool]

    def build(self, unlocked_at: datetime) -> Achievement:
        return Achievement(
            id=self.id,
            title=self.title,
            description=self.description,
            icon=self.icon,
            xp_reward=self.xp_reward,
            category=self.category,
            unlocked_at=unlocked_at,
        )


ACHIEVEMENT_RULES: tuple[AchievementRule, ...] = (
    AchievementRule(
        id="week-streak",
        action=ACTION_DAILY_LOGIN,
        title="🔥 Week Warrior",
        description="Maintained a 7-day learning streak",
        icon="🔥",
        xp_reward=100,
        category=AchievementCategory.STREAK,
        condition=lambda profile, data: profile.current_streak >= STREAK_ACHIEVEMENT_DAYS,
    ),
    AchievementRule(
        id="advanced-master",
        action=ACTION_TOPIC_COMPLETED,
        title="🎓 Advanced Master",
        description="Completed an advanced topic",
        icon="🎓",
        xp_reward=200,
        category=AchievementCategory.SKILL,
        condition=lambda profile, data: data.get("difficulty") == DifficultyLevel.ADVANCED.value,
    ),
    AchievementRule(
        id="xp-1000",
        action=ACTION_XP_GAINED,
        title="⭐ Rising Star",
        description="Earned 1000 XP points",
        icon="⭐",
        xp_reward=0,
        category=AchievementCategory.LEARNING,
        condition=lambda profile, data: profile.total_xp >= XP_MILESTONE,
    ),
)


def level_for_xp(total_xp: int) -> int:
    return max(0, total_xp) // XP_PER_LEVEL + 1


def check_achievements(
    profile: UserLearningProfile,
    action: str,
    event_data: Optional[dict[str, Any]] = None,
    now: Optional[datetime] = None,
    rules: tuple[AchievementRule, ...] = ACHIEVEMENT_RULES,
) -> list[Achievement]:
    """
    Return achievements newly unlocked by `action`.

    Ids already on the profile are skipped, so repeated triggers never
    produce duplicates.
    """
    data = event_data or {}
    unlocked_at = now or datetime.now()
    owned = profile.achievement_ids

    unlocked = [
        rule.build(unlocked_at)
        for rule in rules
        if rule.action == action and rule.id not in owned and rule.condition(profile, data)
    ]
    for achievement in unlocked:
        logger.debug(f"Achievement unlocked for {profile.id}: {achievement.id}")
    return unlocked


def apply_achievements(
    profile: UserLearningProfile,
    achievements: list[Achievement],
) -> UserLearningProfile:
    """
    Return a new profile with `achievements` granted.

    Ids already present (or repeated within `achievements`) are ignored.
    XP rewards are added and the level recomputed. The input is untouched.
    """
    owned = set(profile.achievement_ids)
    granted: list[Achievement] = []
    for achievement in achievements:
        if achievement.id in owned:
            continue
        owned.add(achievement.id)
        granted.append(achievement)

    if not granted:
        return profile

    total_xp = profile.total_xp + sum(a.xp_reward for a in granted)
    return replace(
        profile,
        achievements=[*profile.achievements, *granted],
        total_xp=total_xp,
        level=max(profile.level, level_for_xp(total_xp)),
    )


def unlock_achievements(
    profile: UserLearningProfile,
    action: str,
    event_data: Optional[dict[str, Any]] = None,
    now: Optional[datetime] = None,
) -> tuple[UserLearningProfile, list[Achievement]]:
    """
    Check, apply and re-check XP milestones until nothing new unlocks.

    Returns:
        (updated profile, every achievement unlocked by this call)
    """
    unlocked = check_achievements(profile, action, event_data, now)
    profile = apply_achievements(profile, unlocked)
    all_unlocked = list(unlocked)

    # Each pass either grants a new unique id or stops, so this terminates.
    while unlocked:
        unlocked = check_achievements(profile, ACTION_XP_GAINED, event_data, now)
        profile = apply_achievements(profile, unlocked)
        all_unlocked.extend(unlocked)

    return profile, all_unlocked
