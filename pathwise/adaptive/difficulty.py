"""
Adaptive difficulty ladder.

beginner <-> intermediate <-> advanced, one tier per adjustment.
"""
from __future__ import annotations

from typing import Union

from loguru import logger

from pathwise.core.models import DifficultyLevel

PROMOTE_AT = 90  # inclusive
DEMOTE_AT = 60  # inclusive


def adjust_difficulty(
    current: Union[DifficultyLevel, str],
    performance_score: float,
) -> DifficultyLevel:
    """
    Promote on score >= 90, demote on score <= 60, otherwise keep.

    The ladder saturates: advanced stays advanced, beginner stays beginner.
    """
    level = DifficultyLevel.from_value(current)

    if performance_score >= PROMOTE_AT:
        adjusted = level.promote()
    elif performance_score <= DEMOTE_AT:
        adjusted = level.demote()
    else:
        adjusted = level

    if adjusted != level:
        logger.debug(f"Difficulty {level.value} -> {adjusted.value} (score={performance_score})")
    return adjusted
