"""
Unit tests for the adaptive difficulty ladder.

Run: pytest tests/unit/test_difficulty.py -v
"""

import pytest

from pathwise.adaptive.difficulty import adjust_difficulty
from pathwise.core.models import DifficultyLevel

BEGINNER = DifficultyLevel.BEGINNER
INTERMEDIATE = DifficultyLevel.INTERMEDIATE
ADVANCED = DifficultyLevel.ADVANCED


class TestAdjustDifficulty:
    """Promote at >= 90, demote at <= 60, otherwise keep."""

    # ========================================
    # Boundaries
    # ========================================

    def test_promote_at_exactly_90(self):
        assert adjust_difficulty(BEGINNER, 90) == INTERMEDIATE

    def test_keep_at_89(self):
        assert adjust_difficulty(BEGINNER, 89) == BEGINNER

    def test_demote_at_exactly_60(self):
        assert adjust_difficulty(ADVANCED, 60) == INTERMEDIATE

    def test_keep_at_61(self):
        assert adjust_difficulty(ADVANCED, 61) == ADVANCED

    @pytest.mark.parametrize(
        "score,expected",
        [
            (90, ADVANCED),
            (89, INTERMEDIATE),
            (60, BEGINNER),
            (61, INTERMEDIATE),
        ],
    )
    def test_boundaries_from_intermediate(self, score, expected):
        assert adjust_difficulty("intermediate", score) == expected

    # ========================================
    # Saturation
    # ========================================

    def test_advanced_stays_advanced_on_high_score(self):
        assert adjust_difficulty(ADVANCED, 100) == ADVANCED

    def test_beginner_stays_beginner_on_low_score(self):
        assert adjust_difficulty(BEGINNER, 0) == BEGINNER

    def test_intermediate_moves_both_ways(self):
        assert adjust_difficulty(INTERMEDIATE, 95) == ADVANCED
        assert adjust_difficulty(INTERMEDIATE, 40) == BEGINNER

    # ========================================
    # Totality
    # ========================================

    @pytest.mark.parametrize("level", list(DifficultyLevel))
    @pytest.mark.parametrize("score", [-10, 0, 59.9, 60, 75, 89.9, 90, 100, 150])
    def test_always_returns_a_ladder_level(self, level, score):
        """Any level and any score lands on the ladder, at most one tier away."""
        result = adjust_difficulty(level, score)
        assert result in DifficultyLevel.ladder()
        assert abs(result.rank - level.rank) <= 1

    def test_accepts_string_levels(self):
        assert adjust_difficulty("intermediate", 92) == ADVANCED

    def test_unknown_string_treated_as_beginner(self):
        assert adjust_difficulty("expert", 70) == BEGINNER
