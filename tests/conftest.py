"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pathwise.core.models import DifficultyLevel, SessionRecord, UserLearningProfile  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (API and profile store)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_profile():
    """An intermediate learner with a streak, a weak area and goals."""
    return UserLearningProfile(
        id="user-test-001",
        name="Test Learner",
        skill_level=DifficultyLevel.INTERMEDIATE,
        interests=["Python", "Machine Learning"],
        goals=["Learn machine learning with Python"],
        weak_areas=["Testing"],
        strengths=["Python", "SQL"],
        optimal_learning_time=["morning"],
        completed_topics=["Python Basics", "Advanced Python", "SQL Fundamentals"],
        current_streak=8,
        total_xp=450,
        level=1,
    )


@pytest.fixture
def sample_profile_dict(sample_profile):
    """The sample profile as a JSON-ready dict."""
    return sample_profile.to_dict()


@pytest.fixture
def sample_history():
    """Session log spanning morning and evening, two topic types."""
    return [
        SessionRecord(
            timestamp=datetime(2024, 3, 4, 9, 0),
            type="coding",
            duration=45,
            completed=True,
            completion_rate=0.9,
            engagement_level=85,
            performance_score=92,
        ),
        SessionRecord(
            timestamp=datetime(2024, 3, 5, 10, 30),
            type="coding",
            duration=40,
            completed=True,
            completion_rate=1.0,
            engagement_level=90,
            performance_score=88,
        ),
        SessionRecord(
            timestamp=datetime(2024, 3, 5, 19, 0),
            type="video",
            duration=30,
            completed=False,
            completion_rate=0.5,
            engagement_level=50,
            performance_score=60,
        ),
    ]
