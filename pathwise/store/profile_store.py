"""
Learner profile persistence.

Profiles are stored as JSON files in ~/.pathwise/profiles/ by default,
one file per learner: {profile_id}.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from loguru import logger

from pathwise.core.models import UserLearningProfile

# Default profile directory
PROFILE_DIR = Path.home() / ".pathwise" / "profiles"


class ProfileNotFoundError(LookupError):
    """Raised when a profile id has no readable file."""

    def __init__(self, profile_id: str):
        super().__init__(f"Profile not found: {profile_id}")
        self.profile_id = profile_id


class ProfileStore:
    """
    Manages profile persistence.

    The engine never touches the store: callers get() a profile, run the
    engine, and put() whatever new profile comes back.
    """

    def __init__(self, profile_dir: Optional[Path] = None):
        self.profile_dir = Path(profile_dir) if profile_dir else PROFILE_DIR
        self.profile_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, profile_id: str) -> Path:
        return self.profile_dir / f"{profile_id}.json"

    def put(self, profile: UserLearningProfile) -> Path:
        """Save a profile to disk, replacing any previous version."""
        filepath = self._path(profile.id)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(profile.to_dict(), f, indent=2)

        logger.info(f"Saved profile {profile.id} to {filepath}")
        return filepath

    def get(self, profile_id: str) -> Optional[UserLearningProfile]:
        """Load a profile by ID. Missing or corrupted files return None."""
        filepath = self._path(profile_id)
        if not filepath.exists():
            return None

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            return UserLearningProfile.from_dict(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring corrupted profile file {filepath}: {e}")
            return None

    def require(self, profile_id: str) -> UserLearningProfile:
        """Like get(), but raises ProfileNotFoundError."""
        profile = self.get(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def delete(self, profile_id: str) -> bool:
        """Delete a profile file."""
        filepath = self._path(profile_id)
        if filepath.exists():
            filepath.unlink()
            return True
        return False

    def list_profiles(self) -> list[UserLearningProfile]:
        """All readable profiles, sorted by name."""
        profiles = []
        for filepath in self.profile_dir.glob("*.json"):
            profile = self.get(filepath.stem)
            if profile is not None:
                profiles.append(profile)

        profiles.sort(key=lambda p: p.name.lower())
        return profiles
