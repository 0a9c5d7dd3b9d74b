"""JSON file persistence for learner profiles."""
from pathwise.store.profile_store import PROFILE_DIR, ProfileNotFoundError, ProfileStore

__all__ = ["ProfileStore", "ProfileNotFoundError", "PROFILE_DIR"]
