"""
Service layer for developer profiles.

Profiles are created with an empty ``groups`` list; only the membership
service appends to it later.  Nothing is validated beyond what the
schemas already enforce.
"""

import logging
from typing import List, Tuple

from devgroups_api.app.core.db import StorageContext
from devgroups_api.app.schemas.developer import DeveloperProfile

logger = logging.getLogger(__name__)


class ProfileService:
    """Create and read developer profiles."""

    def __init__(self, storage: StorageContext):
        self.storage = storage

    def create_profile_with_id(self, name: str, location: str, ideas: List[str]) -> Tuple[int, DeveloperProfile]:
        """Allocate an id, store a new profile and return both."""
        profile = DeveloperProfile(name=name, location=location, ideas=list(ideas), groups=[])
        with self.storage.transaction():
            developer_id = self.storage.developer_ids.next()
            self.storage.developers.insert(developer_id, profile)
        logger.info("Created developer profile %s", developer_id)
        return developer_id, profile

    def create_profile(self, name: str, location: str, ideas: List[str]) -> DeveloperProfile:
        """Store a new profile and return it."""
        _, profile = self.create_profile_with_id(name, location, ideas)
        return profile

    def get_profile(self, developer_id: int) -> DeveloperProfile:
        """Return a profile; raises ``NotFoundError`` if absent."""
        return self.storage.developers.get(developer_id)

    def list_profiles(self) -> List[DeveloperProfile]:
        return self.storage.developers.list()

    def list_profiles_with_ids(self) -> List[Tuple[int, DeveloperProfile]]:
        return self.storage.developers.items()
