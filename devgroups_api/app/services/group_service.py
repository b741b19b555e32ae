"""
Service layer for social groups.

A group is created with an empty member list.  Its id is stored both
as the key and inside the record.
"""

import logging
from typing import List

from devgroups_api.app.core.db import StorageContext
from devgroups_api.app.schemas.group import SocialGroup

logger = logging.getLogger(__name__)


class GroupService:
    """Create and read social groups."""

    def __init__(self, storage: StorageContext):
        self.storage = storage

    def create_group(self, name: str, idea: str) -> SocialGroup:
        """Allocate an id, store a new group and return it."""
        with self.storage.transaction():
            group_id = self.storage.group_ids.next()
            group = SocialGroup(id=group_id, name=name, idea=idea, members=[])
            self.storage.groups.insert(group_id, group)
        logger.info("Created social group %s (idea=%r)", group_id, idea)
        return group

    def get_group(self, group_id: int) -> SocialGroup:
        """Return a group; raises ``NotFoundError`` if absent."""
        return self.storage.groups.get(group_id)

    def list_groups(self) -> List[SocialGroup]:
        return self.storage.groups.list()
