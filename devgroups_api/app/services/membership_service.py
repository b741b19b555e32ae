"""
Membership between developers and social groups.

Joining is gated on ideas: a developer may join a group only if the
group's idea is one of the developer's ideas (exact text match).  A
successful join appends the developer to ``group.members`` and the
group to ``developer.groups``.  Both writes happen in one storage
transaction, so a failure in the second rolls back the first.

Joining the same group twice appends the pair twice.  This is kept
as-is and only reported with a warning.
"""

import logging

from devgroups_api.app.core.db import StorageContext
from devgroups_api.app.core.errors import IdeaMismatchError

logger = logging.getLogger(__name__)


class MembershipService:
    """Join developers to social groups."""

    def __init__(self, storage: StorageContext):
        self.storage = storage

    def join_group(self, developer_id: int, group_id: int) -> None:
        """Add ``developer_id`` to ``group_id``.

        Raises ``NotFoundError`` if either record is missing and
        ``IdeaMismatchError`` if the group's idea is not among the
        developer's ideas.  Nothing is written when an error is raised.
        """
        with self.storage.transaction():
            developer = self.storage.developers.get(developer_id)
            group = self.storage.groups.get(group_id)

            if group.idea not in developer.ideas:
                logger.info(
                    "Developer %s rejected from group %s: idea %r not in %r",
                    developer_id,
                    group_id,
                    group.idea,
                    developer.ideas,
                )
                raise IdeaMismatchError(developer_id, group_id)

            if developer_id in group.members:
                logger.warning("Developer %s joined group %s again", developer_id, group_id)

            group.members.append(developer_id)
            self.storage.groups.insert(group_id, group)

            developer.groups.append(group_id)
            self.storage.developers.insert(developer_id, developer)

        logger.info("Developer %s joined group %s", developer_id, group_id)
