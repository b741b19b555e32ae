"""
Service layer for group messages.

Only current members of a group may post to it.  Membership is checked
at send time; messages already stored are never revisited.
"""

import logging
from typing import List, Tuple

from devgroups_api.app.core.db import StorageContext
from devgroups_api.app.core.errors import NotMemberError
from devgroups_api.app.schemas.message import Message

logger = logging.getLogger(__name__)


class MessageService:
    """Send and read messages."""

    def __init__(self, storage: StorageContext):
        self.storage = storage

    def send_message_with_id(self, sender_id: int, group_id: int, content: str) -> Tuple[int, Message]:
        """Store a message from ``sender_id`` to ``group_id``.

        Raises ``NotFoundError`` if the sender or group is missing and
        ``NotMemberError`` if the sender has not joined the group.
        """
        with self.storage.transaction():
            self.storage.developers.get(sender_id)
            group = self.storage.groups.get(group_id)

            if sender_id not in group.members:
                logger.info("Developer %s may not post to group %s", sender_id, group_id)
                raise NotMemberError(sender_id, group_id)

            message_id = self.storage.message_ids.next()
            message = Message(sender_id=sender_id, group_id=group_id, content=content)
            self.storage.messages.insert(message_id, message)
        logger.info("Stored message %s from %s in group %s", message_id, sender_id, group_id)
        return message_id, message

    def send_message(self, sender_id: int, group_id: int, content: str) -> Message:
        _, message = self.send_message_with_id(sender_id, group_id, content)
        return message

    def get_message(self, message_id: int) -> Message:
        """Return a message; raises ``NotFoundError`` if absent."""
        return self.storage.messages.get(message_id)

    def list_messages(self) -> List[Message]:
        return self.storage.messages.list()

    def list_messages_with_ids(self) -> List[Tuple[int, Message]]:
        return self.storage.messages.items()
