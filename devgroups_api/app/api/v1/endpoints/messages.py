"""
Message endpoints for API v1.

Posting answers 403 when the sender has not joined the target group.
Messages are immutable; there is no update or delete.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from devgroups_api.app.api.deps import get_message_service
from devgroups_api.app.core.ids import MAX_ID
from devgroups_api.app.schemas.message import MessageCreate, MessageRead
from devgroups_api.app.services.message_service import MessageService

router = APIRouter()


@router.post("/", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def send_message(
    message_in: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    """Post a message to a group the sender belongs to."""
    message_id, message = service.send_message_with_id(
        message_in.sender_id, message_in.group_id, message_in.content
    )
    return MessageRead(id=message_id, **message.model_dump())


@router.get("/", response_model=List[MessageRead])
def get_all_messages(service: MessageService = Depends(get_message_service)) -> List[MessageRead]:
    return [
        MessageRead(id=message_id, **message.model_dump())
        for message_id, message in service.list_messages_with_ids()
    ]


@router.get("/{message_id}", response_model=MessageRead)
def get_message(
    message_id: int = Path(..., ge=0, le=MAX_ID),
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    """Retrieve a single message.  Returns 404 if it does not exist."""
    message = service.get_message(message_id)
    return MessageRead(id=message_id, **message.model_dump())
