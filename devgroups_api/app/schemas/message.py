"""
Pydantic schemas for group messages.

Messages are immutable once stored.
"""

from pydantic import BaseModel, Field

from devgroups_api.app.core.ids import MAX_ID


class MessageCreate(BaseModel):
    """Schema for posting a message to a group."""

    sender_id: int = Field(..., ge=0, le=MAX_ID, description="Id of the sending developer")
    group_id: int = Field(..., ge=0, le=MAX_ID, description="Id of the target group")
    content: str = Field(..., description="Message text")


class Message(BaseModel):
    """Stored message."""

    sender_id: int
    group_id: int
    content: str


class MessageRead(Message):
    """Message together with its id."""

    id: int = Field(..., ge=0, le=MAX_ID)
