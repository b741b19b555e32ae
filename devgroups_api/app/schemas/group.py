"""
Pydantic schemas for social groups.

A group gathers developers around a single idea.  Unlike profiles and
messages the group keeps its own id inside the stored record.
"""

from typing import List

from pydantic import BaseModel, Field

from devgroups_api.app.core.ids import MAX_ID


class SocialGroupCreate(BaseModel):
    """Schema for creating a social group."""

    name: str = Field(..., description="Group name")
    idea: str = Field(..., description="Topic a developer must share to join")


class SocialGroup(BaseModel):
    """Stored social group."""

    id: int = Field(..., ge=0, le=MAX_ID)
    name: str
    idea: str
    members: List[int] = Field(default_factory=list, description="Ids of member developers")


class JoinGroupRequest(BaseModel):
    """Body of a join request."""

    developer_id: int = Field(..., ge=0, le=MAX_ID)
