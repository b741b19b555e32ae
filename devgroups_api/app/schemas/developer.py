"""
Pydantic schemas for developer profiles.

A profile names a developer, where they are, the ideas (free text
topics) they are interested in and the ids of the social groups they
have joined.  The profile id is the storage key and is not part of the
stored record; ``DeveloperProfileRead`` adds it for API responses.
"""

from typing import List

from pydantic import BaseModel, Field

from devgroups_api.app.core.ids import MAX_ID


class DeveloperProfileCreate(BaseModel):
    """Schema for creating a developer profile."""

    name: str = Field(..., description="Developer display name")
    location: str = Field(..., description="Free text location, e.g. a city")
    ideas: List[str] = Field(default_factory=list, description="Topics the developer is interested in")


class DeveloperProfile(BaseModel):
    """Stored developer profile."""

    name: str
    location: str
    ideas: List[str] = Field(default_factory=list)
    groups: List[int] = Field(default_factory=list, description="Ids of joined social groups")


class DeveloperProfileRead(DeveloperProfile):
    """Developer profile together with its id."""

    id: int = Field(..., ge=0, le=MAX_ID)
