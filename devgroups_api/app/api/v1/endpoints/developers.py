"""
Developer profile endpoints for API v1.

Profiles can be created and read; there is no update or delete.  Group
membership is changed through ``POST /groups/{group_id}/members``.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from devgroups_api.app.api.deps import get_profile_service
from devgroups_api.app.core.ids import MAX_ID
from devgroups_api.app.schemas.developer import DeveloperProfileCreate, DeveloperProfileRead
from devgroups_api.app.services.profile_service import ProfileService

router = APIRouter()


@router.post("/", response_model=DeveloperProfileRead, status_code=status.HTTP_201_CREATED)
def create_developer_profile(
    profile_in: DeveloperProfileCreate,
    service: ProfileService = Depends(get_profile_service),
) -> DeveloperProfileRead:
    """Create a developer profile with no groups."""
    developer_id, profile = service.create_profile_with_id(
        profile_in.name, profile_in.location, profile_in.ideas
    )
    return DeveloperProfileRead(id=developer_id, **profile.model_dump())


@router.get("/", response_model=List[DeveloperProfileRead])
def get_all_developer_profiles(
    service: ProfileService = Depends(get_profile_service),
) -> List[DeveloperProfileRead]:
    """Return every profile in ascending id order."""
    return [
        DeveloperProfileRead(id=developer_id, **profile.model_dump())
        for developer_id, profile in service.list_profiles_with_ids()
    ]


@router.get("/{developer_id}", response_model=DeveloperProfileRead)
def get_developer_profile(
    developer_id: int = Path(..., ge=0, le=MAX_ID),
    service: ProfileService = Depends(get_profile_service),
) -> DeveloperProfileRead:
    """Retrieve a single profile.  Returns 404 if it does not exist."""
    profile = service.get_profile(developer_id)
    return DeveloperProfileRead(id=developer_id, **profile.model_dump())
