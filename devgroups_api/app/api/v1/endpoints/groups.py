"""
Social group endpoints for API v1.

Besides create and read, this module exposes the join operation as
``POST /groups/{group_id}/members``.  A join answers 409 when the
group's idea is not among the developer's ideas.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from devgroups_api.app.api.deps import get_group_service, get_membership_service
from devgroups_api.app.core.ids import MAX_ID
from devgroups_api.app.schemas.group import JoinGroupRequest, SocialGroup, SocialGroupCreate
from devgroups_api.app.services.group_service import GroupService
from devgroups_api.app.services.membership_service import MembershipService

router = APIRouter()


@router.post("/", response_model=SocialGroup, status_code=status.HTTP_201_CREATED)
def create_social_group(
    group_in: SocialGroupCreate,
    service: GroupService = Depends(get_group_service),
) -> SocialGroup:
    """Create a social group with no members."""
    return service.create_group(group_in.name, group_in.idea)


@router.get("/", response_model=List[SocialGroup])
def get_all_social_groups(service: GroupService = Depends(get_group_service)) -> List[SocialGroup]:
    return service.list_groups()


@router.get("/{group_id}", response_model=SocialGroup)
def get_social_group(
    group_id: int = Path(..., ge=0, le=MAX_ID),
    service: GroupService = Depends(get_group_service),
) -> SocialGroup:
    """Retrieve a single group.  Returns 404 if it does not exist."""
    return service.get_group(group_id)


@router.post("/{group_id}/members", status_code=status.HTTP_204_NO_CONTENT)
def join_social_group(
    body: JoinGroupRequest,
    group_id: int = Path(..., ge=0, le=MAX_ID),
    service: MembershipService = Depends(get_membership_service),
) -> None:
    """Join a developer to a group."""
    service.join_group(body.developer_id, group_id)
    return None
