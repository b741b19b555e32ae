"""
FastAPI dependencies wiring services to the application's storage.
"""

from fastapi import Depends

from devgroups_api.app.core.db import StorageContext, get_storage
from devgroups_api.app.services import GroupService, MembershipService, MessageService, ProfileService


def get_profile_service(storage: StorageContext = Depends(get_storage)) -> ProfileService:
    return ProfileService(storage)


def get_group_service(storage: StorageContext = Depends(get_storage)) -> GroupService:
    return GroupService(storage)


def get_membership_service(storage: StorageContext = Depends(get_storage)) -> MembershipService:
    return MembershipService(storage)


def get_message_service(storage: StorageContext = Depends(get_storage)) -> MessageService:
    return MessageService(storage)
