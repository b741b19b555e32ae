"""
Top level router for version 1 of the API.

Aggregates the domain routers under a single prefix.  Update this file
when a new domain is added.
"""

from fastapi import APIRouter

from .endpoints import developers, groups, info, messages

router = APIRouter()

router.include_router(developers.router, prefix="/developers", tags=["developers"])
router.include_router(groups.router, prefix="/groups", tags=["groups"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(info.router, prefix="/info", tags=["info"])
