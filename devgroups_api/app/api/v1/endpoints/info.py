"""
Information endpoint for API v1.

Reports the service name and version together with the number of
stored profiles, groups and messages.  Useful as a health check.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from devgroups_api.app.core.config import settings
from devgroups_api.app.core.db import StorageContext, get_storage

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
def get_info(storage: StorageContext = Depends(get_storage)) -> Dict[str, Any]:
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "counts": {
            "developers": storage.developers.count(),
            "groups": storage.groups.count(),
            "messages": storage.messages.count(),
        },
    }
