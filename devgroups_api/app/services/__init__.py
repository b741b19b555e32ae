"""
Service layer.

Each service encapsulates the business rules of one domain and is
constructed with a ``StorageContext``.  Services raise the errors from
``core.errors``; translating them to HTTP responses is the API layer's
job.
"""

from .group_service import GroupService
from .membership_service import MembershipService
from .message_service import MessageService
from .profile_service import ProfileService

__all__ = ["GroupService", "MembershipService", "MessageService", "ProfileService"]
