"""
Domain error types.

Every error a service can raise derives from ``DevGroupsError`` and
carries a human readable ``message``, a machine ``code`` and a
``details`` dict.  ``status_code`` is the HTTP status the API layer
answers with; services themselves know nothing about HTTP.

Errors are recoverable: the caller may retry with corrected input.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DevGroupsError(Exception):
    """Base class for all domain errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "DEVGROUPS_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "code": self.code}


# Entity kind -> label used in "not found" messages.
_KIND_LABELS = {
    "developer": "Developer",
    "group": "Social group",
    "message": "Message",
}


class NotFoundError(DevGroupsError):
    """No record of ``kind`` is stored under ``entity_id``."""

    status_code = 404

    def __init__(self, kind: str, entity_id: int) -> None:
        label = _KIND_LABELS.get(kind, kind.capitalize())
        super().__init__(
            f"{label} with id={entity_id} not found",
            code="NOT_FOUND",
            details={"kind": kind, "id": entity_id},
        )
        self.kind = kind
        self.entity_id = entity_id


class IdeaMismatchError(DevGroupsError):
    """The group's idea is not among the developer's ideas."""

    status_code = 409

    def __init__(self, developer_id: int, group_id: int) -> None:
        super().__init__(
            f"Developer {developer_id} cannot join group {group_id} "
            "because their ideas do not match",
            code="IDEA_MISMATCH",
            details={"developer_id": developer_id, "group_id": group_id},
        )
        self.developer_id = developer_id
        self.group_id = group_id


class NotMemberError(DevGroupsError):
    """The sender has not joined the group it tries to post to."""

    status_code = 403

    def __init__(self, sender_id: int, group_id: int) -> None:
        super().__init__(
            f"Developer {sender_id} is not a member of group {group_id} "
            "and cannot send messages to it",
            code="NOT_MEMBER",
            details={"sender_id": sender_id, "group_id": group_id},
        )
        self.sender_id = sender_id
        self.group_id = group_id
