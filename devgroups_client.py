"""Developer Social Groups API client.

A thin wrapper around the REST API served by ``devgroups_api``.  The
client uses the ``requests`` library and exposes one method per
operation:

* :meth:`create_developer_profile`, :meth:`get_developer_profile`,
  :meth:`get_all_developer_profiles`
* :meth:`create_social_group`, :meth:`get_social_group`,
  :meth:`get_all_social_groups`, :meth:`join_social_group`
* :meth:`send_message`, :meth:`get_message`, :meth:`get_all_messages`

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON response and ``error`` is ``None``; on failure
``data`` is ``None`` (or an empty list for listings) and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.  Callers never
have to catch HTTP exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class DevGroupsAPI:
    """Client for the Developer Social Groups API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/groups/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docs.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": str(message)}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Developer profiles
    # ------------------------------------------------------------------
    def create_developer_profile(
        self, name: str, location: str, ideas: List[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a profile.  The response includes the allocated ``id``."""
        return self._request(
            "POST",
            "/developers/",
            json_body={"name": name, "location": location, "ideas": list(ideas)},
        )

    def get_developer_profile(self, developer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/developers/{developer_id}")

    def get_all_developer_profiles(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/developers/")

    # ------------------------------------------------------------------
    # Social groups
    # ------------------------------------------------------------------
    def create_social_group(self, name: str, idea: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/groups/", json_body={"name": name, "idea": idea})

    def get_social_group(self, group_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/groups/{group_id}")

    def get_all_social_groups(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/groups/")

    def join_social_group(self, developer_id: int, group_id: int) -> Tuple[bool, Optional[Error]]:
        """Join a developer to a group.

        Returns:
            A tuple ``(success, error)``.  ``error`` carries the reason
            (unknown id, idea mismatch) when the join was refused.
        """
        _, error = self._request(
            "POST", f"/groups/{group_id}/members", json_body={"developer_id": developer_id}
        )
        return error is None, error

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    def send_message(
        self, sender_id: int, group_id: int, content: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/messages/",
            json_body={"sender_id": sender_id, "group_id": group_id, "content": content},
        )

    def get_message(self, message_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/messages/{message_id}")

    def get_all_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/messages/")
