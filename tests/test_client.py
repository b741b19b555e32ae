"""
Tests for the requests based API client, with a mocked session.
"""

import json
from unittest.mock import MagicMock

import requests

from devgroups_client import DevGroupsAPI


def _response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.reason = "Test"
    response.url = "http://testserver"
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


def _client(*responses):
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return DevGroupsAPI(base_url="http://testserver/", session=session), session


def test_create_profile_posts_payload():
    api, session = _client(_response(201, {"id": 0, "name": "Ana", "location": "NY", "ideas": ["ai"], "groups": []}))

    data, error = api.create_developer_profile("Ana", "NY", ["ai"])

    assert error is None
    assert data["id"] == 0
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://testserver/api/v1/developers/"
    assert kwargs["json"] == {"name": "Ana", "location": "NY", "ideas": ["ai"]}


def test_not_found_returns_error_reason():
    api, _ = _client(_response(404, {"detail": "Developer with id=999 not found", "code": "NOT_FOUND"}))

    data, error = api.get_developer_profile(999)

    assert data is None
    assert error == {"status_code": 404, "message": "Developer with id=999 not found"}


def test_join_success_and_failure():
    api, session = _client(
        _response(204),
        _response(409, {"detail": "Developer 0 cannot join group 1 because their ideas do not match"}),
    )

    assert api.join_social_group(0, 0) == (True, None)
    assert session.request.call_args.kwargs["json"] == {"developer_id": 0}

    ok, error = api.join_social_group(0, 1)
    assert ok is False
    assert error["status_code"] == 409


def test_listing_returns_data_or_empty_list():
    api, session = _client(
        _response(200, [{"id": 0, "content": "hi"}]),
        requests.ConnectionError("refused"),
    )

    messages, error = api.get_all_messages()
    assert error is None
    assert messages == [{"id": 0, "content": "hi"}]

    messages, error = api.get_all_messages()
    assert messages == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
