"""Shared fixtures: a fresh in-memory storage and API per test."""

import pytest
from fastapi.testclient import TestClient

from devgroups_api.app.core.db import open_storage
from devgroups_api.app.main import create_app
from devgroups_api.app.services import GroupService, MembershipService, MessageService, ProfileService


@pytest.fixture
def storage():
    storage = open_storage(":memory:")
    yield storage
    storage.close()


@pytest.fixture
def profiles(storage):
    return ProfileService(storage)


@pytest.fixture
def groups(storage):
    return GroupService(storage)


@pytest.fixture
def membership(storage):
    return MembershipService(storage)


@pytest.fixture
def messages(storage):
    return MessageService(storage)


@pytest.fixture
def client(storage):
    with TestClient(create_app(storage=storage)) as test_client:
        yield test_client
