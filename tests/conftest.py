"""Shared test fixtures."""

import pytest

from redis_map import InMemoryView, RedisMapView
from tests.helpers import FakeRedis


@pytest.fixture
def fake_client():
    return FakeRedis()


@pytest.fixture
def view(fake_client):
    v = RedisMapView("localhost", 6379, "test", client=fake_client)
    yield v
    v.close()


@pytest.fixture
def memory_view():
    return InMemoryView("test")
