"""Fixtures shared by the end-to-end tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from commentary.domain.repository import PostRepository
from commentary.interface.api.app import create_app
from commentary.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container; in-memory state lives as long as the test."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    return TestClient(app_instance)


@pytest.fixture
def post(container):
    """Seed a post in the in-memory post lookup."""
    posts = asyncio.run(container.get(PostRepository))
    return posts.add(title="On the origin of comments", slug="origin-of-comments")

