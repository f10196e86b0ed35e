"""Unit tests for CounterService."""

import asyncio
from uuid import uuid4

import pytest

from commentary.domain.error import NotFoundError
from commentary.domain.repository import CommentRepository, PostRepository
from commentary.domain.service import CounterService
from commentary.domain.value import CommentId
from tests.factories import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_increment_and_decrement_likes(unit_env):
    # Arrange
    counter_service = await unit_env.get(CounterService)
    comment_repo = await unit_env.get(CommentRepository)
    post = (await unit_env.get(PostRepository)).add()
    comment = await comment_repo.save(make_comment(post.id))

    # Act
    first = await counter_service.increment_likes(comment.id)
    second = await counter_service.increment_likes(comment.id)
    after_decrement = await counter_service.decrement_likes(comment.id)

    # Assert
    assert (first, second, after_decrement) == (1, 2, 1)
    assert (await comment_repo.find_by_id(comment.id)).likes_count == 1


@pytest.mark.asyncio
async def test_decrement_never_goes_below_zero(unit_env):
    counter_service = await unit_env.get(CounterService)
    comment_repo = await unit_env.get(CommentRepository)
    post = (await unit_env.get(PostRepository)).add()
    comment = await comment_repo.save(make_comment(post.id))

    assert await counter_service.decrement_likes(comment.id) == 0
    assert (await comment_repo.find_by_id(comment.id)).likes_count == 0


@pytest.mark.asyncio
async def test_concurrent_increments_are_not_lost(unit_env):
    # Arrange
    counter_service = await unit_env.get(CounterService)
    comment_repo = await unit_env.get(CommentRepository)
    post = (await unit_env.get(PostRepository)).add()
    comment = await comment_repo.save(make_comment(post.id))

    # Act
    await asyncio.gather(
        *(counter_service.increment_reports(comment.id) for _ in range(25))
    )

    # Assert
    assert (await comment_repo.find_by_id(comment.id)).reports_count == 25


@pytest.mark.asyncio
async def test_concurrent_reports_hide_comment_once_threshold_is_reached(unit_env):
    # Arrange
    counter_service = await unit_env.get(CounterService)
    comment_repo = await unit_env.get(CommentRepository)
    post = (await unit_env.get(PostRepository)).add()
    comment = await comment_repo.save(make_comment(post.id))

    # Act
    counts = await asyncio.gather(
        *(counter_service.increment_reports(comment.id, hide_at=5) for _ in range(8))
    )

    # Assert
    assert sorted(counts) == list(range(1, 9))
    stored = await comment_repo.find_by_id(comment.id)
    assert stored.reports_count == 8
    assert stored.is_visible is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method", ["increment_likes", "decrement_likes", "increment_reports"]
)
async def test_unknown_comment_raises_not_found(unit_env, method):
    counter_service = await unit_env.get(CounterService)

    with pytest.raises(NotFoundError):
        await getattr(counter_service, method)(CommentId(uuid4()))
