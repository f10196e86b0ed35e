"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from commentary.domain.error import BusinessRuleViolationError, NotFoundError
from commentary.domain.repository import CommentRepository, PostRepository
from commentary.domain.service import LikeService
from commentary.domain.value import CommentId, UserId
from tests.factories import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLikeComment:
    """Tests for like_comment and unlike_comment."""

    @pytest.mark.asyncio
    async def test_like_increments_count(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        post = (await unit_env.get(PostRepository)).add()
        comment = await comment_repo.save(make_comment(post.id))

        # Act
        first = await like_service.like_comment(comment.id, UserId(uuid4()))
        second = await like_service.like_comment(comment.id, UserId(uuid4()))

        # Assert
        assert (first, second) == (1, 2)
        assert (await comment_repo.find_by_id(comment.id)).likes_count == 2

    @pytest.mark.asyncio
    async def test_duplicate_like_is_rejected(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        post = (await unit_env.get(PostRepository)).add()
        comment = await comment_repo.save(make_comment(post.id))
        user_id = UserId(uuid4())
        await like_service.like_comment(comment.id, user_id)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already liked"):
            await like_service.like_comment(comment.id, user_id)

        assert (await comment_repo.find_by_id(comment.id)).likes_count == 1

    @pytest.mark.asyncio
    async def test_like_unknown_comment_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.like_comment(CommentId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unlike_removes_like(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        post = (await unit_env.get(PostRepository)).add()
        comment = await comment_repo.save(make_comment(post.id))
        user_id = UserId(uuid4())
        await like_service.like_comment(comment.id, user_id)

        # Act
        removed, count = await like_service.unlike_comment(comment.id, user_id)

        # Assert
        assert removed is True
        assert count == 0
        assert await like_service.get_liked_comment_ids(user_id, [comment.id]) == set()

    @pytest.mark.asyncio
    async def test_unlike_without_like_changes_nothing(self, unit_env):
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        post = (await unit_env.get(PostRepository)).add()
        comment = await comment_repo.save(make_comment(post.id, likes_count=3))

        removed, count = await like_service.unlike_comment(comment.id, UserId(uuid4()))

        assert removed is False
        assert count == 3


@pytest.mark.asyncio
async def test_get_liked_comment_ids_returns_subset(unit_env):
    # Arrange
    like_service = await unit_env.get(LikeService)
    comment_repo = await unit_env.get(CommentRepository)
    post = (await unit_env.get(PostRepository)).add()
    liked = await comment_repo.save(make_comment(post.id))
    not_liked = await comment_repo.save(make_comment(post.id, minutes=1))
    user_id = UserId(uuid4())
    await like_service.like_comment(liked.id, user_id)
    await like_service.like_comment(not_liked.id, UserId(uuid4()))

    # Act
    result = await like_service.get_liked_comment_ids(
        user_id, [liked.id, not_liked.id]
    )

    # Assert
    assert result == {liked.id}
