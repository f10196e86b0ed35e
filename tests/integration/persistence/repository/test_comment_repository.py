"""Integration tests for PostgresCommentRepository.

These tests need PostgreSQL at DATABASE__URL with migrations applied.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import Like
from commentary.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
)
from commentary.domain.value import LikeId, PostId, SortMode, UserId
from commentary.persistence.tables import posts_table
from tests.factories import BASE_TIME, make_comment
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _insert_post(integration_env, slug: str | None = None) -> PostId:
    session = await integration_env.get(AsyncSession)
    post_id = PostId(uuid4())
    await session.execute(
        posts_table.insert().values(
            id=post_id,
            title="Integration post",
            slug=slug or f"integration-{post_id}",
        )
    )
    return post_id


class TestCommentRepositoryIntegration:
    """Integration tests for path queries and atomic counters."""

    @pytest.mark.asyncio
    async def test_find_descendants_uses_path_overlap(self, integration_env):
        # Arrange
        repo = await integration_env.get(CommentRepository)
        post_id = await _insert_post(integration_env)
        root = await repo.save(make_comment(post_id))
        reply = await repo.save(make_comment(post_id, root, minutes=1))
        nested = await repo.save(make_comment(post_id, reply, minutes=2))
        other = await repo.save(make_comment(post_id, minutes=3))

        # Act
        descendants = await repo.find_descendants([root.id])

        # Assert
        assert [c.id for c in descendants] == [reply.id, nested.id]
        assert descendants[1].path == [root.id, reply.id]
        assert await repo.find_descendants([other.id]) == []

    @pytest.mark.asyncio
    async def test_popular_roots_only(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        post_id = await _insert_post(integration_env)
        plain = await repo.save(make_comment(post_id, minutes=1))
        liked = await repo.save(make_comment(post_id, likes_count=2))
        await repo.save(make_comment(post_id, liked, minutes=2, likes_count=9))

        roots = await repo.find_roots_by_post(post_id, SortMode.POPULAR, 10, 0)

        assert [c.id for c in roots] == [liked.id, plain.id]
        assert await repo.count_roots_by_post(post_id) == 2

    @pytest.mark.asyncio
    async def test_counters_are_clamped_at_zero(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        post_id = await _insert_post(integration_env)
        comment = await repo.save(make_comment(post_id))

        assert await repo.decrement_likes(comment.id) == 0
        assert await repo.increment_likes(comment.id) == 1
        assert await repo.increment_reports(comment.id) == 1
        assert await repo.increment_likes(make_comment(post_id).id) is None

    @pytest.mark.asyncio
    async def test_increment_reports_hides_at_threshold(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        post_id = await _insert_post(integration_env)
        comment = await repo.save(make_comment(post_id))

        assert await repo.increment_reports(comment.id, hide_at=2) == 1
        assert (await repo.find_by_id(comment.id)).is_visible
        assert await repo.increment_reports(comment.id, hide_at=2) == 2
        assert not (await repo.find_by_id(comment.id)).is_visible

        shown = await repo.set_visibility(comment.id, True)
        assert shown.is_visible and shown.reports_count == 2

    @pytest.mark.asyncio
    async def test_roots_filtered_by_deleted_and_hidden(self, integration_env):
        # Arrange
        repo = await integration_env.get(CommentRepository)
        post_id = await _insert_post(integration_env)
        live = await repo.save(make_comment(post_id))
        deleted = await repo.save(make_comment(post_id, minutes=1))
        hidden = await repo.save(make_comment(post_id, minutes=2))
        await repo.soft_delete(deleted.id, "[deleted]", BASE_TIME)
        await repo.set_visibility(hidden.id, False)

        # Act
        roots = await repo.find_roots_by_post(
            post_id, SortMode.OLDEST, 10, 0, include_deleted=False, include_hidden=False
        )
        count = await repo.count_roots_by_post(
            post_id, include_deleted=True, include_hidden=False
        )

        # Assert
        assert [c.id for c in roots] == [live.id]
        assert count == 2

    @pytest.mark.asyncio
    async def test_post_summaries_keep_published_slug(self, integration_env):
        posts = await integration_env.get(PostRepository)
        post_id = await _insert_post(integration_env, slug=f"Legacy_{uuid4().hex}")

        summaries = await posts.find_summaries([post_id, PostId(uuid4())])

        assert list(summaries) == [post_id]
        assert summaries[post_id].slug.startswith("Legacy_")
        assert summaries[post_id].title == "Integration post"

    @pytest.mark.asyncio
    async def test_soft_delete_is_conditional(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        post_id = await _insert_post(integration_env)
        comment = await repo.save(make_comment(post_id))

        deleted = await repo.soft_delete(comment.id, "[deleted]", BASE_TIME)

        assert deleted.is_deleted
        assert await repo.soft_delete(comment.id, "[deleted]", BASE_TIME) is None
        assert await repo.update_content(comment.id, "again", BASE_TIME) is None

    @pytest.mark.asyncio
    async def test_duplicate_like_raises_without_breaking_session(
        self, integration_env
    ):
        # Arrange
        comments = await integration_env.get(CommentRepository)
        likes = await integration_env.get(LikeRepository)
        post_id = await _insert_post(integration_env)
        comment = await comments.save(make_comment(post_id))
        user_id = UserId(uuid4())
        await likes.save(
            Like(id=LikeId(uuid4()), user_id=user_id, comment_id=comment.id)
        )

        # Act & Assert
        with pytest.raises(IntegrityError):
            await likes.save(
                Like(id=LikeId(uuid4()), user_id=user_id, comment_id=comment.id)
            )

        # Savepoint rolled back; the outer transaction is still usable
        found = await likes.find_by_user_and_comments(user_id, [comment.id])
        assert len(found) == 1
