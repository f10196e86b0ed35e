"""In-memory post lookup for testing."""

from typing import Sequence
from uuid import uuid4

from commentary.domain.model.post import PostSummary
from commentary.domain.repository.post import PostRepository
from commentary.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Posts are owned by another service, so the contract has no writes;
    tests seed posts with ``add``.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, PostSummary] = {}

    def add(
        self,
        title: str = "Test post",
        slug: str = "test-post",
        post_id: PostId | None = None,
    ) -> PostSummary:
        """Seed a post and return its summary."""
        summary = PostSummary(
            id=post_id or PostId(uuid4()),
            title=title,
            slug=slug,
        )
        self._posts[summary.id] = summary
        return summary

    async def exists(self, post_id: PostId) -> bool:
        """Whether a post with this ID exists."""
        return post_id in self._posts

    async def find_summaries(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, PostSummary]:
        """Find titles and slugs for several posts."""
        return {pid: self._posts[pid] for pid in post_ids if pid in self._posts}
