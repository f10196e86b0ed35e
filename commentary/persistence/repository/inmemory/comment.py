"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from commentary.domain.model.comment import Comment
from commentary.domain.repository.comment import CommentRepository
from commentary.domain.value import CommentId, PostId, SortMode, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments at once."""
        return [self._comments[cid] for cid in comment_ids if cid in self._comments]

    async def find_roots_by_post(
        self,
        post_id: PostId,
        sort: SortMode,
        limit: int,
        offset: int,
        include_deleted: bool = True,
        include_hidden: bool = True,
    ) -> list[Comment]:
        """Find one page of root comments for a post."""
        roots = self._roots(post_id, include_deleted, include_hidden)

        if sort == SortMode.OLDEST:
            roots.sort(key=lambda c: c.created_at)
        elif sort == SortMode.POPULAR:
            roots.sort(key=lambda c: (c.likes_count, c.created_at), reverse=True)
        else:
            roots.sort(key=lambda c: c.created_at, reverse=True)

        return roots[offset : offset + limit]

    async def count_roots_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = True,
        include_hidden: bool = True,
    ) -> int:
        """Count root comments for a post."""
        return len(self._roots(post_id, include_deleted, include_hidden))

    def _roots(
        self, post_id: PostId, include_deleted: bool, include_hidden: bool
    ) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.post_id == post_id
            and c.is_root
            and c.is_listed(include_deleted, include_hidden)
        ]

    async def find_descendants(self, root_ids: Sequence[CommentId]) -> list[Comment]:
        """Find every comment whose path contains any of root_ids."""
        wanted = set(root_ids)
        descendants = [
            c for c in self._comments.values() if wanted.intersection(c.path)
        ]
        descendants.sort(key=lambda c: (c.created_at, str(c.id)))
        return descendants

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find non-deleted comments by a specific author."""
        comments = [
            c
            for c in self._comments.values()
            if c.author_id == author_id and not c.is_deleted
        ]

        # Sort by created_at descending
        comments.sort(key=lambda c: c.created_at, reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count non-deleted comments by an author."""
        return sum(
            1
            for c in self._comments.values()
            if c.author_id == author_id and not c.is_deleted
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace content of a live comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        updated = comment.model_copy(
            update={
                "content": content,
                "is_edited": True,
                "edited_at": edited_at,
                "updated_at": edited_at,
            }
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(
        self, comment_id: CommentId, tombstone: str, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a live comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        deleted = comment.model_copy(
            update={
                "content": tombstone,
                "is_deleted": True,
                "deleted_at": deleted_at,
                "updated_at": deleted_at,
            }
        )
        self._comments[comment_id] = deleted
        return deleted

    def _set_count(self, comment_id: CommentId, field: str, delta: int) -> Optional[int]:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        # Create updated comment (since comments are immutable)
        new_count = max(getattr(comment, field) + delta, 0)
        self._comments[comment_id] = comment.model_copy(update={field: new_count})
        return new_count

    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Increment likes_count by 1."""
        return self._set_count(comment_id, "likes_count", 1)

    async def decrement_likes(self, comment_id: CommentId) -> Optional[int]:
        """Decrement likes_count by 1 (minimum 0)."""
        return self._set_count(comment_id, "likes_count", -1)

    async def increment_reports(
        self, comment_id: CommentId, hide_at: Optional[int] = None
    ) -> Optional[int]:
        """Increment reports_count by 1, hiding the comment at hide_at."""
        count = self._set_count(comment_id, "reports_count", 1)
        if count is not None and hide_at is not None and count >= hide_at:
            await self.set_visibility(comment_id, False)
        return count

    async def set_visibility(
        self, comment_id: CommentId, is_visible: bool
    ) -> Optional[Comment]:
        """Show or hide a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"is_visible": is_visible})
        self._comments[comment_id] = updated
        return updated
