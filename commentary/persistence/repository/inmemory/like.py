"""In-memory like repository for testing."""

from typing import Sequence

from sqlalchemy.exc import IntegrityError

from commentary.domain.model.like import Like
from commentary.domain.repository.like import LikeRepository
from commentary.domain.value import CommentId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes this comment
        """
        for existing in self._likes:
            if (
                existing.user_id == like.user_id
                and existing.comment_id == like.comment_id
            ):
                raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a like by user and comment."""
        for i, like in enumerate(self._likes):
            if like.user_id == user_id and like.comment_id == comment_id:
                self._likes.pop(i)
                return True
        return False

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Like]:
        """Find a user's likes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        wanted = set(comment_ids)
        return [
            like
            for like in self._likes
            if like.user_id == user_id and like.comment_id in wanted
        ]
