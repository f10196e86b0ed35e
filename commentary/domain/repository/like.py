"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from commentary.domain.model.like import Like
from commentary.domain.value import CommentId, UserId


class LikeRepository(ABC):
    """Repository for Like entity."""

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes this comment
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Like]:
        """Find a user's likes on several comments (batch query)."""
        pass
