"""Counter synchronizer for denormalized comment counters."""

import logfire

from commentary.domain.error import NotFoundError
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId

from .base import Service


class CounterService(Service):
    """Applies like and report events to comment counters.

    Every change is a single atomic update in the store, so concurrent
    callers never lose an increment.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize counter service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def increment_likes(self, comment_id: CommentId) -> int:
        """Atomically increment a comment's likes_count.

        Returns:
            The new likes_count

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "counter_service.increment_likes", comment_id=str(comment_id)
        ):
            count = await self.comment_repository.increment_likes(comment_id)
            if count is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment likes incremented", comment_id=str(comment_id), count=count
            )
            return count

    async def decrement_likes(self, comment_id: CommentId) -> int:
        """Atomically decrement a comment's likes_count (minimum 0).

        Returns:
            The new likes_count

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "counter_service.decrement_likes", comment_id=str(comment_id)
        ):
            count = await self.comment_repository.decrement_likes(comment_id)
            if count is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment likes decremented", comment_id=str(comment_id), count=count
            )
            return count

    async def increment_reports(
        self, comment_id: CommentId, hide_at: int | None = None
    ) -> int:
        """Atomically increment a comment's reports_count.

        If hide_at is given, the comment is hidden in the same update once
        its count reaches that value.

        Returns:
            The new reports_count

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "counter_service.increment_reports", comment_id=str(comment_id)
        ):
            count = await self.comment_repository.increment_reports(
                comment_id, hide_at=hide_at
            )
            if count is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment reports incremented", comment_id=str(comment_id), count=count
            )
            return count
