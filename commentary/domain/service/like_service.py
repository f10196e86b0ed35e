"""Like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from commentary.domain.error import BusinessRuleViolationError
from commentary.domain.model import Like
from commentary.domain.repository import LikeRepository
from commentary.domain.value import CommentId, LikeId, UserId

from .base import Service
from .comment_service import CommentService
from .counter_service import CounterService


class LikeService(Service):
    """Domain service for likes on comments.

    One like per user per comment is enforced by the likes table; counters
    are pushed through the counter synchronizer.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_service: CommentService,
        counter_service: CounterService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            comment_service: Comment domain service
            counter_service: Counter synchronizer
        """
        self.like_repository = like_repository
        self.comment_service = comment_service
        self.counter_service = counter_service

    async def like_comment(self, comment_id: CommentId, user_id: UserId) -> int:
        """Like a comment.

        Returns:
            The comment's new likes_count

        Raises:
            NotFoundError: If comment doesn't exist
            BusinessRuleViolationError: If the user already likes it
        """
        with logfire.span(
            "like_service.like_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            await self.comment_service.get_comment(comment_id)

            like = Like(
                id=LikeId(uuid4()),
                user_id=user_id,
                comment_id=comment_id,
                created_at=datetime.now(),
            )
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    user_id=str(user_id),
                    comment_id=str(comment_id),
                )
                raise BusinessRuleViolationError("Comment already liked")

            return await self.counter_service.increment_likes(comment_id)

    async def unlike_comment(
        self, comment_id: CommentId, user_id: UserId
    ) -> tuple[bool, int]:
        """Remove a like from a comment.

        Returns:
            (whether a like was removed, the comment's likes_count)

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "like_service.unlike_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_service.get_comment(comment_id)

            removed = await self.like_repository.delete_by_user_and_comment(
                user_id, comment_id
            )
            if not removed:
                logfire.info(
                    "No like to remove",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                return False, comment.likes_count

            return True, await self.counter_service.decrement_likes(comment_id)

    async def get_liked_comment_ids(
        self, user_id: UserId, comment_ids: list[CommentId]
    ) -> set[CommentId]:
        """Return the subset of comment_ids the user has liked (one query)."""
        if not comment_ids:
            return set()
        likes = await self.like_repository.find_by_user_and_comments(
            user_id, comment_ids
        )
        return {like.comment_id for like in likes}
