"""Like and unlike comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import LikeService
from commentary.domain.value import CommentId, UserId


class LikeCommentRequest(BaseModel):
    """Like or unlike request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeCommentResponse(BaseModel):
    """Like state after the request."""

    comment_id: str
    liked: bool
    likes_count: int


class LikeCommentUseCase(BaseUseCase):
    """Use case for liking a comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like comment use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If comment doesn't exist
            BusinessRuleViolationError: If already liked
        """
        likes_count = await self.like_service.like_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return LikeCommentResponse(
            comment_id=request.comment_id, liked=True, likes_count=likes_count
        )


class UnlikeCommentUseCase(BaseUseCase):
    """Use case for removing a like from a comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute unlike flow. Unliking a comment that isn't liked is a no-op.

        Raises:
            NotFoundError: If comment doesn't exist
        """
        _, likes_count = await self.like_service.unlike_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return LikeCommentResponse(
            comment_id=request.comment_id, liked=False, likes_count=likes_count
        )
