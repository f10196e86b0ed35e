"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService, LikeService
from commentary.domain.value import CommentId, Role, UserId

from .items import CommentItem, comment_to_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    role: Role = Role.USER
    content: str  # New content (required, cannot be empty)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            like_service: Like service
        """
        self.comment_service = comment_service
        self.like_service = like_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If comment doesn't exist
            ForbiddenError: If user doesn't own the comment
            ContentDeletedException: If comment is deleted
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        updated = await self.comment_service.edit_comment(
            comment_id, user_id, request.content, request.role
        )
        liked_ids = await self.like_service.get_liked_comment_ids(user_id, [comment_id])

        return comment_to_item(updated, liked_ids)
