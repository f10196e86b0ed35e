"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService, ensure_authorized
from commentary.domain.value import CommentId, Role, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str
    role: Role = Role.USER
    as_moderator: bool = False  # Moderation endpoint: owners get no pass


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment (its author or a moderator)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment doesn't exist
            ForbiddenError: If user is neither author nor moderator, or is not
                a moderator when deleting through the moderation endpoint
        """
        user_id = UserId(UUID(request.user_id))
        if request.as_moderator:
            ensure_authorized(
                user_id,
                request.role,
                None,
                action="moderate",
                resource="comment",
                resource_id=request.comment_id,
            )

        await self.comment_service.soft_delete_comment(
            CommentId(UUID(request.comment_id)), user_id, request.role
        )
