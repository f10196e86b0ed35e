"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId, PostId, UserId

from .items import CommentItem, comment_to_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        The service checks the post exists, validates the parent (same post,
        below max depth) and derives path and depth from it.

        Raises:
            ValidationError: If content is invalid or parent is on another post
            NotFoundError: If post or parent comment doesn't exist
            DepthExceededError: If the parent is at maximum depth
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )
        return comment_to_item(comment)
