"""Get comment thread use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import LikeService, ThreadService
from commentary.domain.value import CommentId, UserId

from .items import CommentNodeItem, node_to_item


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    comment_id: str  # UUID string
    viewer_id: str | None = None
    include_hidden: bool = False


class GetCommentThreadUseCase(BaseUseCase):
    """Use case for fetching one comment together with all of its replies."""

    def __init__(self, thread_service: ThreadService, like_service: LikeService) -> None:
        self.thread_service = thread_service
        self.like_service = like_service

    async def execute(self, request: GetCommentThreadRequest) -> CommentNodeItem:
        """Execute get thread flow.

        Raises:
            NotFoundError: If comment doesn't exist or is hidden from the viewer
        """
        node = await self.thread_service.build_thread(
            CommentId(UUID(request.comment_id)), include_hidden=request.include_hidden
        )

        liked_ids = set()
        if request.viewer_id:
            liked_ids = await self.like_service.get_liked_comment_ids(
                UserId(UUID(request.viewer_id)), [n.comment.id for n in node.walk()]
            )

        return node_to_item(node, liked_ids)
