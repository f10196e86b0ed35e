"""List a user's comments use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import UserId

from .items import CommentItem, PaginationMetaItem, comment_to_item


class ListUserCommentsRequest(BaseModel):
    """List user comments request."""

    user_id: str  # UUID string
    page: int = 1
    limit: int = 20


class ListUserCommentsResponse(BaseModel):
    """List user comments response."""

    comments: list[CommentItem]
    meta: PaginationMetaItem


class ListUserCommentsUseCase(BaseUseCase):
    """Use case for a user's comment history (newest first, tombstones hidden)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: ListUserCommentsRequest
    ) -> ListUserCommentsResponse:
        page = await self.comment_service.list_comments_by_author(
            UserId(UUID(request.user_id)), request.page, request.limit
        )
        return ListUserCommentsResponse(
            comments=[comment_to_item(comment) for comment in page.items],
            meta=PaginationMetaItem.from_domain(page.meta),
        )
