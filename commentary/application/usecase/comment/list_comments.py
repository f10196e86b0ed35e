"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService, LikeService, ThreadService
from commentary.domain.value import PostId, SortMode, UserId

from .items import CommentNodeItem, PaginationMetaItem, node_to_item


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str  # UUID string
    page: int = 1
    limit: int = 20
    sort: SortMode = SortMode.NEWEST
    viewer_id: str | None = None  # Set when the caller is authenticated
    include_deleted: bool = True
    include_hidden: bool = False  # Moderators see comments hidden by reports


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentNodeItem]
    meta: PaginationMetaItem


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing a post's comments as a page of reply trees."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        like_service: LikeService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            thread_service: Thread assembler
            like_service: Like service for is_liked enrichment
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.like_service = like_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Steps:
        1. Fetch one page of root comments in the requested order
        2. Fetch all their descendants in one batch and assemble the trees
        3. Mark the comments the viewer has liked (one batch query)

        Raises:
            ValidationError: If paging is out of bounds
            NotFoundError: If the post doesn't exist
        """
        page = await self.comment_service.list_comments_for_post(
            post_id=PostId(UUID(request.post_id)),
            page=request.page,
            limit=request.limit,
            sort=request.sort,
            include_deleted=request.include_deleted,
            include_hidden=request.include_hidden,
        )
        nodes = await self.thread_service.assemble(
            page.items,
            include_deleted=request.include_deleted,
            include_hidden=request.include_hidden,
        )

        liked_ids = set()
        if request.viewer_id and nodes:
            comment_ids = [n.comment.id for node in nodes for n in node.walk()]
            liked_ids = await self.like_service.get_liked_comment_ids(
                UserId(UUID(request.viewer_id)), comment_ids
            )

        return ListCommentsResponse(
            comments=[node_to_item(node, liked_ids) for node in nodes],
            meta=PaginationMetaItem.from_domain(page.meta),
        )
