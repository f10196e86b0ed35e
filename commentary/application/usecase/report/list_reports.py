"""List pending reports use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.application.usecase.comment.items import PaginationMetaItem
from commentary.domain.service import ModerationService, ensure_authorized
from commentary.domain.value import Role, UserId

from .create_report import ReportItem


class ListPendingReportsRequest(BaseModel):
    """List pending reports request."""

    moderator_id: str
    role: Role
    page: int = 1
    limit: int = 20


class ReportViewItem(ReportItem):
    """Report joined with the comment and post it concerns."""

    comment_content: str
    comment_author_id: str
    comment_is_deleted: bool
    post_id: str
    post_title: str | None
    post_slug: str | None


class ListPendingReportsResponse(BaseModel):
    """List pending reports response."""

    reports: list[ReportViewItem]
    meta: PaginationMetaItem


class ListPendingReportsUseCase(BaseUseCase):
    """Use case for reading the moderation queue."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(
        self, request: ListPendingReportsRequest
    ) -> ListPendingReportsResponse:
        """Execute list pending reports flow.

        Raises:
            ForbiddenError: If caller is not a moderator
            ValidationError: If paging is out of bounds
        """
        ensure_authorized(
            UserId(UUID(request.moderator_id)),
            request.role,
            None,
            action="list",
            resource="reports",
            resource_id="pending",
        )

        page = await self.moderation_service.list_pending_reports(
            request.page, request.limit
        )
        reports = [
            ReportViewItem(
                **ReportItem.from_domain(view.report).model_dump(),
                comment_content=view.comment_content,
                comment_author_id=str(view.comment_author_id),
                comment_is_deleted=view.comment_is_deleted,
                post_id=str(view.post_id),
                post_title=view.post_title,
                post_slug=view.post_slug,
            )
            for view in page.items
        ]
        return ListPendingReportsResponse(
            reports=reports, meta=PaginationMetaItem.from_domain(page.meta)
        )
