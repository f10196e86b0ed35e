"""Dismiss report use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import ModerationService, ensure_authorized
from commentary.domain.value import ReportId, Role, UserId


class DismissReportRequest(BaseModel):
    """Dismiss report request."""

    report_id: str  # UUID string
    moderator_id: str
    role: Role


class DismissReportUseCase(BaseUseCase):
    """Use case for dismissing a report without acting on the comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: DismissReportRequest) -> None:
        """Execute dismiss report flow.

        Raises:
            ForbiddenError: If caller is not a moderator
            NotFoundError: If report doesn't exist
        """
        ensure_authorized(
            UserId(UUID(request.moderator_id)),
            request.role,
            None,
            action="dismiss",
            resource="report",
            resource_id=request.report_id,
        )
        await self.moderation_service.dismiss_report(ReportId(UUID(request.report_id)))
