"""Resolve report use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import ModerationService, ensure_authorized
from commentary.domain.value import ReportId, Role, UserId


class ResolveReportRequest(BaseModel):
    """Resolve report request."""

    report_id: str  # UUID string
    moderator_id: str
    role: Role


class ResolveReportUseCase(BaseUseCase):
    """Use case for resolving a report by soft-deleting the reported comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ResolveReportRequest) -> None:
        """Execute resolve report flow.

        Other pending reports on the same comment are left pending.

        Raises:
            ForbiddenError: If caller is not a moderator
            NotFoundError: If report or comment doesn't exist
            BusinessRuleViolationError: If the report was dismissed
        """
        moderator_id = UserId(UUID(request.moderator_id))
        ensure_authorized(
            moderator_id,
            request.role,
            None,
            action="resolve",
            resource="report",
            resource_id=request.report_id,
        )
        await self.moderation_service.resolve_report_by_deleting_comment(
            ReportId(UUID(request.report_id)), moderator_id
        )
