"""Create report use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.model import Report
from commentary.domain.service import ModerationService
from commentary.domain.value import CommentId, ReportStatus, UserId


class CreateReportRequest(BaseModel):
    """Create report request."""

    comment_id: str  # UUID string
    reporter_id: str  # User ID from authenticated user
    reason_category: str  # Validated by the domain against ReportReason
    reason_text: str | None = None


class ReportItem(BaseModel):
    """Report resource."""

    report_id: str
    comment_id: str
    reporter_id: str
    reason_category: str
    reason_text: str | None
    status: ReportStatus
    created_at: datetime

    @classmethod
    def from_domain(cls, report: Report) -> "ReportItem":
        return cls(
            report_id=str(report.id),
            comment_id=str(report.comment_id),
            reporter_id=str(report.reporter_id),
            reason_category=report.reason_category.value,
            reason_text=report.reason_text,
            status=report.status,
            created_at=report.created_at,
        )


class CreateReportUseCase(BaseUseCase):
    """Use case for reporting a comment to moderators."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize create report use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: CreateReportRequest) -> ReportItem:
        """Execute create report flow.

        Raises:
            ValidationError: If category is unknown or reason text too long
            NotFoundError: If comment doesn't exist
        """
        report = await self.moderation_service.create_report(
            comment_id=CommentId(UUID(request.comment_id)),
            reporter_id=UserId(UUID(request.reporter_id)),
            category=request.reason_category,
            reason_text=request.reason_text,
        )
        return ReportItem.from_domain(report)
