"""Report routes (any authenticated user)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from commentary.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    ReportItem,
)
from commentary.domain.service import JWTService
from commentary.interface.api.auth import require_identity

router = APIRouter(tags=["reports"], route_class=DishkaRoute)


class CreateReportAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason_category: str  # spam, harassment, inappropriate, misinformation, other
    reason_text: str | None = None


@router.post(
    "/comments/{comment_id}/reports",
    response_model=ReportItem,
    status_code=status.HTTP_201_CREATED,
)
async def report_comment(
    comment_id: UUID,
    request: CreateReportAPIRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportItem:
    """Report a comment to moderators. Requires authentication.

    Reporting the same comment again creates another report.
    """
    identity = require_identity(jwt_service, auth_token, "report comments")

    return await create_report_use_case.execute(
        CreateReportRequest(
            comment_id=str(comment_id),
            reporter_id=str(identity.user_id),
            reason_category=request.reason_category,
            reason_text=request.reason_text,
        )
    )
