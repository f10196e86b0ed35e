"""Moderation routes (moderators only)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status

from commentary.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from commentary.application.usecase.report import (
    DismissReportRequest,
    DismissReportUseCase,
    ListPendingReportsRequest,
    ListPendingReportsResponse,
    ListPendingReportsUseCase,
    ResolveReportRequest,
    ResolveReportUseCase,
)
from commentary.domain.service import JWTService
from commentary.interface.api.auth import require_identity

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)


@router.get("/reports", response_model=ListPendingReportsResponse)
async def list_pending_reports(
    list_reports_use_case: FromDishka[ListPendingReportsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1),
    limit: int = Query(default=20),
    auth_token: str | None = Cookie(default=None),
) -> ListPendingReportsResponse:
    """Get the moderation queue, oldest report first."""
    identity = require_identity(jwt_service, auth_token, "view reports")

    return await list_reports_use_case.execute(
        ListPendingReportsRequest(
            moderator_id=str(identity.user_id),
            role=identity.role,
            page=page,
            limit=limit,
        )
    )


@router.post(
    "/reports/{report_id}/dismiss", status_code=status.HTTP_204_NO_CONTENT
)
async def dismiss_report(
    report_id: UUID,
    dismiss_report_use_case: FromDishka[DismissReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Dismiss a report. Repeating the call is harmless."""
    identity = require_identity(jwt_service, auth_token, "dismiss reports")

    await dismiss_report_use_case.execute(
        DismissReportRequest(
            report_id=str(report_id),
            moderator_id=str(identity.user_id),
            role=identity.role,
        )
    )


@router.post(
    "/reports/{report_id}/resolve", status_code=status.HTTP_204_NO_CONTENT
)
async def resolve_report(
    report_id: UUID,
    resolve_report_use_case: FromDishka[ResolveReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Resolve a report by soft-deleting the reported comment.

    Only the given report is resolved.
    """
    identity = require_identity(jwt_service, auth_token, "resolve reports")

    await resolve_report_use_case.execute(
        ResolveReportRequest(
            report_id=str(report_id),
            moderator_id=str(identity.user_id),
            role=identity.role,
        )
    )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def moderator_delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete any comment as a moderator."""
    identity = require_identity(jwt_service, auth_token, "moderate comments")

    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=str(comment_id),
            user_id=str(identity.user_id),
            role=identity.role,
            as_moderator=True,
        )
    )
