"""Like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from commentary.application.usecase.like import (
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from commentary.domain.service import JWTService
from commentary.interface.api.auth import require_identity

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


@router.post("/comments/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: UUID,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeCommentResponse:
    """Like a comment. Requires authentication.

    Liking a comment twice returns 409.
    """
    identity = require_identity(jwt_service, auth_token, "like comments")

    return await like_comment_use_case.execute(
        LikeCommentRequest(comment_id=str(comment_id), user_id=str(identity.user_id))
    )


@router.delete("/comments/{comment_id}/like", response_model=LikeCommentResponse)
async def unlike_comment(
    comment_id: UUID,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeCommentResponse:
    """Remove the caller's like from a comment. Requires authentication."""
    identity = require_identity(jwt_service, auth_token, "unlike comments")

    return await unlike_comment_use_case.execute(
        LikeCommentRequest(comment_id=str(comment_id), user_id=str(identity.user_id))
    )
