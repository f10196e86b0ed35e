"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from commentary.application.usecase.comment import (
    CommentItem,
    CommentNodeItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsResponse,
    ListUserCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from commentary.domain.service import JWTService
from commentary.domain.value import SortMode
from commentary.interface.api.auth import require_identity

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Content limits are enforced by the domain so that empty and over-long
    content both come back as 400.
    """

    content: str
    parent_id: UUID | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated
    """
    identity = require_identity(jwt_service, auth_token, "create comments")

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            content=request.content,
            author_id=str(identity.user_id),
            parent_id=str(request.parent_id) if request.parent_id else None,
        )
    )


@router.get("/posts/{post_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1),
    limit: int = Query(default=20),
    sort: SortMode = Query(default=SortMode.NEWEST),
    include_deleted: bool = Query(default=True),
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """Get one page of root comments for a post, each with its reply tree.

    Root comments follow ``sort``; replies are always oldest first. If
    authenticated, each comment carries ``is_liked`` for the caller.
    Tombstones are left out when ``include_deleted`` is false. Comments
    hidden by reports are only shown to moderators.
    """
    identity = jwt_service.get_identity_from_token(auth_token)

    return await list_comments_use_case.execute(
        ListCommentsRequest(
            post_id=str(post_id),
            page=page,
            limit=limit,
            sort=sort,
            viewer_id=str(identity.user_id) if identity else None,
            include_deleted=include_deleted,
            include_hidden=identity.is_moderator if identity else False,
        )
    )


@router.get("/comments/{comment_id}", response_model=CommentNodeItem)
async def get_comment_thread(
    comment_id: UUID,
    get_thread_use_case: FromDishka[GetCommentThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentNodeItem:
    """Get a single comment with all of its replies."""
    identity = jwt_service.get_identity_from_token(auth_token)

    return await get_thread_use_case.execute(
        GetCommentThreadRequest(
            comment_id=str(comment_id),
            viewer_id=str(identity.user_id) if identity else None,
            include_hidden=identity.is_moderator if identity else False,
        )
    )


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit a comment's content.

    Only the comment author can edit; deleted comments cannot be edited.
    """
    identity = require_identity(jwt_service, auth_token, "edit comments")

    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=str(comment_id),
            user_id=str(identity.user_id),
            role=identity.role,
            content=request.content,
        )
    )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete a comment. Allowed for its author or a moderator.

    Replies stay in place under the tombstone.
    """
    identity = require_identity(jwt_service, auth_token, "delete comments")

    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=str(comment_id),
            user_id=str(identity.user_id),
            role=identity.role,
        )
    )


@router.get("/users/{user_id}/comments", response_model=ListUserCommentsResponse)
async def list_user_comments(
    user_id: UUID,
    list_user_comments_use_case: FromDishka[ListUserCommentsUseCase],
    page: int = Query(default=1),
    limit: int = Query(default=20),
) -> ListUserCommentsResponse:
    """Get a user's comments, newest first. Deleted comments are left out."""
    return await list_user_comments_use_case.execute(
        ListUserCommentsRequest(user_id=str(user_id), page=page, limit=limit)
    )
