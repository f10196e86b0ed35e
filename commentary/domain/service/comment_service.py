"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from commentary.config import CommentSettings
from commentary.domain.error import (
    ContentDeletedException,
    DepthExceededError,
    NotFoundError,
    ValidationError,
)
from commentary.domain.model import Comment, Page, PaginationMeta
from commentary.domain.repository import CommentRepository, PostRepository
from commentary.domain.value import CommentId, PostId, Role, SortMode, UserId

from .authorization import ensure_authorized
from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Owns path/depth computation and soft-delete semantics.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post lookup for existence checks
            settings: Comment limits and tombstone text
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.settings = settings

    def normalize_content(self, content: str) -> str:
        """Trim content and check it is non-empty and within the length limit.

        Raises:
            ValidationError: If content is empty or too long
        """
        normalized = content.strip()
        if not normalized:
            raise ValidationError("Comment content is required")
        if len(normalized) > self.settings.max_content_length:
            raise ValidationError(
                f"Comment cannot exceed {self.settings.max_content_length} characters"
            )
        return normalized

    def validate_paging(self, page: int, limit: int) -> None:
        """Check page and limit are within bounds.

        Raises:
            ValidationError: If page < 1 or limit outside 1..max_page_size
        """
        if page < 1:
            raise ValidationError("page must be at least 1")
        if limit < 1 or limit > self.settings.max_page_size:
            raise ValidationError(
                f"limit must be between 1 and {self.settings.max_page_size}"
            )

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The parent is read and the child written as two separate operations;
        concurrent replies to the same boundary-depth parent are not serialized.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is invalid or parent is on another post
            NotFoundError: If the post or parent comment doesn't exist
            DepthExceededError: If the parent is at maximum depth
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = self.normalize_content(content)

            if not await self.post_repository.exists(post_id):
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            path: list[CommentId] = []
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment belongs to a different post")
                if not parent.can_reply(self.settings.max_depth):
                    logfire.warn(
                        "Reply depth exceeded",
                        parent_id=str(parent_id),
                        parent_depth=parent.depth,
                        max_depth=self.settings.max_depth,
                    )
                    raise DepthExceededError(str(parent_id), self.settings.max_depth)
                path = parent.child_path()

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                path=path,
                depth=len(path),
                is_edited=False,
                edited_at=None,
                is_deleted=False,
                deleted_at=None,
                likes_count=0,
                reports_count=0,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=saved.depth,
            )
            return saved

    async def edit_comment(
        self,
        comment_id: CommentId,
        requester_id: UserId,
        new_content: str,
        requester_role: Role = Role.USER,
    ) -> Comment:
        """Replace a comment's content. Only the author may edit.

        Args:
            comment_id: Comment ID
            requester_id: User making the edit
            new_content: New text
            requester_role: Role of the requester (moderators get no edit rights)

        Returns:
            Updated comment with is_edited set

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If comment doesn't exist
            ForbiddenError: If requester is not the author
            ContentDeletedException: If comment is deleted
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            content = self.normalize_content(new_content)

            comment = await self.get_comment(comment_id)
            ensure_authorized(
                requester_id,
                requester_role,
                comment.author_id,
                action="edit",
                resource="comment",
                resource_id=str(comment_id),
                allow_moderator=False,
            )
            if comment.is_deleted:
                logfire.warn("Attempt to edit deleted comment", comment_id=str(comment_id))
                raise ContentDeletedException("comment", str(comment_id))

            updated = await self.comment_repository.update_content(
                comment_id, content, datetime.now()
            )
            if updated is None:
                # Deleted between the read and the write
                raise ContentDeletedException("comment", str(comment_id))

            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                content_length=len(updated.content),
            )
            return updated

    async def soft_delete_comment(
        self,
        comment_id: CommentId,
        requester_id: UserId,
        requester_role: Role,
    ) -> None:
        """Tombstone a comment. Allowed for the author or a moderator.

        Replies are left untouched, so the thread keeps its shape. Deleting a
        comment that is already deleted does nothing. A moderator removing
        someone else's comment leaves the moderator tombstone instead.

        Raises:
            NotFoundError: If comment doesn't exist
            ForbiddenError: If requester is neither author nor moderator
        """
        with logfire.span(
            "comment_service.soft_delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
            requester_role=requester_role.value,
        ):
            comment = await self.get_comment(comment_id)
            ensure_authorized(
                requester_id,
                requester_role,
                comment.author_id,
                action="delete",
                resource="comment",
                resource_id=str(comment_id),
            )

            by_moderator = requester_id != comment.author_id
            tombstone = (
                self.settings.moderator_tombstone
                if by_moderator
                else self.settings.tombstone
            )
            deleted = await self.comment_repository.soft_delete(
                comment_id, tombstone, datetime.now()
            )
            if deleted is None:
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return

            logfire.info(
                "Comment soft-deleted",
                comment_id=str(comment_id),
                by_moderator=by_moderator,
            )

    async def set_visibility(self, comment_id: CommentId, is_visible: bool) -> Comment:
        """Show or hide a comment.

        Raises:
            NotFoundError: If comment doesn't exist
        """
        comment = await self.comment_repository.set_visibility(comment_id, is_visible)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        logfire.info(
            "Comment visibility changed",
            comment_id=str(comment_id),
            is_visible=is_visible,
        )
        return comment

    async def list_comments_for_post(
        self,
        post_id: PostId,
        page: int,
        limit: int,
        sort: SortMode = SortMode.NEWEST,
        include_deleted: bool = True,
        include_hidden: bool = False,
    ) -> Page[Comment]:
        """Get one page of root comments for a post.

        Replies are not included; see ThreadService. Tombstoned roots are
        listed unless include_deleted is False; roots hidden by reports only
        when include_hidden is True.

        Raises:
            ValidationError: If paging is out of bounds
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.list_comments_for_post",
            post_id=str(post_id),
            page=page,
            limit=limit,
            sort=sort.value,
            include_deleted=include_deleted,
            include_hidden=include_hidden,
        ):
            self.validate_paging(page, limit)
            if not await self.post_repository.exists(post_id):
                raise NotFoundError("Post", str(post_id))

            total = await self.comment_repository.count_roots_by_post(
                post_id, include_deleted=include_deleted, include_hidden=include_hidden
            )
            roots = await self.comment_repository.find_roots_by_post(
                post_id=post_id,
                sort=sort,
                limit=limit,
                offset=(page - 1) * limit,
                include_deleted=include_deleted,
                include_hidden=include_hidden,
            )
            logfire.info(
                "Root comments retrieved",
                post_id=str(post_id),
                count=len(roots),
                total=total,
            )
            return Page[Comment](
                items=roots, meta=PaginationMeta.build(page, limit, total)
            )

    async def list_comments_by_author(
        self, author_id: UserId, page: int, limit: int
    ) -> Page[Comment]:
        """Get one page of an author's live comments, newest first."""
        with logfire.span(
            "comment_service.list_comments_by_author",
            author_id=str(author_id),
            page=page,
            limit=limit,
        ):
            self.validate_paging(page, limit)
            total = await self.comment_repository.count_by_author(author_id)
            comments = await self.comment_repository.find_by_author(
                author_id, limit=limit, offset=(page - 1) * limit
            )
            return Page[Comment](
                items=comments, meta=PaginationMeta.build(page, limit, total)
            )

    async def get_descendants(self, root_id: CommentId) -> list[Comment]:
        """Get every comment below root_id, oldest first."""
        return await self.get_descendants_of_many([root_id])

    async def get_descendants_of_many(
        self, root_ids: list[CommentId]
    ) -> list[Comment]:
        """Get every comment below any of root_ids in one batch, oldest first."""
        if not root_ids:
            return []
        with logfire.span(
            "comment_service.get_descendants", root_count=len(root_ids)
        ):
            descendants = await self.comment_repository.find_descendants(root_ids)
            logfire.info(
                "Descendants retrieved",
                root_count=len(root_ids),
                count=len(descendants),
            )
            return descendants

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment doesn't exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_comments_by_ids(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, Comment]:
        """Get several comments keyed by ID (batch query)."""
        if not comment_ids:
            return {}
        comments = await self.comment_repository.find_by_ids(comment_ids)
        return {comment.id: comment for comment in comments}
