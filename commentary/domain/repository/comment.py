"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentId, PostId, SortMode, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Counter mutations must be single atomic updates in the store, never a
    read followed by a write, so concurrent likes and reports are not lost.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query).

        Args:
            comment_ids: Comment IDs to load

        Returns:
            The comments that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_roots_by_post(
        self,
        post_id: PostId,
        sort: SortMode,
        limit: int,
        offset: int,
        include_deleted: bool = True,
        include_hidden: bool = True,
    ) -> List[Comment]:
        """Find one page of root (depth 0) comments for a post.

        Ordering:
        - newest: created_at descending
        - oldest: created_at ascending
        - popular: likes_count descending, then created_at descending

        Args:
            post_id: The post ID
            sort: Sort mode
            limit: Maximum number of comments to return
            offset: Number of comments to skip
            include_deleted: Whether tombstoned roots are returned
            include_hidden: Whether roots hidden by reports are returned

        Returns:
            Root comments in the requested order
        """
        pass

    @abstractmethod
    async def count_roots_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = True,
        include_hidden: bool = True,
    ) -> int:
        """Count root comments for a post, with the same filters as find_roots_by_post.

        Args:
            post_id: The post ID
            include_deleted: Whether tombstoned roots are counted
            include_hidden: Whether roots hidden by reports are counted

        Returns:
            Number of root comments
        """
        pass

    @abstractmethod
    async def find_descendants(self, root_ids: Sequence[CommentId]) -> List[Comment]:
        """Find every comment whose path contains any of the given ids.

        One query for the whole batch, ordered by created_at ascending.

        Args:
            root_ids: Ancestor comment IDs

        Returns:
            All descendants of the given comments
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find non-deleted comments by an author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count non-deleted comments by an author."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a live comment and mark it edited.

        Args:
            comment_id: Comment ID
            content: New content
            edited_at: Edit timestamp

        Returns:
            The updated comment, None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def soft_delete(
        self, comment_id: CommentId, tombstone: str, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a live comment.

        Descendants are not touched.

        Args:
            comment_id: Comment ID
            tombstone: Placeholder content
            deleted_at: Deletion timestamp

        Returns:
            The deleted comment, None if it doesn't exist or was already deleted
        """
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically increment likes_count by 1.

        Returns:
            The new count, None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def decrement_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically decrement likes_count by 1, clamped at 0.

        Returns:
            The new count, None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def increment_reports(
        self, comment_id: CommentId, hide_at: Optional[int] = None
    ) -> Optional[int]:
        """Atomically increment reports_count by 1.

        When hide_at is given and the new count reaches it, is_visible is
        cleared in the same update.

        Returns:
            The new count, None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def set_visibility(
        self, comment_id: CommentId, is_visible: bool
    ) -> Optional[Comment]:
        """Show or hide a comment.

        Returns:
            The updated comment, None if it doesn't exist
        """
        pass
