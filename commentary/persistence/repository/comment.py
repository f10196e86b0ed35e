"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import asc, case, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId, PostId, SortMode, UserId
from commentary.persistence.database import translate_store_errors
from commentary.persistence.mappers import comment_to_dict, row_to_comment
from commentary.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Descendant lookups use the GIN-indexed ``path`` array: a comment is a
    descendant of X when X appears anywhere in its path.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @translate_store_errors
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once."""
        if not comment_ids:
            return []

        stmt = select(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @staticmethod
    def _roots_query(
        stmt, post_id: PostId, include_deleted: bool, include_hidden: bool
    ):
        stmt = stmt.where(comments_table.c.post_id == post_id).where(
            comments_table.c.depth == 0
        )
        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))
        if not include_hidden:
            stmt = stmt.where(comments_table.c.is_visible.is_(True))
        return stmt

    @translate_store_errors
    async def find_roots_by_post(
        self,
        post_id: PostId,
        sort: SortMode,
        limit: int,
        offset: int,
        include_deleted: bool = True,
        include_hidden: bool = True,
    ) -> List[Comment]:
        """Find one page of root comments for a post."""
        stmt = self._roots_query(
            select(comments_table), post_id, include_deleted, include_hidden
        )

        if sort == SortMode.OLDEST:
            stmt = stmt.order_by(asc(comments_table.c.created_at))
        elif sort == SortMode.POPULAR:
            stmt = stmt.order_by(
                desc(comments_table.c.likes_count), desc(comments_table.c.created_at)
            )
        else:
            stmt = stmt.order_by(desc(comments_table.c.created_at))

        # Tie-breaker keeps pages stable
        stmt = stmt.order_by(comments_table.c.id).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @translate_store_errors
    async def count_roots_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = True,
        include_hidden: bool = True,
    ) -> int:
        """Count root comments for a post."""
        stmt = self._roots_query(
            select(func.count()).select_from(comments_table),
            post_id,
            include_deleted,
            include_hidden,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @translate_store_errors
    async def find_descendants(self, root_ids: Sequence[CommentId]) -> List[Comment]:
        """Find every comment below any of root_ids in a single query."""
        if not root_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.path.overlap(list(root_ids)))
            .order_by(asc(comments_table.c.created_at), comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @translate_store_errors
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find non-deleted comments by a specific author."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .where(comments_table.c.is_deleted.is_(False))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @translate_store_errors
    async def count_by_author(self, author_id: UserId) -> int:
        """Count non-deleted comments by an author."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.author_id == author_id)
            .where(comments_table.c.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @translate_store_errors
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    @translate_store_errors
    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace content of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(
                content=content,
                is_edited=True,
                edited_at=edited_at,
                updated_at=edited_at,
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    @translate_store_errors
    async def soft_delete(
        self, comment_id: CommentId, tombstone: str, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a live comment in one conditional update."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(
                content=tombstone,
                is_deleted=True,
                deleted_at=deleted_at,
                updated_at=deleted_at,
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def _bump(self, comment_id: CommentId, column: str, value) -> Optional[int]:
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values({column: value})
            .returning(comments_table.c[column])
        )
        result = await self.session.execute(stmt)
        new_count = result.scalar_one_or_none()
        await self.session.flush()
        return new_count

    @translate_store_errors
    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically increment likes_count by 1."""
        return await self._bump(
            comment_id, "likes_count", comments_table.c.likes_count + 1
        )

    @translate_store_errors
    async def decrement_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically decrement likes_count by 1 (minimum 0)."""
        return await self._bump(
            comment_id,
            "likes_count",
            func.greatest(comments_table.c.likes_count - 1, 0),
        )

    @translate_store_errors
    async def increment_reports(
        self, comment_id: CommentId, hide_at: Optional[int] = None
    ) -> Optional[int]:
        """Atomically increment reports_count by 1, hiding the comment at hide_at."""
        new_count = comments_table.c.reports_count + 1
        values = {"reports_count": new_count}
        if hide_at is not None:
            values["is_visible"] = case(
                (new_count >= hide_at, False), else_=comments_table.c.is_visible
            )

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(values)
            .returning(comments_table.c.reports_count)
        )
        result = await self.session.execute(stmt)
        count = result.scalar_one_or_none()
        await self.session.flush()
        return count

    @translate_store_errors
    async def set_visibility(
        self, comment_id: CommentId, is_visible: bool
    ) -> Optional[Comment]:
        """Show or hide a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(is_visible=is_visible)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())
