"""PostgreSQL implementation of Like repository."""

from typing import List, Sequence

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import Like
from commentary.domain.repository import LikeRepository
from commentary.domain.value import CommentId, UserId
from commentary.persistence.database import translate_store_errors
from commentary.persistence.mappers import like_to_dict, row_to_like
from commentary.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def save(self, like: Like) -> Like:
        """Save a like.

        Runs in a savepoint so a duplicate only rolls back this insert.
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    @translate_store_errors
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a like by user and comment."""
        stmt = (
            delete(likes_table)
            .where(
                and_(
                    likes_table.c.user_id == user_id,
                    likes_table.c.comment_id == comment_id,
                )
            )
            .returning(likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    @translate_store_errors
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Like]:
        """Find a user's likes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.comment_id.in_(list(comment_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]
