"""PostgreSQL implementation of Post lookup."""

from typing import Sequence

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import PostSummary
from commentary.domain.repository import PostRepository
from commentary.domain.value import PostId
from commentary.persistence.database import translate_store_errors
from commentary.persistence.mappers import row_to_post_summary
from commentary.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def exists(self, post_id: PostId) -> bool:
        """Whether a post with this ID exists."""
        stmt = select(exists().where(posts_table.c.id == post_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    @translate_store_errors
    async def find_summaries(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, PostSummary]:
        """Find titles and slugs for several posts in one query."""
        if not post_ids:
            return {}

        stmt = select(
            posts_table.c.id, posts_table.c.title, posts_table.c.slug
        ).where(posts_table.c.id.in_(list(post_ids)))
        result = await self.session.execute(stmt)

        summaries = [row_to_post_summary(row._asdict()) for row in result.fetchall()]
        return {summary.id: summary for summary in summaries}
