"""Post lookup interface.

Posts are owned by the content service. This is the narrow read contract
this service depends on.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from commentary.domain.model.post import PostSummary
from commentary.domain.value import PostId


class PostRepository(ABC):
    """Read-only access to posts."""

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Whether a post with this ID exists."""
        pass

    @abstractmethod
    async def find_summaries(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, PostSummary]:
        """Find titles and slugs for several posts (batch query).

        Returns:
            Mapping of post ID to summary, for the posts that exist
        """
        pass
