"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from commentary.domain.value.common import ValueObject
from commentary.domain.value.identifiers import UserId


class Role(str, Enum):
    """Role of the principal making a request, as asserted by the identity provider."""

    USER = "user"
    MODERATOR = "moderator"


class SortMode(str, Enum):
    """Ordering of root comments in a listing.

    Replies are always chronological regardless of the mode.
    """

    NEWEST = "newest"
    OLDEST = "oldest"
    POPULAR = "popular"


class ReportReason(str, Enum):
    """Category a reporter picks when flagging a comment."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    INAPPROPRIATE = "inappropriate"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Status of a report.

    PENDING is the only non-terminal state.
    """

    PENDING = "pending"
    DISMISSED = "dismissed"
    RESOLVED = "resolved"

    @property
    def is_terminal(self) -> bool:
        return self is not ReportStatus.PENDING


class AuthorizationDecision(str, Enum):
    """Outcome of an authorization check."""

    ALLOWED = "allowed"
    DENIED = "denied"


class Identity(ValueObject):
    """Authenticated principal supplied by the identity provider."""

    user_id: UserId
    role: Role = Role.USER

    @property
    def is_moderator(self) -> bool:
        return self.role is Role.MODERATOR
