"""Authorization rules for mutating operations.

Every mutating operation calls into this module before touching the store,
instead of comparing owner ids inline.
"""

import logfire

from commentary.domain.error import ForbiddenError
from commentary.domain.value import AuthorizationDecision, Role, UserId


def authorize(
    requester_id: UserId,
    requester_role: Role,
    resource_owner_id: UserId | None,
    *,
    allow_moderator: bool = True,
) -> AuthorizationDecision:
    """Decide whether a principal may act on a resource.

    The owner is always allowed. Moderators are allowed unless the action is
    owner-only (``allow_moderator=False``). A resource with no owner
    (moderation actions) is therefore moderator-only.

    Args:
        requester_id: Principal making the request
        requester_role: Role asserted by the identity provider
        resource_owner_id: Owner of the target resource, None if it has none
        allow_moderator: Whether moderators may act on resources they don't own

    Returns:
        ALLOWED or DENIED
    """
    if resource_owner_id is not None and requester_id == resource_owner_id:
        return AuthorizationDecision.ALLOWED
    if allow_moderator and requester_role is Role.MODERATOR:
        return AuthorizationDecision.ALLOWED
    return AuthorizationDecision.DENIED


def ensure_authorized(
    requester_id: UserId,
    requester_role: Role,
    resource_owner_id: UserId | None,
    *,
    action: str,
    resource: str,
    resource_id: str,
    allow_moderator: bool = True,
) -> None:
    """Raise ForbiddenError unless ``authorize`` allows the request."""
    decision = authorize(
        requester_id,
        requester_role,
        resource_owner_id,
        allow_moderator=allow_moderator,
    )
    if decision is AuthorizationDecision.DENIED:
        logfire.warn(
            "Authorization denied",
            action=action,
            resource=resource,
            resource_id=resource_id,
            requester_id=str(requester_id),
            requester_role=requester_role.value,
        )
        raise ForbiddenError(action, resource, resource_id, str(requester_id))
