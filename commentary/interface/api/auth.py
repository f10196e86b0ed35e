"""Caller identity for routes."""

from fastapi import HTTPException, status

from commentary.domain.service import JWTService
from commentary.domain.value import Identity


def require_identity(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> Identity:
    """Resolve the caller from the auth cookie.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    identity = jwt_service.get_identity_from_token(auth_token)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return identity
