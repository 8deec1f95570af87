"""
Authentication Dependency for FastAPI.

Two levels:
- get_identity: verifies the bearer JWT and returns its claims. Used by
  POST /auth/sync, where the user record may not exist yet.
- get_current_user: additionally resolves the token subject (the identity
  provider's id) to a registered user. Used by every core route.

Both raise HTTPException 401 before any route logic runs.

Config needed (from messenger.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
"""

import logging
import jwt
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from messenger.config.settings import Config
from messenger.domain.ports.repositories import UserRepository
from messenger.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class AuthIdentity:
    """Verified token claims."""

    external_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    avatar: str = ""


@dataclass
class AuthUser:
    """The registered user behind the request."""

    id: UserId
    external_id: str


security = HTTPBearer()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthIdentity:
    """
    Extract and validate identity from JWT token.

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected token: {e}")
        raise _unauthorized("Invalid token")

    external_id = claims.get("sub")
    if not external_id:
        raise _unauthorized("Missing required claims in token")

    return AuthIdentity(
        external_id=external_id,
        email=claims.get("email"),
        name=claims.get("name"),
        avatar=claims.get("picture") or "",
    )


async def get_current_user(
    request: Request,
    identity: AuthIdentity = Depends(get_identity),
) -> AuthUser:
    """Resolve the token subject to a registered user."""
    container = request.state.dishka_container
    user_repository = await container.get(UserRepository)

    user = await user_repository.get_by_external_id(identity.external_id)
    if user is None:
        raise _unauthorized("User is not registered")

    return AuthUser(id=user.id, external_id=user.external_id)
