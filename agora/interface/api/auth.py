"""Request authentication helpers.

Tokens are read from the Authorization header ("Bearer <token>") with a
fallback to the auth_token cookie.
"""

from collections.abc import Awaitable, Callable

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Cookie, Depends, Header, HTTPException, Request, status

from agora.domain.service import JWTService
from agora.domain.value import UserId

BEARER_PREFIX = "bearer "


def request_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Extract the raw JWT from the request, if any."""
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token


def require_user(action: str) -> Callable[..., Awaitable[UserId]]:
    """Build a dependency resolving the acting user or rejecting with 401.

    FastAPI solves dependencies before validating the request body, so an
    unauthenticated request is rejected even when its body is invalid.

    Args:
        action: What the caller tried to do, for the error message

    Usage:
        user_id: UserId = Depends(require_user("vote"))
    """

    @inject
    async def acting_user(
        request: Request,
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(request_token),
    ) -> UserId:
        user_id = jwt_service.get_user_id_from_token(token)
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Authentication required to {action}",
            )
        return user_id

    return acting_user
