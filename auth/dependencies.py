"""
FastAPI dependencies for authentication.

``get_current_user`` gates protected routes: a missing header or a
non-Bearer scheme answers 401, a token that fails verification answers
403.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_token_service
from api.errors import Forbidden, Unauthenticated
from auth.jwt import InvalidTokenError, TokenClaims, TokenService

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    Extract and verify the Bearer token, returning its claims.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token provided")
    try:
        return tokens.verify_token(credentials.credentials)
    except InvalidTokenError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise Forbidden("Invalid token") from exc
