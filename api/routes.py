"""
REST API routes — greeting, user profiles, next id.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from api.dependencies import get_settings, get_user_store
from api.errors import USER_NOT_FOUND, NotFound, ValidationFailed
from auth.dependencies import get_current_user
from auth.jwt import TokenClaims
from config.settings import Settings
from database.models import UserProfile
from database.user_store import UserStore
from utils.schemas import (
    USER_CREATE_EXAMPLE,
    USER_UPDATE_EXAMPLE,
    ErrorsResponse,
    MessageResponse,
    NextIdResponse,
)
from utils.validators import Invalid, validate_user_create, validate_user_update

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {404: {"model": MessageResponse, "description": USER_NOT_FOUND}}
_INVALID = {400: {"model": ErrorsResponse, "description": "Invalid input"}}
_AUTH = {
    401: {"model": MessageResponse, "description": "No token provided"},
    403: {"model": MessageResponse, "description": "Invalid token"},
}

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _parse_user_id(raw: str) -> int:
    """Leading integer of a path id, like ``parseInt``; anything else is not found."""
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        raise NotFound(USER_NOT_FOUND)
    return int(match.group(1))


@router.get("/hello", response_model=MessageResponse, summary="testing service")
async def hello(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {"message": settings.greeting}


@router.get("/users", response_model=List[UserProfile], summary="Get all users", tags=["users"])
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserProfile]:
    return store.list()


@router.get(
    "/users/{user_id}",
    response_model=UserProfile,
    summary="Get a user by ID",
    tags=["users"],
    responses=_NOT_FOUND,
)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> UserProfile:
    user = store.get(_parse_user_id(user_id))
    if user is None:
        raise NotFound(USER_NOT_FOUND)
    return user


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_model=UserProfile,
    summary="Create a new user",
    tags=["users"],
    responses={**_INVALID, **_AUTH},
)
async def create_user(
    body: Optional[Dict[str, Any]] = Body(None, examples=[USER_CREATE_EXAMPLE]),
    store: UserStore = Depends(get_user_store),
    claims: TokenClaims = Depends(get_current_user),
) -> UserProfile:
    """Create a profile; ``adult`` is derived from ``age``."""
    result = validate_user_create(body or {})
    if isinstance(result, Invalid):
        raise ValidationFailed(result.errors)

    user = store.create(result.record)
    logger.info("User %d created by %s", user.id, claims.email)
    return user


@router.put(
    "/users/{user_id}",
    response_model=UserProfile,
    summary="Update user details",
    tags=["users"],
    responses={**_INVALID, **_NOT_FOUND, **_AUTH},
)
async def update_user(
    user_id: str,
    body: Optional[Dict[str, Any]] = Body(None, examples=[USER_UPDATE_EXAMPLE]),
    store: UserStore = Depends(get_user_store),
    claims: TokenClaims = Depends(get_current_user),
) -> UserProfile:
    """
    Overwrite only the supplied fields.  The body is validated before the
    id is looked up, so an invalid body on an unknown id answers 400.
    """
    result = validate_user_update(body or {})
    if isinstance(result, Invalid):
        raise ValidationFailed(result.errors)

    user = store.update(_parse_user_id(user_id), result.record)
    if user is None:
        raise NotFound(USER_NOT_FOUND)
    logger.info("User %d updated by %s", user.id, claims.email)
    return user


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
    tags=["users"],
    responses={**_NOT_FOUND, **_AUTH},
)
async def delete_user(
    user_id: str,
    store: UserStore = Depends(get_user_store),
    claims: TokenClaims = Depends(get_current_user),
) -> Response:
    parsed_id = _parse_user_id(user_id)
    if not store.delete(parsed_id):
        raise NotFound(USER_NOT_FOUND)
    logger.info("User %d deleted by %s", parsed_id, claims.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/users",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete all users",
    tags=["users"],
    responses=_AUTH,
)
async def delete_all_users(
    store: UserStore = Depends(get_user_store),
    claims: TokenClaims = Depends(get_current_user),
) -> Response:
    store.clear()
    logger.info("All users deleted by %s", claims.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/next-id", response_model=NextIdResponse, summary="Get next id")
async def next_id(store: UserStore = Depends(get_user_store)) -> Dict[str, Any]:
    return {"next-id": store.next_id()}
