"""
Auth API routes — register, login.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter, Body, Depends, status

from api.dependencies import get_credential_store, get_settings, get_token_service
from api.errors import ApiError, Conflict, Unauthenticated
from auth.jwt import TokenService
from auth.models import Credential
from auth.password import hash_password, verify_password
from config.settings import Settings
from database.credential_store import CredentialStore, DuplicateEmailError
from utils.schemas import CREDENTIALS_EXAMPLE, MessageResponse, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

_INVALID_LOGIN = "Invalid email or password"


def _read_credentials(body: Optional[Dict[str, Any]]) -> Tuple[str, str]:
    body = body or {}
    email = body.get("email")
    password = body.get("password")
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise ApiError("Email and password are required")
    return email, password


_credentials_body = Body(None, examples=[CREDENTIALS_EXAMPLE])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    summary="Register a new user",
    responses={400: {"model": MessageResponse, "description": "Email already exists"}},
)
async def register(
    body: Optional[Dict[str, Any]] = _credentials_body,
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Register an email + password; the password is stored as a bcrypt hash."""
    email, password = _read_credentials(body)
    if store.exists(email):
        raise Conflict("Email already exists")

    password_hash = await asyncio.to_thread(hash_password, password, settings.bcrypt_rounds)
    try:
        credential = store.add(email, password_hash)
    except DuplicateEmailError as exc:
        raise Conflict("Email already exists") from exc

    logger.info("Registered credential %d", credential.id)
    return {"message": "User registered"}


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login and get a token",
    responses={
        400: {"model": MessageResponse, "description": "Missing email or password"},
        401: {"model": MessageResponse, "description": "Invalid credentials"},
    },
)
async def login(
    body: Optional[Dict[str, Any]] = _credentials_body,
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Login with email + password and receive a bearer token valid for one hour."""
    email, password = _read_credentials(body)
    credential: Optional[Credential] = store.find_by_email(email)

    if credential is None or not await asyncio.to_thread(
        verify_password, password, credential.password_hash
    ):
        logger.info("Failed login attempt")
        raise Unauthenticated(_INVALID_LOGIN)

    logger.info("Login: credential %d", credential.id)
    return {"token": tokens.create_token(credential.id, credential.email)}
