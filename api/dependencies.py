"""
FastAPI dependencies (shared across routes).

Stores and services live on ``app.state`` so every app instance built
by ``create_app`` owns its own data.
"""

from __future__ import annotations

from fastapi import Request

from auth.jwt import TokenService
from config.settings import Settings
from database.credential_store import CredentialStore
from database.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
