"""
Application settings loaded from environment variables.
"""

import os
from typing import List

from pydantic_settings import BaseSettings


def _resolve_env_file() -> str:
    """Pick the dotenv file for the current deployment (``APP_ENV``)."""
    if os.getenv("APP_ENV", "").strip().lower() == "production":
        return ".env.production"
    return ".env.local"


class Settings(BaseSettings):
    app_title: str = "My API"
    app_version: str = "1.0.0"
    greeting: str = "Hello, API Testing!"

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = "change-me-jwt-secret-key"       # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 3600                      # 1 hour
    bcrypt_rounds: int = 10

    # ── Docs ─────────────────────────────────────────────────────────────
    docs_url: str = "/api-docs"
    openapi_url: str = "/api-docs/swagger.json"

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: List[str] = [
        "http://localhost:5173",
        "https://test-api-ui-teal.vercel.app",
    ]

    model_config = {
        "env_file": _resolve_env_file(),
        "case_sensitive": False,
    }


config = Settings()
