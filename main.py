"""
User records demo API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.errors import setup_exception_handlers
from api.middleware import register_middleware
from api.routes import router as api_router
from auth.jwt import TokenService
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.credential_store import CredentialStore
from database.user_store import UserStore

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx", "urllib3"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None,
    credential_store: Optional[CredentialStore] = None,
    token_service: Optional[TokenService] = None,
) -> FastAPI:
    settings = settings or config
    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="In-memory user records with token-gated writes.",
        docs_url=settings.docs_url,
        redoc_url=None,
        openapi_url=settings.openapi_url,
    )

    app.state.settings = settings
    app.state.user_store = user_store if user_store is not None else UserStore()
    app.state.credential_store = (
        credential_store if credential_store is not None else CredentialStore()
    )
    app.state.token_service = token_service or TokenService(
        secret=settings.jwt_secret,
        expiry_seconds=settings.jwt_expiry_seconds,
    )

    register_middleware(app, settings)
    setup_exception_handlers(app)

    # Routes
    app.include_router(api_router)
    app.include_router(auth_router)

    return app


app = create_app()

if __name__ == "__main__":
    logger.info("Server is running at port %d", config.port)
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
