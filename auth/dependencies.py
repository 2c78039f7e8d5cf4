"""
FastAPI dependencies for authentication.

Provides ``get_current_identity``, the gate every vehicle route sits
behind, and the per-request component factories used by the auth and
vehicle routers.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.credentials import CredentialStore
from auth.jwt import TokenError, TokenService
from config.settings import Settings
from database.session import get_db_session

logger = logging.getLogger(__name__)

# Yields None when the header is absent or not a Bearer credential.
_bearer_scheme = HTTPBearer(auto_error=False)


async def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_credential_store(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> CredentialStore:
    return CredentialStore(session, bcrypt_rounds=settings.bcrypt_rounds)


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Extract and verify the Bearer token, returning the authenticated email.

    No token at all is a 401; any token that fails verification is a 403,
    whatever the reason. The reason only goes to the log.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
        )

    try:
        identity = tokens.verify(credentials.credentials)
    except TokenError as exc:
        logger.info("Rejected %s token on %s %s", exc.kind, request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )

    request.state.identity = identity
    return identity
