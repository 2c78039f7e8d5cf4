"""
Auth API routes — signup, login.

Route prefix: /api/auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from auth.credentials import CredentialStore, DuplicateEmail, InvalidCredentials
from auth.dependencies import get_credential_store, get_token_service
from auth.jwt import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class SignupRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    # No length cap: an email too long to be stored is just unknown.
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    message: str
    token: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    req: SignupRequest,
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Register a new user and hand back a token for it."""
    try:
        await store.register(req.email, req.password)
    except DuplicateEmail:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists",
        )

    logger.info("Registered user %s", req.email)
    return {"message": "User created successfully", "token": tokens.issue(req.email)}


@router.post("/login", response_model=AuthResponse)
async def login(
    req: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Login with email + password."""
    try:
        identity = await store.verify(req.email, req.password)
    except InvalidCredentials:
        logger.info("Failed login for %s", req.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    logger.info("Login: %s", identity)
    return {"message": "Login successful", "token": tokens.issue(identity)}
