"""
Credential store — user registration and password verification.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.password import hash_password, verify_password
from database.models import User

logger = logging.getLogger(__name__)


class DuplicateEmail(Exception):
    """A user with this email is already registered."""


class InvalidCredentials(Exception):
    """Unknown email or wrong password; the two are never told apart."""


class CredentialStore:
    """Users and their bcrypt password hashes, bound to one DB session."""

    def __init__(self, session: AsyncSession, *, bcrypt_rounds: int = 10) -> None:
        self._session = session
        self._bcrypt_rounds = bcrypt_rounds

    async def _exists(self, email: str) -> bool:
        result = await self._session.execute(
            select(User.id).where(User.email == email)
        )
        return result.scalar_one_or_none() is not None

    async def register(self, email: str, password: str) -> None:
        """
        Store a new user with a salted hash of ``password``.

        Raises ``DuplicateEmail`` if ``email`` is already taken, including
        when a concurrent signup claims it between the check and the insert.
        """
        if await self._exists(email):
            raise DuplicateEmail(email)

        self._session.add(
            User(
                email=email,
                password_hash=hash_password(password, rounds=self._bcrypt_rounds),
            )
        )
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if await self._exists(email):
                raise DuplicateEmail(email) from exc
            raise

    async def verify(self, email: str, password: str) -> str:
        """Return the stored email when ``password`` matches its hash."""
        result = await self._session.execute(
            select(User).where(User.email == email)
        )
        user = result.scalar_one_or_none()

        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentials()
        return user.email
