"""
SQLAlchemy ORM models for users and their vehicles.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class Vehicle(Base):
    __tablename__ = "vehicles"

    # Caller-supplied; unique across every owner.
    id = Column(String(255), primary_key=True)
    user_email = Column(
        String(255),
        ForeignKey("users.email", ondelete="CASCADE"),
        nullable=False,
    )
    make = Column(String(255), nullable=False)
    model = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(255), nullable=False)
    license_plate = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("idx_vehicles_owner_created", "user_email", "created_at"),
    )
