"""
Vehicle repository — ownership-filtered CRUD over the ``vehicles`` table.

Every statement that touches an existing row carries both the vehicle id
and the owner's email in its WHERE clause, so a row owned by another user
is never read, changed or removed; the caller just sees ``VehicleNotFound``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Vehicle
from vehicles.schemas import VehicleIn, VehicleUpdate

logger = logging.getLogger(__name__)


class DuplicateVehicleId(Exception):
    """The id is already used by some vehicle, whoever owns it."""


class VehicleNotFound(Exception):
    """No vehicle with this id belongs to the caller."""


class VehicleRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _exists(self, vehicle_id: str) -> bool:
        result = await self._session.execute(
            select(Vehicle.id).where(Vehicle.id == vehicle_id)
        )
        return result.scalar_one_or_none() is not None

    async def list(self, owner: str) -> List[Vehicle]:
        """All of ``owner``'s vehicles, newest first."""
        result = await self._session.execute(
            select(Vehicle)
            .where(Vehicle.user_email == owner)
            .order_by(Vehicle.created_at.desc())
        )
        return list(result.scalars().all())

    async def create(self, owner: str, vehicle: VehicleIn) -> None:
        """
        Insert ``vehicle`` for ``owner``.

        Vehicle ids are unique across the whole store, not per owner, so
        this raises ``DuplicateVehicleId`` even when the colliding row
        belongs to another user.
        """
        if await self._exists(vehicle.id):
            raise DuplicateVehicleId(vehicle.id)

        self._session.add(
            Vehicle(
                id=vehicle.id,
                user_email=owner,
                make=vehicle.make,
                model=vehicle.model,
                year=vehicle.year,
                color=vehicle.color,
                license_plate=vehicle.license_plate,
            )
        )
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            # Lost the race against a concurrent insert of the same id;
            # anything else (e.g. an owner row that is gone) propagates.
            if await self._exists(vehicle.id):
                raise DuplicateVehicleId(vehicle.id) from exc
            raise

        logger.info("Vehicle %s created for %s", vehicle.id, owner)

    async def update(self, owner: str, vehicle_id: str, fields: VehicleUpdate) -> None:
        result = await self._session.execute(
            update(Vehicle)
            .where(Vehicle.id == vehicle_id, Vehicle.user_email == owner)
            .values(
                make=fields.make,
                model=fields.model,
                year=fields.year,
                color=fields.color,
                license_plate=fields.license_plate,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise VehicleNotFound(vehicle_id)
        logger.info("Vehicle %s updated by %s", vehicle_id, owner)

    async def delete(self, owner: str, vehicle_id: str) -> None:
        result = await self._session.execute(
            delete(Vehicle)
            .where(Vehicle.id == vehicle_id, Vehicle.user_email == owner)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise VehicleNotFound(vehicle_id)
        logger.info("Vehicle %s deleted by %s", vehicle_id, owner)
