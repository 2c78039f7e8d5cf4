"""
Vehicle API routes — list, create, update, delete.

Route prefix: /api/vehicles. Every route requires a bearer token.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import get_current_identity
from database.session import get_db_session
from vehicles.repository import DuplicateVehicleId, VehicleNotFound, VehicleRepository
from vehicles.schemas import MessageResponse, VehicleIn, VehicleOut, VehicleUpdate

router = APIRouter(tags=["vehicles"])


async def get_vehicle_repository(
    session: AsyncSession = Depends(get_db_session),
) -> VehicleRepository:
    return VehicleRepository(session)


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Vehicle not found",
    )


@router.get("", response_model=List[VehicleOut])
async def list_vehicles(
    identity: str = Depends(get_current_identity),
    repo: VehicleRepository = Depends(get_vehicle_repository),
) -> List[VehicleOut]:
    vehicles = await repo.list(identity)
    return [VehicleOut.model_validate(v) for v in vehicles]


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_vehicle(
    vehicle: VehicleIn,
    identity: str = Depends(get_current_identity),
    repo: VehicleRepository = Depends(get_vehicle_repository),
) -> Dict[str, Any]:
    try:
        await repo.create(identity, vehicle)
    except DuplicateVehicleId:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Vehicle already exists",
        )
    return {"message": "Vehicle created successfully"}


@router.put("/{vehicle_id}", response_model=MessageResponse)
async def update_vehicle(
    vehicle_id: str,
    fields: VehicleUpdate,
    identity: str = Depends(get_current_identity),
    repo: VehicleRepository = Depends(get_vehicle_repository),
) -> Dict[str, Any]:
    """Replace the five editable fields of one of the caller's vehicles."""
    try:
        await repo.update(identity, vehicle_id, fields)
    except VehicleNotFound:
        raise _not_found()
    return {"message": "Vehicle updated successfully"}


@router.delete("/{vehicle_id}", response_model=MessageResponse)
async def delete_vehicle(
    vehicle_id: str,
    identity: str = Depends(get_current_identity),
    repo: VehicleRepository = Depends(get_vehicle_repository),
) -> Dict[str, Any]:
    try:
        await repo.delete(identity, vehicle_id)
    except VehicleNotFound:
        raise _not_found()
    return {"message": "Vehicle deleted successfully"}
