"""
Wire schemas for vehicles.

The JSON shape uses ``licensePlate``; storage and Python code use
``license_plate``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VehicleFields(BaseModel):
    """The five owner-editable attributes."""

    model_config = ConfigDict(populate_by_name=True)

    make: str = Field(..., min_length=1, max_length=255)
    model: str = Field(..., min_length=1, max_length=255)
    # INTEGER column; bools and numeric strings are rejected.
    year: int = Field(..., gt=0, le=2_147_483_647, strict=True)
    color: str = Field(..., min_length=1, max_length=255)
    license_plate: str = Field(..., min_length=1, max_length=255, alias="licensePlate")


class VehicleUpdate(VehicleFields):
    pass


class VehicleIn(VehicleFields):
    id: str = Field(..., min_length=1, max_length=255)


class VehicleOut(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )

    id: str
    make: str
    model: str
    year: int
    color: str
    license_plate: str = Field(..., alias="licensePlate")


class MessageResponse(BaseModel):
    message: str
