from __future__ import annotations
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_manager

from .schema import AvailabilitySchema, AvailabilityCreatePayload, AvailabilityCreate, AvailabilityUpdate
from . import service

availability_router = APIRouter(prefix="/availability", tags=["Availability"])

# List windows (scoped to caller's org)
@availability_router.get("", response_model=list[AvailabilitySchema])
def list_availability(
    employee_id: Optional[int] = Query(None),
    is_active: Optional[bool] = Query(None),
    on: Optional[date] = Query(None, alias="date", description="only windows valid on this date"),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    return service.get_availabilities(
        db,
        org_id=user.org_id,
        employee_id=employee_id,
        is_active=is_active,
        active_on=on,
    )

# Windows whose weekly rule applies to an employee on a date
@availability_router.get("/employee/{employee_id}", response_model=list[AvailabilitySchema])
def availability_for_date(
    employee_id: int,
    on: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    return service.get_availability_for_date(db, org_id=user.org_id, employee_id=employee_id, on=on)

# Get single row by id (scoped)
@availability_router.get("/{window_id}", response_model=AvailabilitySchema)
def get_availability(
    window_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    obj = service.get_availability_for_org(db, window_id, user.org_id)
    if not obj:
        raise HTTPException(status_code=404, detail="availability not found")
    return obj

# Create (manager only)
@availability_router.post("", response_model=AvailabilitySchema, status_code=status.HTTP_201_CREATED)
def create_availability(
    payload: AvailabilityCreatePayload,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    dto = AvailabilityCreate(org_id=user.org_id, **payload.model_dump())
    return service.create_availability(db, dto)

# Update (manager only)
@availability_router.patch("/{window_id}", response_model=AvailabilitySchema)
def update_availability(
    window_id: int,
    payload: AvailabilityUpdate,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    obj = service.update_availability(db, window_id, payload, org_id=user.org_id)
    if not obj:
        raise HTTPException(status_code=404, detail="availability not found")
    return obj

# Flip is_active (manager only)
@availability_router.patch("/{window_id}/toggle-status", response_model=AvailabilitySchema)
def toggle_availability(
    window_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    obj = service.toggle_availability(db, window_id, user.org_id)
    if not obj:
        raise HTTPException(status_code=404, detail="availability not found")
    return obj

# Delete (manager only)
@availability_router.delete("/{window_id}")
def delete_availability(
    window_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    if not service.delete_availability(db, window_id, org_id=user.org_id):
        raise HTTPException(status_code=404, detail="availability not found")
    return {"message": "availability deleted"}
