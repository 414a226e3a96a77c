from __future__ import annotations
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_manager
from scheduling.errors import EmployeeNotFound

from .schema import LeaveSchema, LeaveCreatePayload, LeaveCreate, LeaveUpdate, OnLeaveSchema
from . import service

leave_router = APIRouter(prefix="/leave-days", tags=["Leave Days"])

# List leave rows (scoped to caller's org)
@leave_router.get("", response_model=list[LeaveSchema])
def list_leave_days(
    employee_id: Optional[int] = Query(None),
    leave_type_id: Optional[int] = Query(None),
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    return service.get_leaves(
        db,
        org_id=user.org_id,
        employee_id=employee_id,
        leave_type_id=leave_type_id,
        date_from=date_from,
        date_to=date_to,
    )

# Is the employee on leave on a date?
@leave_router.get("/employee/{employee_id}/on-leave", response_model=OnLeaveSchema)
def employee_on_leave(
    employee_id: int,
    on: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    try:
        on_leave = service.is_employee_on_leave(db, org_id=user.org_id, employee_id=employee_id, on=on)
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="employee not found")
    return OnLeaveSchema(employee_id=employee_id, on=on, on_leave=on_leave)

# Leave blocks touching a date range
@leave_router.get("/employee/{employee_id}/range", response_model=list[LeaveSchema])
def employee_leaves_in_range(
    employee_id: int,
    date_from: date = Query(..., alias="from"),
    date_to: date = Query(..., alias="to"),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    if date_to < date_from:
        raise HTTPException(status_code=422, detail="'to' must be on or after 'from'")
    try:
        return service.get_employee_leaves_in_range(
            db, org_id=user.org_id, employee_id=employee_id, start=date_from, end=date_to
        )
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="employee not found")

# Get single row by id (scoped)
@leave_router.get("/{leave_id}", response_model=LeaveSchema)
def get_leave_days(
    leave_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    obj = service.get_leave_for_org(db, leave_id, user.org_id)
    if not obj:
        raise HTTPException(status_code=404, detail="leave days not found")
    return obj

# Create (manager only)
@leave_router.post("", response_model=LeaveSchema, status_code=status.HTTP_201_CREATED)
def create_leave_days(
    payload: LeaveCreatePayload,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    dto = LeaveCreate(org_id=user.org_id, **payload.model_dump())
    return service.create_leave(db, dto)

# Update (manager only)
@leave_router.patch("/{leave_id}", response_model=LeaveSchema)
def update_leave_days(
    leave_id: int,
    payload: LeaveUpdate,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    obj = service.update_leave(db, leave_id, payload, org_id=user.org_id)
    if not obj:
        raise HTTPException(status_code=404, detail="leave days not found")
    return obj

# Delete (manager only)
@leave_router.delete("/{leave_id}")
def delete_leave_days(
    leave_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    if not service.delete_leave(db, leave_id, org_id=user.org_id):
        raise HTTPException(status_code=404, detail="leave days not found")
    return {"message": "leave days deleted"}
