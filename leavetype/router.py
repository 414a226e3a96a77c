from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_manager
from .schema import LeaveTypeSchema, LeaveTypeCreatePayload, LeaveTypeCreate, LeaveTypeUpdate
from . import service

leavetype_router = APIRouter(prefix="/leave-types", tags=["Leave Types"])

# List leave types
@leavetype_router.get("", response_model=list[LeaveTypeSchema])
def list_leave_types(
    search: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None),
    is_paid: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    return service.get_leave_types(db, org_id=user.org_id, search=search, is_active=is_active, is_paid=is_paid)

# Get leave type by id
@leavetype_router.get("/{leave_type_id}", response_model=LeaveTypeSchema)
def leave_type_detail(leave_type_id: int, db: Session = Depends(get_db), user = Depends(get_current_active_user)):
    obj = service.get_leave_type_for_org(db, leave_type_id, user.org_id)
    if not obj:
        raise HTTPException(status_code=404, detail="leave type not found")
    return obj

# Create leave type
@leavetype_router.post("", response_model=LeaveTypeSchema, status_code=status.HTTP_201_CREATED)
def leave_type_post(
    payload: LeaveTypeCreatePayload,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    dto = LeaveTypeCreate(org_id=user.org_id, **payload.model_dump())
    try:
        return service.create_leave_type(db, dto)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="leave type with this name or code already exists")

# Update leave type
@leavetype_router.patch("/{leave_type_id}", response_model=LeaveTypeSchema)
def leave_type_patch(
    leave_type_id: int,
    payload: LeaveTypeUpdate,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    if not service.get_leave_type_for_org(db, leave_type_id, user.org_id):
        raise HTTPException(status_code=404, detail="leave type not found")
    try:
        return service.update_leave_type(db, leave_type_id, payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="leave type with this name or code already exists")

# Flip is_active
@leavetype_router.patch("/{leave_type_id}/toggle-status", response_model=LeaveTypeSchema)
def leave_type_toggle(
    leave_type_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    if not service.get_leave_type_for_org(db, leave_type_id, user.org_id):
        raise HTTPException(status_code=404, detail="leave type not found")
    return service.toggle_leave_type(db, leave_type_id)

# Delete leave type
@leavetype_router.delete("/{leave_type_id}")
def leave_type_delete(
    leave_type_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
):
    if not service.get_leave_type_for_org(db, leave_type_id, user.org_id):
        raise HTTPException(status_code=404, detail="leave type not found")
    try:
        service.delete_leave_type(db, leave_type_id)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="leave type is still referenced by leave days")
    return {"message": "leave type deleted"}
