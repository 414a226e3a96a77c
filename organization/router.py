from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_manager

from .schema import OrganizationSchema, OrganizationUpdate
from . import service

organization_router = APIRouter(prefix="/organizations", tags=["Organizations"])

@organization_router.get("/me", response_model=OrganizationSchema)
def my_organization(
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    ):
    obj = service.get_organization(db, user.org_id)
    if not obj:
        raise HTTPException(status_code=404, detail="organization not found")
    return obj

# Rename own org (manager only)
@organization_router.patch("/me", response_model=OrganizationSchema)
def organization_patch(
    payload: OrganizationUpdate,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    _mgr = Depends(require_manager),
    ):
    return service.update_organization(db, user.org_id, payload)
