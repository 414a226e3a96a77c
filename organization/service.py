from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException

from .models import Organization
from .schema import OrganizationUpdate

def get_organization(db: Session, org_id: int) -> Optional[Organization]:
    return db.get(Organization, org_id)

def update_organization(db: Session, org_id: int, patch: OrganizationUpdate) -> Organization:
    org = db.get(Organization, org_id)
    if not org:
        raise HTTPException(status_code=404, detail="organization not found")

    data = patch.model_dump(exclude_unset=True, exclude_none=True)
    for k, v in data.items():
        setattr(org, k, v)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="organization name already exists")

    db.refresh(org)
    return org
