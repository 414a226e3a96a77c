from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select, or_
from .models import LeaveType
from .schema import LeaveTypeCreate, LeaveTypeUpdate

def get_leave_types(
    db: Session,
    *,
    org_id: int,
    search: Optional[str] = None,
    is_active: Optional[bool] = None,
    is_paid: Optional[bool] = None,
    ) -> List[LeaveType]:
    statement = select(LeaveType).where(LeaveType.org_id == org_id)
    if is_active is not None:
        statement = statement.where(LeaveType.is_active.is_(is_active))
    if is_paid is not None:
        statement = statement.where(LeaveType.is_paid.is_(is_paid))
    if search:
        like = f"%{search}%"
        statement = statement.where(
            or_(LeaveType.name.ilike(like), LeaveType.code.ilike(like), LeaveType.description.ilike(like))
        )
    statement = statement.order_by(LeaveType.order.asc(), LeaveType.name.asc())
    return list(db.scalars(statement))

def get_leave_type_for_org(db: Session, leave_type_id: int, org_id: int) -> Optional[LeaveType]:
    statement = select(LeaveType).where(LeaveType.id == leave_type_id, LeaveType.org_id == org_id)
    return db.scalars(statement).first()

def create_leave_type(db: Session, dto: LeaveTypeCreate) -> LeaveType:
    db_leave_type = LeaveType(**dto.model_dump())
    db.add(db_leave_type)
    db.commit()
    db.refresh(db_leave_type)
    return db_leave_type

def update_leave_type(db: Session, leave_type_id: int, patch: LeaveTypeUpdate) -> Optional[LeaveType]:
    db_leave_type = db.get(LeaveType, leave_type_id)
    if not db_leave_type:
        return None
    data = patch.model_dump(exclude_unset=True, exclude_none=True)
    for k, v in data.items():
        setattr(db_leave_type, k, v)
    db.commit()
    db.refresh(db_leave_type)
    return db_leave_type

def toggle_leave_type(db: Session, leave_type_id: int) -> Optional[LeaveType]:
    db_leave_type = db.get(LeaveType, leave_type_id)
    if not db_leave_type:
        return None
    db_leave_type.is_active = not db_leave_type.is_active
    db.commit()
    db.refresh(db_leave_type)
    return db_leave_type

def delete_leave_type(db: Session, leave_type_id: int) -> None:
    db_leave_type = db.get(LeaveType, leave_type_id)
    if db_leave_type:
        db.delete(db_leave_type)
        db.commit()
    return
