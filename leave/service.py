from __future__ import annotations
import logging
from datetime import date
from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import LeaveBlock
from .schema import LeaveCreate, LeaveUpdate
from scheduling.errors import EmployeeNotFound, reject_if_invalid
from scheduling.leave_overlap import covered_by_leave, overlaps_range
from scheduling.store import SqlAvailabilityStore, leave_range_from_row
from scheduling.validators import validate_leave_block

logger = logging.getLogger(__name__)


# -------- queries --------

def get_leave_for_org(db: Session, leave_id: int, org_id: int) -> LeaveBlock | None:
    stmt = select(LeaveBlock).where(LeaveBlock.id == leave_id, LeaveBlock.org_id == org_id)
    return db.scalars(stmt).first()


def get_leaves(
    db: Session,
    *,
    org_id: int,
    employee_id: Optional[int] = None,
    leave_type_id: Optional[int] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> List[LeaveBlock]:
    """List leave for an org. ``date_from``/``date_to`` keep blocks lying inside those bounds."""
    stmt = select(LeaveBlock).where(LeaveBlock.org_id == org_id)
    if employee_id is not None:
        stmt = stmt.where(LeaveBlock.employee_id == employee_id)
    if leave_type_id is not None:
        stmt = stmt.where(LeaveBlock.leave_type_id == leave_type_id)
    if date_from is not None:
        stmt = stmt.where(LeaveBlock.starts_on >= date_from)
    if date_to is not None:
        stmt = stmt.where(LeaveBlock.until <= date_to)
    stmt = stmt.order_by(LeaveBlock.starts_on.desc(), LeaveBlock.created_at.desc(), LeaveBlock.id.desc())
    return list(db.scalars(stmt).unique())


def _employee_leaves(db: Session, org_id: int, employee_id: int) -> List[LeaveBlock]:
    if not SqlAvailabilityStore(db).employee_exists(employee_id, org_id):
        raise EmployeeNotFound(employee_id, org_id)
    stmt = (
        select(LeaveBlock)
        .where(LeaveBlock.org_id == org_id, LeaveBlock.employee_id == employee_id)
        .order_by(LeaveBlock.starts_on.asc(), LeaveBlock.id.asc())
    )
    return list(db.scalars(stmt).unique())


def is_employee_on_leave(db: Session, *, org_id: int, employee_id: int, on: date) -> bool:
    rows = _employee_leaves(db, org_id, employee_id)
    return any(covered_by_leave(leave_range_from_row(r), on) for r in rows)


def get_employee_leaves_in_range(
    db: Session,
    *,
    org_id: int,
    employee_id: int,
    start: date,
    end: date,
) -> List[LeaveBlock]:
    """Leave blocks touching ``[start, end]``, oldest first."""
    rows = _employee_leaves(db, org_id, employee_id)
    return [r for r in rows if overlaps_range(leave_range_from_row(r), start, end)]


# -------- mutations --------

def create_leave(db: Session, dto: LeaveCreate) -> LeaveBlock:
    result = validate_leave_block(dto, org_id=dto.org_id, store=SqlAvailabilityStore(db))
    reject_if_invalid(result, "leave days are invalid")

    row = LeaveBlock(
        org_id=dto.org_id,
        employee_id=dto.employee_id,
        leave_type_id=dto.leave_type_id,
        starts_on=dto.starts_on,
        until=dto.until,
        note=dto.note,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(
        "created leave %s for employee %s (%s..%s)", row.id, row.employee_id, row.starts_on, row.until
    )
    return row


def update_leave(db: Session, leave_id: int, patch: LeaveUpdate, org_id: int) -> LeaveBlock | None:
    row = get_leave_for_org(db, leave_id, org_id)
    if not row:
        return None

    data = patch.model_dump(exclude_unset=True)
    # only note may be cleared
    data = {k: v for k, v in data.items() if v is not None or k == "note"}

    draft = LeaveCreate(
        org_id=org_id,
        employee_id=row.employee_id,
        leave_type_id=data.get("leave_type_id", row.leave_type_id),
        starts_on=data.get("starts_on", row.starts_on),
        until=data.get("until", row.until),
        note=data.get("note", row.note),
    )
    result = validate_leave_block(draft, org_id=org_id, store=SqlAvailabilityStore(db))
    reject_if_invalid(result, "leave days are invalid")

    for k, v in data.items():
        setattr(row, k, v)

    db.commit()
    db.refresh(row)
    return row


def delete_leave(db: Session, leave_id: int, *, org_id: int) -> bool:
    row = get_leave_for_org(db, leave_id, org_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    logger.info("deleted leave %s", leave_id)
    return True
