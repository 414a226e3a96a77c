from __future__ import annotations
import logging
from datetime import date
from typing import Optional, List

from sqlalchemy import select, and_, or_
from sqlalchemy.orm import Session

from .models import AvailabilityWindow
from .schema import AvailabilityCreate, AvailabilityUpdate
from scheduling.errors import reject_if_invalid
from scheduling.recurrence import applies
from scheduling.store import SqlAvailabilityStore, window_rule_from_row
from scheduling.validators import parse_hhmm, validate_window

logger = logging.getLogger(__name__)

# columns a PATCH may not clear
_REQUIRED = ("starts_on", "start_time", "end_time", "repeat_on", "is_active")


# -------- queries --------

def get_availability_for_org(db: Session, window_id: int, org_id: int) -> AvailabilityWindow | None:
    stmt = select(AvailabilityWindow).where(
        AvailabilityWindow.id == window_id, AvailabilityWindow.org_id == org_id
    )
    return db.scalars(stmt).first()


def get_availabilities(
    db: Session,
    *,
    org_id: int,
    employee_id: Optional[int] = None,
    is_active: Optional[bool] = None,
    active_on: Optional[date] = None,
) -> List[AvailabilityWindow]:
    """List windows for an org. ``active_on`` keeps windows whose validity period covers that date."""
    stmt = select(AvailabilityWindow).where(AvailabilityWindow.org_id == org_id)
    if employee_id is not None:
        stmt = stmt.where(AvailabilityWindow.employee_id == employee_id)
    if is_active is not None:
        stmt = stmt.where(AvailabilityWindow.is_active.is_(is_active))
    if active_on is not None:
        stmt = stmt.where(
            and_(
                AvailabilityWindow.starts_on <= active_on,
                or_(AvailabilityWindow.until.is_(None), AvailabilityWindow.until >= active_on),
            )
        )
    stmt = stmt.order_by(
        AvailabilityWindow.starts_on.desc(),
        AvailabilityWindow.created_at.desc(),
        AvailabilityWindow.id.desc(),
    )
    return list(db.scalars(stmt).unique())


def get_availability_for_date(db: Session, *, org_id: int, employee_id: int, on: date) -> List[AvailabilityWindow]:
    """Active windows of one employee whose weekly rule applies on ``on`` (leave is not considered)."""
    rows = get_availabilities(db, org_id=org_id, employee_id=employee_id, is_active=True, active_on=on)
    return [r for r in rows if applies(window_rule_from_row(r), on)]


# -------- mutations --------

def create_availability(db: Session, dto: AvailabilityCreate) -> AvailabilityWindow:
    result = validate_window(dto, org_id=dto.org_id, store=SqlAvailabilityStore(db))
    reject_if_invalid(result, "availability window is invalid")

    row = AvailabilityWindow(
        org_id=dto.org_id,
        employee_id=dto.employee_id,
        starts_on=dto.starts_on,
        until=dto.until,
        start_time=parse_hhmm(dto.start_time),
        end_time=parse_hhmm(dto.end_time),
        repeat_on=sorted(set(dto.repeat_on)),
        note=dto.note,
        is_active=dto.is_active,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("created availability window %s for employee %s", row.id, row.employee_id)
    return row


def update_availability(
    db: Session,
    window_id: int,
    patch: AvailabilityUpdate,
    org_id: int) -> AvailabilityWindow | None:
    row = get_availability_for_org(db, window_id, org_id)
    if not row:
        return None

    data = patch.model_dump(exclude_unset=True)
    for k in _REQUIRED:
        if k in data and data[k] is None:
            data.pop(k)

    # validate the merged row, not just the patch
    draft = AvailabilityCreate(
        org_id=org_id,
        employee_id=row.employee_id,
        starts_on=data.get("starts_on", row.starts_on),
        until=data.get("until", row.until),
        start_time=data.get("start_time", row.start_time.strftime("%H:%M")),
        end_time=data.get("end_time", row.end_time.strftime("%H:%M")),
        repeat_on=data.get("repeat_on", row.repeat_on),
        note=data.get("note", row.note),
        is_active=data.get("is_active", row.is_active),
    )
    result = validate_window(draft, org_id=org_id, store=SqlAvailabilityStore(db))
    reject_if_invalid(result, "availability window is invalid")

    for k, v in data.items():
        if k in ("start_time", "end_time"):
            v = parse_hhmm(v)
        elif k == "repeat_on":
            v = sorted(set(v))
        setattr(row, k, v)

    db.commit()
    db.refresh(row)
    return row


def toggle_availability(db: Session, window_id: int, org_id: int) -> AvailabilityWindow | None:
    row = get_availability_for_org(db, window_id, org_id)
    if not row:
        return None
    row.is_active = not row.is_active
    db.commit()
    db.refresh(row)
    return row


def delete_availability(db: Session, window_id: int, *, org_id: int) -> bool:
    row = get_availability_for_org(db, window_id, org_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    logger.info("deleted availability window %s", window_id)
    return True
