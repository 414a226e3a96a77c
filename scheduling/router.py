from __future__ import annotations
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.config_loader import settings
from core.database import get_db
from authz.deps import require_member

from .errors import EmployeeNotFound, InvalidDateRange
from .resolver import AvailabilityResolver
from .schema import AvailableAtSchema, DayAvailabilitySchema, IntervalSchema
from .store import SqlAvailabilityStore

resolution_router = APIRouter(tags=["Availability Resolution"])


def _resolver(db: Session, org_id: int) -> AvailabilityResolver:
    return AvailabilityResolver(SqlAvailabilityStore(db), org_id=org_id)


def _day(employee_id: int, on: date, intervals) -> DayAvailabilitySchema:
    return DayAvailabilitySchema(
        employee_id=employee_id,
        date=on,
        intervals=[IntervalSchema.from_interval(i) for i in intervals],
    )


# Resolved working intervals for one employee on one date
@resolution_router.get("/employees/{employee_id}/availability", response_model=DayAvailabilitySchema)
def resolve_availability(
    employee_id: int,
    on: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
    org_id: int = Depends(require_member),
):
    try:
        intervals = _resolver(db, org_id).resolve(employee_id, on)
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="employee not found")
    return _day(employee_id, on, intervals)


@resolution_router.get("/employees/{employee_id}/availability/range", response_model=list[DayAvailabilitySchema])
def resolve_availability_range(
    employee_id: int,
    date_from: date = Query(..., alias="from"),
    date_to: date = Query(..., alias="to"),
    db: Session = Depends(get_db),
    org_id: int = Depends(require_member),
):
    try:
        days = _resolver(db, org_id).resolve_range(
            employee_id, date_from, date_to, max_days=settings.MAX_RESOLVE_RANGE_DAYS
        )
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="employee not found")
    except InvalidDateRange as e:
        raise HTTPException(status_code=422, detail=str(e))
    return [_day(employee_id, d, intervals) for d, intervals in days.items()]


@resolution_router.get("/employees/{employee_id}/availability/at", response_model=AvailableAtSchema)
def available_at(
    employee_id: int,
    at: datetime = Query(..., description="organization-local date-time"),
    db: Session = Depends(get_db),
    org_id: int = Depends(require_member),
):
    try:
        available = _resolver(db, org_id).is_available_at(employee_id, at)
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="employee not found")
    return AvailableAtSchema(employee_id=employee_id, available=available)


# Batch: one date, several employees
@resolution_router.get("/availability/resolve", response_model=list[DayAvailabilitySchema])
def resolve_many(
    on: date = Query(..., alias="date"),
    employee_ids: list[int] = Query(...),
    db: Session = Depends(get_db),
    org_id: int = Depends(require_member),
):
    try:
        by_employee = _resolver(db, org_id).resolve_many(employee_ids, on)
    except EmployeeNotFound as e:
        raise HTTPException(status_code=404, detail=f"employee {e.employee_id} not found")
    return [_day(emp_id, on, intervals) for emp_id, intervals in by_employee.items()]
