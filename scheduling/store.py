from __future__ import annotations
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from availability.models import AvailabilityWindow
from employee.models import Employee
from leave.models import LeaveBlock
from leavetype.models import LeaveType

from .values import LeaveRange, WindowRule


class AvailabilityStore(Protocol):
    """Read-side collaborator the resolver and validators depend on."""

    def list_active_windows(self, employee_id: int, org_id: int) -> list[WindowRule]: ...

    def list_leave_blocks(self, employee_id: int, org_id: int) -> list[LeaveRange]: ...

    def employee_exists(self, employee_id: int, org_id: int) -> bool: ...

    def leave_type_exists(self, leave_type_id: int, org_id: int) -> bool: ...


def window_rule_from_row(row: AvailabilityWindow) -> WindowRule:
    return WindowRule(
        id=row.id,
        employee_id=row.employee_id,
        starts_on=row.starts_on,
        until=row.until,
        start_time=row.start_time,
        end_time=row.end_time,
        repeat_on=frozenset(row.repeat_on or ()),
        is_active=bool(row.is_active),
    )


def leave_range_from_row(row: LeaveBlock) -> LeaveRange:
    return LeaveRange(
        id=row.id,
        employee_id=row.employee_id,
        leave_type_id=row.leave_type_id,
        starts_on=row.starts_on,
        until=row.until,
    )


class SqlAvailabilityStore:
    """AvailabilityStore over a SQLAlchemy session. Every query is scoped to the given org."""

    def __init__(self, db: Session):
        self.db = db

    def list_active_windows(self, employee_id: int, org_id: int) -> list[WindowRule]:
        stmt = (
            select(AvailabilityWindow)
            .where(
                AvailabilityWindow.employee_id == employee_id,
                AvailabilityWindow.org_id == org_id,
                AvailabilityWindow.is_active.is_(True),
            )
            .order_by(AvailabilityWindow.start_time, AvailabilityWindow.id)
        )
        return [window_rule_from_row(r) for r in self.db.scalars(stmt).unique()]

    def list_leave_blocks(self, employee_id: int, org_id: int) -> list[LeaveRange]:
        stmt = (
            select(LeaveBlock)
            .where(LeaveBlock.employee_id == employee_id, LeaveBlock.org_id == org_id)
            .order_by(LeaveBlock.starts_on, LeaveBlock.id)
        )
        return [leave_range_from_row(r) for r in self.db.scalars(stmt).unique()]

    def employee_exists(self, employee_id: int, org_id: int) -> bool:
        found = self.db.scalar(
            select(Employee.id).where(Employee.id == employee_id, Employee.org_id == org_id)
        )
        return found is not None

    def leave_type_exists(self, leave_type_id: int, org_id: int) -> bool:
        found = self.db.scalar(
            select(LeaveType.id).where(LeaveType.id == leave_type_id, LeaveType.org_id == org_id)
        )
        return found is not None
