from __future__ import annotations
from datetime import date, datetime
from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func
from core.database import Base

class LeaveBlock(Base):
    __tablename__ = "employee_leave_days"

    id: Mapped[int] = mapped_column(primary_key=True)
    org_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )
    leave_type_id: Mapped[int] = mapped_column(
        ForeignKey("leave_types.id", ondelete="RESTRICT"), index=True
    )

    # both inclusive
    starts_on: Mapped[date] = mapped_column(Date, nullable=False)
    until:     Mapped[date] = mapped_column(Date, nullable=False)

    note: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    employee = relationship("Employee", back_populates="leave_days", lazy="joined")
    leave_type = relationship("LeaveType", lazy="joined")

    __table_args__ = (
        CheckConstraint("starts_on <= until", name="ck_leave_days_range"),
        Index("ix_leave_days_emp_start", "employee_id", "starts_on"),
    )
