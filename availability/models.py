from __future__ import annotations
from datetime import date, datetime, time
from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, Index, String, Time, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func
from core.database import Base

class AvailabilityWindow(Base):
    __tablename__ = "employee_availability"

    id: Mapped[int] = mapped_column(primary_key=True)
    org_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )

    starts_on: Mapped[date] = mapped_column(Date, nullable=False)
    until: Mapped[date | None] = mapped_column(Date, nullable=True)  # NULL = open-ended

    start_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    end_time:   Mapped[time] = mapped_column(Time(timezone=False), nullable=False)

    # 0=Monday .. 6=Sunday
    repeat_on: Mapped[list[int]] = mapped_column(JSON, nullable=False)

    note: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, server_default=text("true"), default=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    employee = relationship("Employee", back_populates="availability", lazy="joined")

    __table_args__ = (
        Index("ix_availability_emp_active", "employee_id", "is_active"),
    )
