from __future__ import annotations
from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class LeaveType(Base):
    __tablename__ = "leave_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    org_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    description: Mapped[str | None] = mapped_column(Text(), nullable=True)
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)  # "#RRGGBB"

    is_paid: Mapped[bool] = mapped_column(Boolean, server_default=text("true"), default=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, server_default=text("true"), default=True, nullable=False)
    order: Mapped[int] = mapped_column(Integer, server_default=text("0"), default=0, nullable=False)

    org = relationship("Organization", back_populates="leave_types")

    __table_args__ = (
        UniqueConstraint("org_id", "name", name="uq_leave_type_name"),
        UniqueConstraint("org_id", "code", name="uq_leave_type_code"),
    )
