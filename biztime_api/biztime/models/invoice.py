"""Invoice model."""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, Float, ForeignKey, Integer, String, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Invoice(Base):
    """Invoice billed to a company; paid_date tracks the unpaid -> paid transition."""

    __tablename__ = "invoices"
    __table_args__ = (CheckConstraint("amt > 0", name="invoices_amt_check"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comp_code: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amt: Mapped[float] = mapped_column(Float, nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    add_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    paid_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    company = relationship("Company", back_populates="invoices")
