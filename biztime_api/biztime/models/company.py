"""Company model."""
from typing import List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db import Base


class Company(Base):
    """Company, keyed by a URL-safe code derived from its name."""

    __tablename__ = "companies"

    code: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    invoices: Mapped[List["Invoice"]] = relationship(
        "Invoice",
        back_populates="company",
        passive_deletes=True,
        order_by="Invoice.id",
    )
    industries: Mapped[List["Industry"]] = relationship(
        "Industry",
        secondary="company_industries",
        back_populates="companies",
        order_by="Industry.code",
    )
