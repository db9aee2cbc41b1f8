"""Industry model and the company <-> industry association table."""
from typing import List

from sqlalchemy import Column, ForeignKey, Index, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db import Base

# Join rows have no identity beyond the (comp_code, industry_code) pair.
company_industries = Table(
    "company_industries",
    Base.metadata,
    Column(
        "comp_code",
        String(255),
        ForeignKey("companies.code", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "industry_code",
        String(255),
        ForeignKey("industries.code"),
        primary_key=True,
    ),
    Index("ix_company_industries_industry_code", "industry_code"),
)


class Industry(Base):
    """Industry (e.g. acct / Accounting)."""

    __tablename__ = "industries"

    code: Mapped[str] = mapped_column(String(255), primary_key=True)
    industry: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    companies: Mapped[List["Company"]] = relationship(
        "Company",
        secondary=company_industries,
        back_populates="industries",
        order_by="Company.code",
    )
