"""initial: companies, invoices, industries, company_industries

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("code", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("code"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "industries",
        sa.Column("code", sa.String(255), nullable=False),
        sa.Column("industry", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("code"),
        sa.UniqueConstraint("industry"),
    )
    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comp_code", sa.String(255), nullable=False),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column("paid", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("add_date", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("paid_date", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("amt > 0", name="invoices_amt_check"),
        sa.ForeignKeyConstraint(["comp_code"], ["companies.code"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "company_industries",
        sa.Column("comp_code", sa.String(255), nullable=False),
        sa.Column("industry_code", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["comp_code"], ["companies.code"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["industry_code"], ["industries.code"]),
        sa.PrimaryKeyConstraint("comp_code", "industry_code"),
    )
    op.create_index("ix_invoices_comp_code", "invoices", ["comp_code"])
    op.create_index("ix_company_industries_industry_code", "company_industries", ["industry_code"])


def downgrade() -> None:
    op.drop_index("ix_company_industries_industry_code", table_name="company_industries")
    op.drop_index("ix_invoices_comp_code", table_name="invoices")
    op.drop_table("company_industries")
    op.drop_table("invoices")
    op.drop_table("industries")
    op.drop_table("companies")
