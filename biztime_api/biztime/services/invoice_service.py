"""Invoice service: CRUD plus the paid / unpaid transition."""
from typing import Any, Dict, List

from sqlalchemy import case, delete, null, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from biztime.errors import NotFoundError
from biztime.logging_config import get_logger
from biztime.models import Invoice
from biztime.models.invoice import utcnow

logger = get_logger(__name__)

INVOICE_NOT_FOUND = "Invoice not found"

_RETURNING = (
    Invoice.id,
    Invoice.comp_code,
    Invoice.amt,
    Invoice.paid,
    Invoice.add_date,
    Invoice.paid_date,
)


async def list_invoices(db: AsyncSession) -> List[Dict[str, Any]]:
    """All invoices reduced to id + comp_code."""
    r = await db.execute(select(Invoice.id, Invoice.comp_code).order_by(Invoice.id))
    return [dict(row) for row in r.mappings().all()]


async def get_invoice(db: AsyncSession, invoice_id: int) -> Invoice:
    """Invoice with its company loaded. Raises NotFoundError when absent."""
    q = select(Invoice).options(selectinload(Invoice.company)).where(Invoice.id == invoice_id)
    r = await db.execute(q)
    invoice = r.scalar_one_or_none()
    if invoice is None:
        raise NotFoundError(INVOICE_NOT_FOUND)
    return invoice


async def create_invoice(db: AsyncSession, comp_code: str, amt: float) -> Invoice:
    """Insert an unpaid invoice; add_date is set now, paid_date stays null."""
    invoice = Invoice(comp_code=comp_code, amt=amt, paid=False, add_date=utcnow())
    db.add(invoice)
    await db.flush()
    await db.refresh(invoice)
    logger.info("invoice_created", invoice_id=invoice.id, comp_code=comp_code)
    return invoice


def paid_date_for(paid: bool):
    """
    SQL expression for the new paid_date, evaluated against the row's current `paid`:
      unpaid -> paid   : now
      paid   -> unpaid : NULL
      unchanged        : keep paid_date
    """
    if paid:
        return case((Invoice.paid.is_(True), Invoice.paid_date), else_=utcnow())
    return case((Invoice.paid.is_(True), null()), else_=Invoice.paid_date)


async def update_invoice(db: AsyncSession, invoice_id: int, amt: float, paid: bool) -> Dict[str, Any]:
    """
    Set amt and paid in one UPDATE ... RETURNING. paid_date is computed from the
    stored paid flag inside the same statement, so there is no read-then-write gap.
    Raises NotFoundError when no row matches.
    """
    q = (
        update(Invoice)
        .where(Invoice.id == invoice_id)
        .values(amt=amt, paid=paid, paid_date=paid_date_for(paid))
        .returning(*_RETURNING)
        .execution_options(synchronize_session=False)
    )
    r = await db.execute(q)
    row = r.mappings().one_or_none()
    if row is None:
        raise NotFoundError(INVOICE_NOT_FOUND)
    logger.info("invoice_paid_state_updated", invoice_id=invoice_id, paid=row["paid"])
    return dict(row)


async def delete_invoice(db: AsyncSession, invoice_id: int) -> None:
    """Delete by id. Raises NotFoundError when nothing was deleted."""
    r = await db.execute(delete(Invoice).where(Invoice.id == invoice_id).returning(Invoice.id))
    if r.scalar_one_or_none() is None:
        raise NotFoundError(INVOICE_NOT_FOUND)
    logger.info("invoice_deleted", invoice_id=invoice_id)
