"""Invoices API: list / get / create / update (paid transition) / delete."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.db import get_db
from biztime.schemas.common import StatusResponse
from biztime.schemas.invoice import (
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceOut,
    InvoiceResponse,
    InvoiceSummary,
    InvoiceUpdate,
)
from biztime.services import invoice_service

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=InvoiceListResponse)
@router.get("/", response_model=InvoiceListResponse, include_in_schema=False)
async def get_invoices(db: AsyncSession = Depends(get_db)) -> InvoiceListResponse:
    rows = await invoice_service.list_invoices(db)
    return InvoiceListResponse(invoices=[InvoiceSummary.model_validate(r) for r in rows])


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
async def get_invoice(invoice_id: int, db: AsyncSession = Depends(get_db)) -> InvoiceDetailResponse:
    """Invoice with its company nested; 404 if unknown."""
    invoice = await invoice_service.get_invoice(db, invoice_id)
    return InvoiceDetailResponse(invoice=InvoiceDetail.model_validate(invoice))


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def post_invoice(
    payload: InvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Create an unpaid invoice for a company."""
    invoice = await invoice_service.create_invoice(db, comp_code=payload.comp_code, amt=payload.amt)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def put_invoice(
    invoice_id: int,
    payload: InvoiceUpdate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """
    Update amt and paid. Paying an unpaid invoice stamps paid_date, un-paying clears it,
    otherwise paid_date is kept. 404 if unknown.
    """
    row = await invoice_service.update_invoice(db, invoice_id, amt=payload.amt, paid=bool(payload.paid))
    return InvoiceResponse(invoice=InvoiceOut.model_validate(row))


@router.delete("/{invoice_id}", response_model=StatusResponse)
async def delete_invoice(invoice_id: int, db: AsyncSession = Depends(get_db)) -> StatusResponse:
    """Delete an invoice; 404 if nothing was deleted."""
    await invoice_service.delete_invoice(db, invoice_id)
    return StatusResponse(status="deleted")
