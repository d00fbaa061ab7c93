"""Billing FastAPI routes: stay quotes, the reports dashboard and the session invoice."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from Billing.invoice import ItemizedInvoice
from Billing.reports import occupancy_report
from Database.db import FrontDeskDB
from Database.deps import get_db

from .models import (
    DiscountFields,
    InvoiceResponse,
    ItemFields,
    MessageResponse,
    PaymentFields,
    PaymentResponse,
    QuoteResponse,
    ReportResponse,
)

logger = logging.getLogger(__name__)

# mount api router
# handlers call the stores directly on the event loop (no run_in_threadpool)
# so only one request at a time touches the in-memory state and its files
billing_router = APIRouter()


def _invoice_snapshot(invoice: ItemizedInvoice, status_code: int = status.HTTP_200_OK) -> InvoiceResponse:
    return InvoiceResponse(
        status=status_code,
        items=invoice.items,
        subtotal=invoice.subtotal,
        discount=invoice.discount,
        grand_total=invoice.grand_total,
        amount_paid=invoice.amount_paid,
        summary=invoice.get_summary(),
    )

@billing_router.get("/health", response_model=MessageResponse)
async def health_check() -> MessageResponse:
    """Quick liveness probe for the billing service."""

    return MessageResponse(status=status.HTTP_200_OK, message="Billing service is healthy")

@billing_router.get("/quote/{room_number}", response_model=QuoteResponse)
async def generate_bill(room_number: int, db: FrontDeskDB = Depends(get_db)) -> QuoteResponse:
    """
    Fixed-rate bill for the stay in a room.

    Raises:
        HTTPException: 404 when the room is unknown or has nobody to bill.
    """

    bill = db.billing.generate_bill(room_number)
    if bill is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No billable stay for room {room_number}",
        )

    return QuoteResponse(status=status.HTTP_200_OK, bill=bill)

@billing_router.get("/report", response_model=ReportResponse)
async def get_report(db: FrontDeskDB = Depends(get_db)) -> ReportResponse:
    return ReportResponse(status=status.HTTP_200_OK, report=occupancy_report(db.rooms))

@billing_router.get("/invoice", response_model=InvoiceResponse)
async def get_invoice(db: FrontDeskDB = Depends(get_db)) -> InvoiceResponse:
    return _invoice_snapshot(db.invoice)

@billing_router.post(
    "/invoice/items",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_invoice_item(fields: ItemFields, db: FrontDeskDB = Depends(get_db)) -> InvoiceResponse:
    """Append a line item to the session invoice."""

    if not db.invoice.add_item(fields.name, fields.price, fields.quantity):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Line items need a name, a non-negative price and a positive quantity.",
        )

    logger.info("Invoice item added", extra={"item": fields.name})
    return _invoice_snapshot(db.invoice, status.HTTP_201_CREATED)

@billing_router.post("/invoice/discount", response_model=InvoiceResponse)
async def apply_invoice_discount(fields: DiscountFields, db: FrontDeskDB = Depends(get_db)) -> InvoiceResponse:
    """Replace the invoice discount with a percentage of the current subtotal."""

    db.invoice.apply_discount(fields.percent)
    return _invoice_snapshot(db.invoice)

@billing_router.post("/invoice/payment", response_model=PaymentResponse)
async def pay_invoice(fields: PaymentFields, db: FrontDeskDB = Depends(get_db)) -> PaymentResponse:
    """
    Tender a payment.

    A short payment is not an error: the response carries accepted=false and
    the missing amount.
    """

    return PaymentResponse(status=status.HTTP_200_OK, payment=db.invoice.process_payment(fields.amount))

@billing_router.delete("/invoice", response_model=InvoiceResponse)
async def reset_invoice(db: FrontDeskDB = Depends(get_db)) -> InvoiceResponse:
    db.invoice.reset()
    logger.info("Invoice reset")
    return _invoice_snapshot(db.invoice)
