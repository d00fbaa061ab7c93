"""Shared API request and response models for the Front Desk system."""

from typing import Optional

from pydantic import BaseModel, Field

from Billing.invoice import LineItem, PaymentResult
from Billing.quote import OccupiedStay, StayRateQuote
from Billing.reports import OccupancyReport
from Customers.customer import Customer
from Hotels.structure import Room


class CustomerFields(BaseModel):
    """Payload accepted when adding a customer."""

    name: str
    contact: str
    email: Optional[str] = ""


class BookingFields(BaseModel):
    """Payload accepted when booking a room."""

    customer_id: int


class ItemFields(BaseModel):
    """Payload accepted when adding an invoice line item."""

    name: str
    price: float
    quantity: int = 1


class DiscountFields(BaseModel):

    percent: float = Field(ge=0, le=100)


class PaymentFields(BaseModel):

    amount: float = Field(ge=0)


class MessageResponse(BaseModel):
    """Envelope for simple string responses."""

    status: int
    message: str


class CustomerResponse(BaseModel):
    """Envelope for responses that include a customer resource."""

    status: int
    customer: Customer


class CustomerListResponse(BaseModel):

    status: int
    customers: list[Customer]


class RoomResponse(BaseModel):
    """Envelope for responses that include a room resource."""

    status: int
    room: Room


class RoomListResponse(BaseModel):
    """Envelope for responses that include a list of rooms resource."""

    status: int
    rooms: list[Room]


class OccupiedStayListResponse(BaseModel):

    status: int
    stays: list[OccupiedStay]


class QuoteResponse(BaseModel):
    """Envelope for a fixed-rate stay bill."""

    status: int
    bill: StayRateQuote


class ReportResponse(BaseModel):

    status: int
    report: OccupancyReport


class InvoiceResponse(BaseModel):
    """Snapshot of the session invoice."""

    status: int
    items: list[LineItem]
    subtotal: float
    discount: float
    grand_total: float
    amount_paid: float
    summary: str


class PaymentResponse(BaseModel):

    status: int
    payment: PaymentResult
