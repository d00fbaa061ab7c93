'''
Itemized invoice: a session-only running bill of line items.

Kept apart from the fixed-rate quote on purpose; nothing here is persisted.
'''
import logging

from pydantic import BaseModel, ConfigDict, computed_field

logger = logging.getLogger(__name__)

CURRENCY = "Rs"


class LineItem(BaseModel):

    model_config = ConfigDict(frozen=True)

    name: str
    price: float
    quantity: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return self.price * self.quantity


class PaymentResult(BaseModel):
    """Outcome of tendering an amount against the invoice."""

    accepted: bool
    amount: float
    grand_total: float
    change: float = 0.0
    shortfall: float = 0.0
    message: str


class ItemizedInvoice:
    """
    Running invoice with a replaceable percentage discount.

    Invariants:
        subtotal == sum(item.total for item in items)
        grand_total == subtotal - discount
    """

    def __init__(self) -> None:
        self._items: list[LineItem] = []
        self._subtotal = 0.0
        self._discount = 0.0
        self._amount_paid = 0.0

    @property
    def items(self) -> list[LineItem]:
        return list(self._items)

    @property
    def subtotal(self) -> float:
        return self._subtotal

    @property
    def discount(self) -> float:
        return self._discount

    @property
    def amount_paid(self) -> float:
        return self._amount_paid

    @property
    def grand_total(self) -> float:
        return self._subtotal - self._discount

    def add_item(self, name: str, price: float, quantity: int) -> bool:
        """
        Append a line item and grow the subtotal.

        Returns:
            False (and nothing changes) for a blank name, a negative price or a
            non-positive quantity; True otherwise.
        """
        if not name or not name.strip() or price < 0 or quantity <= 0:
            logger.info("Line item rejected", extra={"item": name, "price": price, "quantity": quantity})
            return False

        item = LineItem(name=name.strip(), price=price, quantity=quantity)
        self._items.append(item)
        self._subtotal += item.total
        return True

    def apply_discount(self, percent: float) -> float:
        """
        Set the discount to percent of the current subtotal.

        Each call replaces the previous discount rather than stacking on it.

        Returns:
            The new discount amount.
        """
        self._discount = (percent / 100) * self._subtotal
        logger.info("Discount applied", extra={"percent": percent, "discount": self._discount})
        return self._discount

    def process_payment(self, amount: float) -> PaymentResult:
        """
        Settle the invoice with a tendered amount.

        An insufficient amount is reported as a shortfall and is not recorded.
        """
        grand = self.grand_total
        if amount < grand:
            shortfall = grand - amount
            logger.info("Payment short", extra={"amount": amount, "shortfall": shortfall})
            return PaymentResult(
                accepted=False,
                amount=amount,
                grand_total=grand,
                shortfall=shortfall,
                message=f"Need {CURRENCY} {shortfall:.2f} more.",
            )

        change = amount - grand
        self._amount_paid = amount
        logger.info("Payment recorded", extra={"amount": amount, "change": change})
        return PaymentResult(
            accepted=True,
            amount=amount,
            grand_total=grand,
            change=change,
            message=f"Paid! Change: {CURRENCY} {change:.2f}",
        )

    def get_summary(self) -> str:
        lines = ["=== BILL ==="]
        for item in self._items:
            lines.append(
                f"{item.name}: {CURRENCY} {item.price:.2f} x {item.quantity} = {CURRENCY} {item.total:.2f}"
            )
        lines.append(f"Subtotal: {CURRENCY} {self._subtotal:.2f}")
        lines.append(f"Discount: {CURRENCY} {self._discount:.2f}")
        lines.append(f"Grand Total: {CURRENCY} {self.grand_total:.2f}")
        return "\n".join(lines) + "\n"

    def reset(self) -> None:
        self._items.clear()
        self._subtotal = 0.0
        self._discount = 0.0
        self._amount_paid = 0.0
