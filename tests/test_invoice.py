"""Itemized invoice tests."""

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Billing.invoice import ItemizedInvoice  # noqa: E402


@pytest.fixture()
def invoice() -> ItemizedInvoice:
    """Invoice with a 1000 subtotal and a 10% discount (grand total 900)."""
    bill = ItemizedInvoice()
    bill.add_item("Room", 800, 1)
    bill.add_item("Breakfast", 100, 2)
    bill.apply_discount(10)
    return bill


def test_subtotal_tracks_line_items() -> None:
    bill = ItemizedInvoice()
    bill.add_item("Laundry", 150, 2)
    bill.add_item("Minibar", 75.5, 4)

    assert bill.subtotal == sum(item.price * item.quantity for item in bill.items)
    assert bill.subtotal == 602
    assert [item.total for item in bill.items] == [300, 302]


@pytest.mark.parametrize(
    "name,price,quantity",
    [("", 10, 1), ("  ", 10, 1), ("Tea", -1, 1), ("Tea", 10, 0), ("Tea", 10, -3)],
)
def test_add_item_rejects_invalid_lines(name: str, price: float, quantity: int) -> None:
    bill = ItemizedInvoice()

    assert bill.add_item(name, price, quantity) is False
    assert bill.items == []
    assert bill.subtotal == 0


def test_discount_replaces_rather_than_stacks(invoice: ItemizedInvoice) -> None:
    """Ensure each discount is recomputed from the subtotal."""
    assert invoice.discount == 100

    invoice.apply_discount(20)

    assert invoice.discount == 200
    assert invoice.grand_total == 800


def test_exact_payment_gives_zero_change(invoice: ItemizedInvoice) -> None:
    result = invoice.process_payment(900)

    assert result.accepted is True
    assert result.change == 0
    assert invoice.amount_paid == 900
    assert result.message == "Paid! Change: Rs 0.00"


def test_short_payment_reports_shortfall_without_recording(invoice: ItemizedInvoice) -> None:
    """Ensure an insufficient payment leaves the invoice untouched."""
    result = invoice.process_payment(800)

    assert result.accepted is False
    assert result.shortfall == 100
    assert invoice.amount_paid == 0
    assert result.message == "Need Rs 100.00 more."


def test_overpayment_reports_change(invoice: ItemizedInvoice) -> None:
    result = invoice.process_payment(1000)

    assert result.accepted is True
    assert result.change == 100
    assert invoice.amount_paid == 1000


def test_summary_lists_items_and_totals(invoice: ItemizedInvoice) -> None:
    assert invoice.get_summary().splitlines() == [
        "=== BILL ===",
        "Room: Rs 800.00 x 1 = Rs 800.00",
        "Breakfast: Rs 100.00 x 2 = Rs 200.00",
        "Subtotal: Rs 1000.00",
        "Discount: Rs 100.00",
        "Grand Total: Rs 900.00",
    ]


def test_reset_clears_everything(invoice: ItemizedInvoice) -> None:
    invoice.process_payment(900)

    invoice.reset()

    assert invoice.items == []
    assert invoice.subtotal == 0
    assert invoice.discount == 0
    assert invoice.amount_paid == 0
    assert invoice.grand_total == 0
