"""Fixed per-stay rate quotes derived from room occupancy."""
from pathlib import Path
import logging
import sys
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import BaseModel, ConfigDict                        # noqa: E402

from Customers.store import CustomerStore                         # noqa: E402
from Hotels.inventory import RoomInventory                        # noqa: E402
from Hotels.structure import DOUBLE, SINGLE, SUITE, Room          # noqa: E402

logger = logging.getLogger(__name__)

UNKNOWN_CUSTOMER = "Unknown"
DEFAULT_RATE = 3000.0
ROOM_RATES: dict[str, float] = {
    SINGLE: 3000.0,
    DOUBLE: 4000.0,
    SUITE: 5000.0,
}


def rate_for(room_type: str) -> float:
    '''Per-stay rate for a room type; unknown types get the default rate.'''
    return ROOM_RATES.get(room_type, DEFAULT_RATE)


class StayRateQuote(BaseModel):
    """Ephemeral bill for the current stay in one room. Never persisted."""

    model_config = ConfigDict(frozen=True)

    customer_name: str
    room_type: str
    amount: float


class OccupiedStay(BaseModel):
    """An occupied room together with its occupant's resolved name."""

    model_config = ConfigDict(frozen=True)

    room: Room
    customer_name: str


class BillingEngine:
    """Read-only view over the customer store and room inventory."""

    def __init__(self, rooms: RoomInventory, customers: CustomerStore) -> None:
        self.rooms = rooms
        self.customers = customers

    def resolve_customer_name(self, customer_id: Optional[int]) -> str:
        '''Name of the customer, or "Unknown" for a missing or dangling reference.'''
        if customer_id is None:
            return UNKNOWN_CUSTOMER
        customer = self.customers.get_by_id(customer_id)
        if customer is None:
            return UNKNOWN_CUSTOMER
        return customer.name

    def generate_bill(self, room_number: int) -> Optional[StayRateQuote]:
        """
        Quote the stay in a room.

        Args:
            room_number: Room to bill.

        Returns:
            A StayRateQuote, or None if the room is unknown, unoccupied, or has
            no occupant recorded.
        """
        room = self.rooms.get_by_number(room_number)
        if room is None or not room.is_occupied or room.customer_id is None:
            logger.info("No bill for room", extra={"room_number": room_number})
            return None

        quote = StayRateQuote(
            customer_name=self.resolve_customer_name(room.customer_id),
            room_type=room.room_type,
            amount=rate_for(room.room_type),
        )
        logger.info("Bill generated", extra={"room_number": room_number, "amount": quote.amount})
        return quote

    def occupied_stays(self) -> list[OccupiedStay]:
        return [
            OccupiedStay(room=room, customer_name=self.resolve_customer_name(room.customer_id))
            for room in self.rooms.list_occupied()
        ]
