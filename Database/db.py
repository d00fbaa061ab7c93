'''
This file contains the storage configuration for the Front Desk system.
'''
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import logging  # noqa: E402
import os  # noqa: E402
from typing import Optional  # noqa: E402

from dotenv import load_dotenv  # noqa: E402
from pydantic import BaseModel, field_validator  # noqa: E402

from Billing.invoice import ItemizedInvoice  # noqa: E402
from Billing.quote import BillingEngine  # noqa: E402
from Customers.store import CustomerStore  # noqa: E402
from Hotels.inventory import RoomInventory  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "data"
DEFAULT_TOTAL_ROOMS = 15
CUSTOMERS_FILENAME = "customers.txt"
ROOMS_FILENAME = "rooms.txt"


class FrontDeskSettings(BaseModel):
    """Where the stores live and how many rooms a fresh inventory gets."""

    data_dir: Path = Path(DEFAULT_DATA_DIR)
    total_rooms: int = DEFAULT_TOTAL_ROOMS

    @field_validator("total_rooms")
    @classmethod
    def total_rooms_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("FRONTDESK_TOTAL_ROOMS must be a positive integer.")
        return value

    @property
    def customers_path(self) -> Path:
        return self.data_dir / CUSTOMERS_FILENAME

    @property
    def rooms_path(self) -> Path:
        return self.data_dir / ROOMS_FILENAME


def load_configuration() -> FrontDeskSettings:
    """Build settings from environment variables.

    The .env file may define:
    - FRONTDESK_DATA_DIR
    - FRONTDESK_TOTAL_ROOMS

    Returns:
        FrontDeskSettings with defaults for anything unset.

    Raises:
        ValueError: If FRONTDESK_TOTAL_ROOMS is not a positive integer.
    """

    load_dotenv()
    data_dir: Optional[str] = os.environ.get("FRONTDESK_DATA_DIR")
    total_rooms: Optional[str] = os.environ.get("FRONTDESK_TOTAL_ROOMS")

    return FrontDeskSettings(
        data_dir=Path(data_dir or DEFAULT_DATA_DIR),
        total_rooms=total_rooms or DEFAULT_TOTAL_ROOMS,  # type: ignore[arg-type]
    )


class FrontDeskDB:
    """Storage Client"""

    # private interface
    def __init__(self, settings: Optional[FrontDeskSettings] = None):
        self.settings = settings if settings is not None else load_configuration()
        self.settings.data_dir.mkdir(parents=True, exist_ok=True)

        self.customers = CustomerStore(self.settings.customers_path)
        self.rooms = RoomInventory(self.settings.rooms_path, self.settings.total_rooms)
        self.billing = BillingEngine(self.rooms, self.customers)
        # session-only, discarded on restart
        self.invoice = ItemizedInvoice()
        logger.info(
            "Front desk storage ready",
            extra={"data_dir": str(self.settings.data_dir), "rooms": len(self.rooms)},
        )


if __name__ == "__main__":
    db = FrontDeskDB()

    print([room.to_dict() for room in db.rooms.list_available()])
