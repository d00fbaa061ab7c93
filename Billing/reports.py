"""Occupancy and revenue figures for the reports dashboard."""
from pathlib import Path
from collections import Counter
import sys
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import BaseModel                          # noqa: E402

from Billing.quote import rate_for                      # noqa: E402
from Hotels.inventory import RoomInventory              # noqa: E402
from Hotels.structure import ROOM_TYPES                 # noqa: E402


class OccupancyReport(BaseModel):

    total_rooms: int
    occupied_rooms: int
    occupancy_rate: float
    occupied_by_type: dict[str, int]
    nightly_revenue: float
    most_popular_type: Optional[str] = None


def occupancy_report(inventory: RoomInventory) -> OccupancyReport:
    """
    Summarize the current occupancy of the inventory.

    Args:
        inventory: Room inventory to inspect.

    Returns:
        OccupancyReport with the occupancy rate in percent (one decimal), the
        occupied count per room type, the sum of occupied rooms' rates and the
        most occupied room type (None when every room is free).
    """
    total = len(inventory)
    occupied = inventory.list_occupied()

    by_type: Counter[str] = Counter({room_type: 0 for room_type in ROOM_TYPES})
    by_type.update(room.room_type for room in occupied)

    most_popular = None
    if occupied:
        # ties resolve to the first type in ROOM_TYPES order
        most_popular = by_type.most_common(1)[0][0]

    rate = round(100 * len(occupied) / total, 1) if total else 0.0
    return OccupancyReport(
        total_rooms=total,
        occupied_rooms=len(occupied),
        occupancy_rate=rate,
        occupied_by_type=dict(by_type),
        nightly_revenue=sum(rate_for(room.room_type) for room in occupied),
        most_popular_type=most_popular,
    )
