from __future__ import annotations

import logging
from collections import Counter

from Database.db import FrontDeskDB, FrontDeskSettings, load_configuration


LOGGER = logging.getLogger(__name__)


def bootstrap(settings: FrontDeskSettings) -> FrontDeskDB:
    """Prepare the data directory and return the opened storage.

    The room file is created and filled on first run; existing files are
    loaded as they are.

    Args:
        settings: Resolved front desk settings.

    Returns:
        The FrontDeskDB opened on settings.
    """

    rooms_existed = settings.rooms_path.exists()
    db = FrontDeskDB(settings)
    if rooms_existed:
        LOGGER.info("Room file %s already present; loaded as is.", settings.rooms_path)
    else:
        LOGGER.info("Created room file %s with %d rooms.", settings.rooms_path, settings.total_rooms)
    return db


def describe(db: FrontDeskDB) -> list[str]:
    """Return human readable lines describing the stored state."""

    by_type = Counter(room.room_type for room in db.rooms.list_all())
    lines = [f"{room_type}: {count} rooms" for room_type, count in by_type.items()]
    lines.append(f"Occupied: {len(db.rooms.list_occupied())}")
    lines.append(f"Customers: {len(db.customers)}")
    return lines


def main() -> None:
    """Entry point that loads configuration and prepares the data directory."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = load_configuration()
    LOGGER.info("Using data directory %s", settings.data_dir)
    db = bootstrap(settings)
    for line in describe(db):
        LOGGER.info(line)


if __name__ == "__main__":
    main()
