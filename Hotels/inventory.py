'''
Room Inventory: the fixed set of rooms and their occupancy state.
'''
from pathlib import Path
import logging
import sys
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Database.line_format import read_lines, write_lines         # noqa: E402
from Hotels.structure import Room, room_type_for                 # noqa: E402

logger = logging.getLogger(__name__)


class RoomInventory:
    """
    Owns the rooms and their backing file.

    Customer identifiers recorded on rooms are weak references: the inventory
    never checks them against the customer store.
    """

    def __init__(self, path: Path, total_rooms: int) -> None:
        self.path = Path(path)
        self._rooms: list[Room] = []
        if self.path.exists():
            self.load()
        else:
            self.initialize(total_rooms)

    def initialize(self, total_rooms: int) -> None:
        """
        Create rooms 1..total_rooms split into Single, Double and Suite thirds
        and persist them. All rooms start unoccupied.
        """
        rooms = [
            Room(number=number, room_type=room_type_for(number, total_rooms))
            for number in range(1, total_rooms + 1)
        ]
        self._save(rooms)
        self._rooms = rooms
        logger.info("Room inventory initialized", extra={"total_rooms": total_rooms})

    def load(self) -> None:
        """
        (Re)load rooms from disk.

        A line that fails to parse is skipped, as is any room number already
        seen earlier in the file.
        """
        rooms: list[Room] = []
        seen: set[int] = set()
        for line_no, line in enumerate(read_lines(self.path), start=1):
            try:
                room = Room.from_line(line)
            except ValueError:
                logger.warning(
                    "Skipping malformed room line",
                    extra={"path": str(self.path), "line_no": line_no},
                )
                continue
            if room.number in seen:
                logger.warning(
                    "Skipping duplicate room number",
                    extra={"path": str(self.path), "line_no": line_no, "room_number": room.number},
                )
                continue
            seen.add(room.number)
            rooms.append(room)
        self._rooms = rooms
        logger.info("Rooms loaded", extra={"count": len(rooms)})

    def _save(self, rooms: list[Room]) -> None:
        write_lines(self.path, (r.to_line() for r in rooms))

    def _replace(self, updated_room: Room) -> None:
        rooms = [updated_room if r.number == updated_room.number else r for r in self._rooms]
        self._save(rooms)
        self._rooms = rooms

    def list_all(self) -> list[Room]:
        return list(self._rooms)

    def list_available(self) -> list[Room]:
        '''Unoccupied rooms, ascending by room number.'''
        return sorted((r for r in self._rooms if not r.is_occupied), key=lambda r: r.number)

    def list_occupied(self) -> list[Room]:
        '''Occupied rooms in storage order.'''
        return [r for r in self._rooms if r.is_occupied]

    def get_by_number(self, room_number: int) -> Optional[Room]:
        for room in self._rooms:
            if room.number == room_number:
                return room
        return None

    def book(self, room_number: int, customer_id: int) -> bool:
        """
        Mark a room as occupied by customer_id.

        Args:
            room_number: Room to book.
            customer_id: Occupant identifier, not validated against customers.

        Returns:
            True if booked; False if the room is unknown or already occupied.
        """
        room = self.get_by_number(room_number)
        if room is None or room.is_occupied:
            logger.info(
                "Booking refused",
                extra={"room_number": room_number, "room_exists": room is not None},
            )
            return False

        self._replace(room.occupied_by(customer_id))
        logger.info("Room booked", extra={"room_number": room_number, "customer_id": customer_id})
        return True

    def check_out(self, room_number: int) -> bool:
        """
        Clear the occupancy of a room.

        Returns:
            True if checked out; False if the room is unknown or not occupied.
        """
        room = self.get_by_number(room_number)
        if room is None or not room.is_occupied:
            logger.info(
                "Check-out refused",
                extra={"room_number": room_number, "room_exists": room is not None},
            )
            return False

        self._replace(room.vacated())
        logger.info("Room checked out", extra={"room_number": room_number})
        return True

    def __len__(self) -> int:
        return len(self._rooms)
