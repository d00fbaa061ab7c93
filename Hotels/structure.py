'''
Structure class implementation for Hotels module.
'''
from pathlib import Path
import sys
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import BaseModel, ConfigDict, model_validator        # noqa: E402

from Database.line_format import decode_line, encode_line          # noqa: E402
from utils import parse_bool, parse_optional_int                   # noqa: E402

SINGLE = "Single"
DOUBLE = "Double"
SUITE = "Suite"
ROOM_TYPES = (SINGLE, DOUBLE, SUITE)

ROOM_FIELD_COUNT = 4


def room_type_for(number: int, total_rooms: int) -> str:
    '''Category of room `number` when `total_rooms` are split into thirds.'''
    if number <= total_rooms // 3:
        return SINGLE
    if number <= 2 * total_rooms // 3:
        return DOUBLE
    return SUITE


class Room(BaseModel):

    model_config = ConfigDict(frozen=True)

    number: int
    room_type: str
    is_occupied: bool = False
    customer_id: Optional[int] = None

    @model_validator(mode="after")
    def validate_occupancy(self):
        # an occupant is recorded exactly when the room is occupied
        if self.is_occupied != (self.customer_id is not None):
            raise ValueError(
                f"Room {self.number} must have an occupant if and only if it is occupied."
            )
        return self

    def occupied_by(self, customer_id: int) -> "Room":
        ''' Copy of this room booked for customer_id. '''
        return self.model_copy(update={"is_occupied": True, "customer_id": customer_id})

    def vacated(self) -> "Room":
        ''' Copy of this room with its occupant cleared. '''
        return self.model_copy(update={"is_occupied": False, "customer_id": None})

    def to_line(self) -> str:
        return encode_line((self.number, self.room_type, self.is_occupied, self.customer_id))

    @classmethod
    def from_line(cls, line: str) -> "Room":
        """
        Parse a persisted room line "number,type,occupied,customer_id".

        Raises:
            ValueError: If the line is malformed or violates the occupancy rule.
        """
        raw_number, room_type, raw_occupied, raw_customer = decode_line(line, ROOM_FIELD_COUNT)
        return cls(
            number=int(raw_number),
            room_type=room_type,
            is_occupied=parse_bool(raw_occupied),
            customer_id=parse_optional_int(raw_customer),
        )

    def to_dict(self) -> dict[str, str | int | bool | None]:
        """
        Serialize the room into a dictionary.

        Returns:
            dict[str, str | int | bool | None]: Mapping of the room fields.
        """
        return {
            "number": self.number,
            "room_type": self.room_type,
            "is_occupied": self.is_occupied,
            "customer_id": self.customer_id,
        }
