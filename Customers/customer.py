"""Customer record and its single-line persisted form."""
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import BaseModel, ConfigDict, field_validator   # noqa: E402

from Database.line_format import decode_line, encode_line       # noqa: E402
from utils import has_line_break, is_blank                      # noqa: E402

CUSTOMER_FIELD_COUNT = 4


class Customer(BaseModel):
    """Hotel guest known to the front desk. Never mutated once created."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    contact: str
    email: str = ""

    @field_validator("id")
    @classmethod
    def id_positive(cls, value: int) -> int:
        """
        Ensure identifiers start at 1.

        Raises:
            ValueError: If the identifier is zero or negative.
        """
        if value <= 0:
            raise ValueError("Customer id must be a positive integer.")
        return value

    @field_validator("name", "contact")
    @classmethod
    def required_text(cls, value: str) -> str:
        if is_blank(value):
            raise ValueError("Customer name and contact must not be blank.")
        if has_line_break(value):
            raise ValueError("Customer fields must not contain line breaks.")
        return value

    @field_validator("email")
    @classmethod
    def single_line_email(cls, value: str) -> str:
        if has_line_break(value):
            raise ValueError("Customer fields must not contain line breaks.")
        return value

    def to_line(self) -> str:
        '''Serialize as "id,name,contact,email".'''
        return encode_line((self.id, self.name, self.contact, self.email))

    @classmethod
    def from_line(cls, line: str) -> "Customer":
        """
        Parse a persisted customer line.

        Raises:
            ValueError: If the line is malformed or any field fails validation.
        """
        raw_id, name, contact, email = decode_line(line, CUSTOMER_FIELD_COUNT)
        return cls(id=int(raw_id), name=name, contact=contact, email=email)
