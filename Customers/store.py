'''
Customer Store: the in-memory customer list backed by a line-oriented file.

Every successful mutation rewrites the whole file before the new list is
committed in memory, so a failed write leaves the store untouched.
'''
from pathlib import Path
import logging
import sys
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Customers.customer import Customer                       # noqa: E402
from Database.line_format import read_lines, write_lines       # noqa: E402
from utils import has_line_break, is_blank                     # noqa: E402

logger = logging.getLogger(__name__)


class CustomerStore:
    """Owns the customer records and their backing file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._customers: list[Customer] = []
        self.load()

    def load(self) -> None:
        """
        (Re)load customers from disk.

        Malformed lines and repeated identifiers are skipped with a warning;
        the first occurrence of an identifier wins.
        """
        customers: list[Customer] = []
        seen: set[int] = set()
        for line_no, line in enumerate(read_lines(self.path), start=1):
            try:
                customer = Customer.from_line(line)
            except ValueError:
                logger.warning(
                    "Skipping malformed customer line",
                    extra={"path": str(self.path), "line_no": line_no},
                )
                continue
            if customer.id in seen:
                logger.warning(
                    "Skipping duplicate customer id",
                    extra={"path": str(self.path), "line_no": line_no, "customer_id": customer.id},
                )
                continue
            seen.add(customer.id)
            customers.append(customer)
        self._customers = customers
        logger.info("Customers loaded", extra={"count": len(customers)})

    def _save(self, customers: list[Customer]) -> None:
        write_lines(self.path, (c.to_line() for c in customers))

    def next_id(self) -> int:
        '''Identifier the next added customer will receive.'''
        return max((c.id for c in self._customers), default=0) + 1

    def add(self, name: str, contact: str, email: str = "") -> Optional[Customer]:
        """
        Create and persist a new customer.

        Args:
            name: Display name, required.
            contact: Contact string, required.
            email: Optional email address.

        Returns:
            The created customer, or None when name or contact is blank or
            any field contains a line break.
        """
        if is_blank(name) or is_blank(contact):
            logger.info("Customer add rejected: name and contact are required")
            return None
        if any(has_line_break(value) for value in (name, contact, email)):
            logger.info("Customer add rejected: fields must be single-line")
            return None

        customer = Customer(id=self.next_id(), name=name, contact=contact, email=email or "")
        updated = [*self._customers, customer]
        self._save(updated)
        self._customers = updated
        logger.info("Customer created", extra={"customer_id": customer.id})
        return customer

    def list(self) -> list[Customer]:
        '''All customers in insertion order.'''
        return list(self._customers)

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def delete(self, customer_id: int) -> bool:
        """
        Remove a customer if present.

        Rooms referencing the identifier are left alone.

        Returns:
            True if a record was removed, False if none matched.
        """
        customer = self.get_by_id(customer_id)
        if customer is None:
            return False

        updated = [c for c in self._customers if c.id != customer_id]
        self._save(updated)
        self._customers = updated
        logger.info("Customer deleted", extra={"customer_id": customer_id})
        return True

    def __len__(self) -> int:
        return len(self._customers)
