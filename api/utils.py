from fastapi import HTTPException, status
from logging import Logger
from typing import Literal, NoReturn

from Database.line_format import PersistenceError

entity_type : Literal['customer', 'room', 'undefined_entity'] = 'undefined_entity'

def _not_found(
        identifier: int,
        logger: Logger,
        entity: Literal['customer', 'room', 'undefined_entity'] = entity_type
    ) -> NoReturn:
    """Raise a 404 for any entity among:
    - customer
    - room
    - undefined entity.
    """

    logger.info(f"Unknown {entity} requested", extra={f"{entity}_id": identifier})
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No {entity} found with id {identifier}",
    )

def _storage_failure(exc: PersistenceError, logger: Logger, action: str) -> HTTPException:
    """Translate a failed rewrite of a store file into a 500 response."""

    logger.error(f"Unable to {action}", extra={"error": str(exc)})
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Unable to {action} due to an internal error.",
    )
