"""Shared handling of store failures for repositories."""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import StoreAccessError


@contextmanager
def store_operation(db: Session, logger: logging.Logger, operation: str):
    """
    Wrap a store call so driver failures surface as StoreAccessError.

    The session is rolled back and the original exception is chained. The
    failure is logged once, where the StoreAccessError is handled.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.debug("Rolled back session after failed '%s'", operation)
        raise StoreAccessError(operation) from e
