"""Persistence layer error translation."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from agora.domain.error import StorageError


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as domain StorageError.

    Args:
        operation: Name of the repository operation, for logs and the message

    Raises:
        StorageError: If the wrapped block raised a SQLAlchemyError
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Storage operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StorageError(operation, e) from e
