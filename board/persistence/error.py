"""Translation of driver faults into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import InterfaceError, OperationalError

from board.domain.error import StoreUnavailableError


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise connectivity failures as StoreUnavailableError.

    Constraint violations and programming errors pass through unchanged;
    only faults where the store could not be reached are translated.

    Args:
        operation: Name of the operation, used in the error message
    """
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logfire.warn("Store unavailable", operation=operation, error=str(e.orig or e))
        raise StoreUnavailableError(operation, str(e.orig or e)) from e
    except OSError as e:
        logfire.warn("Store unreachable", operation=operation, error=str(e))
        raise StoreUnavailableError(operation, str(e)) from e
