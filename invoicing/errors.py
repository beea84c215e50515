"""
Exception hierarchy for the invoicing back-end.

Every exception carries the HTTP status code the API layer answers with,
so a single handler in ``invoicing.server`` can turn any of them into a
``{"detail": ...}`` response.

Repositories and services never raise ``NotFoundError``: a missing id is
an expected outcome there and is reported as ``None`` / ``False``.  The
API layer raises it when it needs to stop a request with a 404.

Usage:
    from invoicing.errors import WriteFailedError

    try:
        repo.add(product)
    except WriteFailedError as e:
        logger.error("Could not persist product: %s", e)
"""

from typing import Optional


class InvoicingError(Exception):
    """Base exception for all invoicing errors."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(InvoicingError):
    """Requested entity does not exist."""

    status_code = 404
    default_message = "Entity not found"


class ValidationFailedError(InvoicingError):
    """Request is well-formed but inconsistent (e.g. path/body id mismatch)."""

    status_code = 400
    default_message = "Validation failed"


class StoreError(InvoicingError):
    """Backing store could not be read or written."""

    status_code = 503
    default_message = "Backing store unavailable"


class StoreUnavailableError(StoreError):
    """Backing file exists but could not be read."""

    default_message = "Backing store could not be read"


class WriteFailedError(StoreError):
    """Collection could not be persisted; previous state is kept."""

    default_message = "Backing store could not be written"
