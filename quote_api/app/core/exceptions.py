"""
Domain exceptions raised by the service layer.

Every error the core can report derives from ``QuoteApiError``.  The
application factory registers a handler that turns each subclass into
an HTTP response with the status code stored on the class, so services
never import FastAPI's ``HTTPException``.
"""

from typing import Any, Dict, List, Optional


class QuoteApiError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "error": self.error,
            "error_code": self.error_code,
            "detail": self.message,
        }
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(QuoteApiError):
    """A payload failed required, type, range or format checks."""

    status_code = 422
    error = "Validation Error"

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message, error_code="VALIDATION_ERROR", details=errors or [])

    @property
    def fields(self) -> List[str]:
        return [item["field"] for item in self.details]


class NotFoundError(QuoteApiError):
    """A point operation targeted an identifier with no matching record."""

    status_code = 404
    error = "Not Found"

    def __init__(self, message: str):
        super().__init__(message, error_code="NOT_FOUND")


class MalformedIdentifierError(QuoteApiError):
    """The supplied identifier cannot be interpreted by the store."""

    status_code = 400
    error = "Bad Request"

    def __init__(self, raw_id: str):
        super().__init__(
            f"'{raw_id}' is not a valid identifier; expected a 24 character hex string",
            error_code="MALFORMED_IDENTIFIER",
        )


class StoreUnavailableError(QuoteApiError):
    """The storage backend could not be reached."""

    status_code = 503
    error = "Service Unavailable"

    def __init__(self, message: str = "Storage backend is unavailable"):
        super().__init__(message, error_code="STORE_UNAVAILABLE")

    def to_dict(self) -> Dict[str, Any]:
        # The driver message may contain hostnames; clients get a generic text.
        return {
            "error": self.error,
            "error_code": self.error_code,
            "detail": "Storage backend is unavailable",
        }


class CorruptRecordError(QuoteApiError):
    """A stored document no longer matches its record schema.

    Only the record id and the offending field paths are kept; the
    stored values never reach the message, the response or the log.
    """

    status_code = 500

    def __init__(self, record_id: str, fields: List[str]):
        super().__init__(
            f"Stored record {record_id} does not match its schema",
            error_code="CORRUPT_RECORD",
            details=[{"field": field} for field in fields],
        )
        self.fields = fields
