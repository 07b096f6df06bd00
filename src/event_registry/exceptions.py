"""Domain exceptions for the event registry.

The service signals a missing record by returning None; the router raises
NotFoundError subclasses for it, and the application maps the hierarchy to
HTTP status codes.
"""


class EventRegistryError(Exception):
    """Base exception for event registry failures.

    Attributes:
        message: Human-readable description of the failure.
        code: Optional error code for programmatic handling.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(EventRegistryError):
    """Raised when request input is missing or malformed."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR") -> None:
        super().__init__(message, code=code)


class InvalidIdentifierError(ValidationError):
    """Raised when an event identifier is not a well-formed ObjectId."""

    def __init__(self, event_id: str) -> None:
        super().__init__("Invalid eventId format", code="INVALID_EVENT_ID")
        self.event_id = event_id


class NotFoundError(EventRegistryError):
    """Raised when a well-formed identifier matches no record."""


class EventNotFoundError(NotFoundError):
    """Raised when an event cannot be found."""

    def __init__(self, event_id: str) -> None:
        super().__init__("Event not found.", code="EVENT_NOT_FOUND")
        self.event_id = event_id
