"""
Pydantic schemas for the Event Registry API.

Field names are snake_case in Python and camelCase on the wire and in the
MongoDB documents (``imgUrl``, ``eventDate``, ``fullName``, ...).
"""

from datetime import datetime
from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CAMEL_CASE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredDocument(BaseModel):
    """Base for records read back from MongoDB."""

    model_config = CAMEL_CASE_CONFIG

    id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, doc: dict[str, Any]):
        """Build the model from a raw MongoDB document, exposing ``_id`` as ``id``."""
        return cls(**{**doc, "id": str(doc["_id"])})


# ============================================================================
# Event Schemas
# ============================================================================


class EventCreate(BaseModel):
    """Schema for creating an event.

    Every field is declared optional so that presence is checked by the
    router and reported as a single "All fields are required." error.
    """

    model_config = CAMEL_CASE_CONFIG

    img_url: str | None = None
    title: str | None = None
    description: str | None = None
    event_date: datetime | None = None
    organizer: str | None = None


class EventUpdate(BaseModel):
    """Schema for updating an event (all fields optional)."""

    model_config = CAMEL_CASE_CONFIG

    img_url: str | None = None
    title: str | None = None
    description: str | None = None
    event_date: datetime | None = None
    organizer: str | None = None


class Event(StoredDocument):
    """Full event schema with ID and timestamps."""

    img_url: str
    title: str
    description: str
    event_date: datetime
    organizer: str


class EventListQuery(BaseModel):
    """Sorting and pagination parameters for the event listing."""

    sort_field: str = "title"
    sort_order: str = "asc"
    page: Annotated[int, Field(ge=1, description="Page number (starting at 1)")] = 1
    limit: Annotated[int, Field(ge=1, description="Events per page")] = 8

    @property
    def skip(self) -> int:
        """Number of events preceding the requested page."""
        return (self.page - 1) * self.limit


class EventPage(BaseModel):
    """One page of events."""

    model_config = CAMEL_CASE_CONFIG

    events: list[Event]
    current_page: int
    total_pages: int
    total_events: int


class EventDeleted(BaseModel):
    """Confirmation payload returned after deleting an event."""

    model_config = CAMEL_CASE_CONFIG

    message: str = "Event deleted successfully"
    event_id: str


# ============================================================================
# Participant Schemas
# ============================================================================


class ParticipantRegistration(BaseModel):
    """Registration request body.

    ``dob`` stays a raw string here; the router parses it so that malformed
    and future dates are reported with their own messages.
    """

    model_config = CAMEL_CASE_CONFIG

    full_name: str | None = None
    email: str | None = None
    dob: str | None = None
    referral: str | None = None


class ParticipantCreate(BaseModel):
    """Validated participant fields handed to the service."""

    model_config = CAMEL_CASE_CONFIG

    full_name: str
    email: str
    dob: datetime
    referral: str


class Participant(StoredDocument):
    """Full participant schema with ID, owning event and timestamps."""

    full_name: str
    email: str
    dob: datetime
    referral: str
    event_id: str

    @field_validator("event_id", mode="before")
    @classmethod
    def stringify_event_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value
