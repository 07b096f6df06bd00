"""Event service - persistence operations for events and participants.

The service talks to MongoDB through Motor and performs no business
validation beyond checking that identifiers are well-formed ObjectIds.
Lookups that match nothing return None; the router decides what that means.
"""

import logging
import math
import re
from datetime import UTC, datetime

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from event_registry.database import EVENTS_COLLECTION, PARTICIPANTS_COLLECTION
from event_registry.exceptions import InvalidIdentifierError, ValidationError
from event_registry.models import (
    Event,
    EventCreate,
    EventListQuery,
    EventPage,
    EventUpdate,
    Participant,
    ParticipantCreate,
)

logger = logging.getLogger(__name__)

# API sort names -> document keys
EVENT_SORT_FIELDS: dict[str, str] = {
    "id": "_id",
    "imgUrl": "imgUrl",
    "title": "title",
    "description": "description",
    "eventDate": "eventDate",
    "organizer": "organizer",
    "createdAt": "createdAt",
    "updatedAt": "updatedAt",
}


def parse_object_id(event_id: str) -> ObjectId:
    """Convert an identifier string to an ObjectId.

    Raises:
        InvalidIdentifierError: If the identifier is not a valid ObjectId.
    """
    if not ObjectId.is_valid(event_id):
        raise InvalidIdentifierError(event_id)
    return ObjectId(event_id)


class EventService:
    """Data access for the ``events`` and ``participants`` collections."""

    def __init__(self, database: AsyncIOMotorDatabase, strict_sort_fields: bool = False) -> None:
        self._events = database[EVENTS_COLLECTION]
        self._participants = database[PARTICIPANTS_COLLECTION]
        self._strict_sort_fields = strict_sort_fields

    def resolve_sort_key(self, sort_field: str) -> str:
        """Map an API sort field to its document key.

        Unknown fields are passed through unchanged unless strict mode is on.

        Raises:
            ValidationError: In strict mode, if the field is not an event field.
        """
        if sort_field in EVENT_SORT_FIELDS:
            return EVENT_SORT_FIELDS[sort_field]
        if self._strict_sort_fields:
            raise ValidationError(f"Unknown sort field: {sort_field}", code="INVALID_SORT_FIELD")
        return sort_field

    async def list_events(self, query: EventListQuery) -> EventPage:
        """Return one page of events sorted by the requested field."""
        sort_key = self.resolve_sort_key(query.sort_field)
        direction = ASCENDING if query.sort_order == "asc" else DESCENDING

        total_events = await self._events.count_documents({})

        cursor = self._events.find().sort(sort_key, direction).skip(query.skip).limit(query.limit)
        events = [Event.from_document(doc) async for doc in cursor]

        return EventPage(
            events=events,
            current_page=query.page,
            total_pages=math.ceil(total_events / query.limit),
            total_events=total_events,
        )

    async def create_event(self, event_data: EventCreate) -> Event:
        now = datetime.now(UTC)
        document = {
            **event_data.model_dump(by_alias=True),
            "createdAt": now,
            "updatedAt": now,
        }

        result = await self._events.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Created event: {result.inserted_id}")

        return Event.from_document(document)

    async def get_event_by_id(self, event_id: str) -> Event | None:
        """Return the event, or None when it does not exist.

        A malformed identifier is treated like a missing event rather than
        an error.
        """
        if not ObjectId.is_valid(event_id):
            return None

        doc = await self._events.find_one({"_id": ObjectId(event_id)})
        return Event.from_document(doc) if doc else None

    async def update_event(self, event_id: str, event_data: EventUpdate) -> Event | None:
        """Apply a partial update and return the updated event.

        Raises:
            InvalidIdentifierError: If the identifier is not a valid ObjectId.
        """
        object_id = parse_object_id(event_id)

        changes = event_data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        changes["updatedAt"] = datetime.now(UTC)

        doc = await self._events.find_one_and_update(
            {"_id": object_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return Event.from_document(doc) if doc else None

    async def delete_event(self, event_id: str) -> Event | None:
        """Delete the event and return it as it was before removal.

        Participants registered for the event are left in place.

        Raises:
            InvalidIdentifierError: If the identifier is not a valid ObjectId.
        """
        object_id = parse_object_id(event_id)

        doc = await self._events.find_one_and_delete({"_id": object_id})
        return Event.from_document(doc) if doc else None

    async def register_participant(self, event_id: str, participant_data: ParticipantCreate) -> Participant:
        """Store a participant for the given event.

        The event itself is not looked up; only the identifier format is checked.

        Raises:
            InvalidIdentifierError: If the identifier is not a valid ObjectId.
        """
        object_id = parse_object_id(event_id)

        now = datetime.now(UTC)
        document = {
            **participant_data.model_dump(by_alias=True),
            "eventId": object_id,
            "createdAt": now,
            "updatedAt": now,
        }

        result = await self._participants.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Registered participant {result.inserted_id} for event {event_id}")

        return Participant.from_document(document)

    async def list_participants(self, event_id: str, search: str | None = None) -> list[Participant]:
        """Return the participants of an event.

        With ``search``, only participants whose full name or email contains
        it (case-insensitively) are returned.

        Raises:
            InvalidIdentifierError: If the identifier is not a valid ObjectId.
        """
        filter_query: dict = {"eventId": parse_object_id(event_id)}

        if search:
            pattern = re.escape(search)
            filter_query["$or"] = [
                {"fullName": {"$regex": pattern, "$options": "i"}},
                {"email": {"$regex": pattern, "$options": "i"}},
            ]

        cursor = self._participants.find(filter_query)
        return [Participant.from_document(doc) async for doc in cursor]
