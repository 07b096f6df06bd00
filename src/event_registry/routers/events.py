"""
Events Router - Event and Participant Management with MongoDB Persistence

Endpoints:
- GET /api/events - List events (sorted, paginated)
- POST /api/events - Create an event
- GET /api/events/{event_id} - Get event details
- PATCH /api/events/{event_id} - Update selected event fields
- DELETE /api/events/{event_id} - Delete an event
- POST /api/events/{event_id}/register - Register a participant
- GET /api/events/{event_id}/participants - List or search participants

Error mapping: malformed input and malformed identifiers are 400, a missing
event is 404, anything else is 500. Event creation is the exception: any
failure while storing the event is reported as 400.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from event_registry.dependencies import EventServiceDep
from event_registry.exceptions import EventNotFoundError, ValidationError
from event_registry.models import (
    Event,
    EventCreate,
    EventDeleted,
    EventListQuery,
    EventPage,
    EventUpdate,
    Participant,
    ParticipantCreate,
    ParticipantRegistration,
)
from event_registry.settings import app_settings
from event_registry.validation import parse_date_of_birth, require_fields, validate_email

logger = logging.getLogger(__name__)

router = APIRouter()


def bad_request(error: ValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)


def internal_error(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


# ============================================================================
# Event Endpoints
# ============================================================================


@router.get(
    "",
    response_model=EventPage,
    summary="List events",
    description="Get one page of events, sorted by any event field.",
)
async def list_events(
    service: EventServiceDep,
    sort_field: Annotated[str, Query(alias="sortField")] = app_settings.default_sort_field,
    sort_order: Annotated[str, Query(alias="sortOrder")] = "asc",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1)] = app_settings.default_page_size,
) -> EventPage:
    """List events with sorting and pagination."""
    logger.info(f"Listing events (sortField={sort_field}, sortOrder={sort_order}, page={page}, limit={limit})")

    query = EventListQuery(sort_field=sort_field, sort_order=sort_order, page=page, limit=limit)
    try:
        return await service.list_events(query)
    except ValidationError as e:
        raise bad_request(e) from e
    except Exception as e:
        logger.exception("Failed to list events")
        raise internal_error("Failed to list events") from e


@router.post(
    "",
    response_model=Event,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new event",
    description="Create an event. All five fields are required.",
)
async def create_event(event_data: EventCreate, service: EventServiceDep) -> Event:
    """Create a new event."""
    try:
        require_fields(
            {
                "imgUrl": event_data.img_url,
                "title": event_data.title,
                "description": event_data.description,
                "eventDate": event_data.event_date,
                "organizer": event_data.organizer,
            },
            "All fields are required.",
        )
    except ValidationError as e:
        raise bad_request(e) from e

    logger.info(f"Creating event: {event_data.title}")

    try:
        return await service.create_event(event_data)
    except Exception as e:
        logger.warning(f"Failed to create event '{event_data.title}': {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e) or "Unknown error") from e


@router.get(
    "/{event_id}",
    response_model=Event,
    summary="Get event details",
)
async def get_event(event_id: str, service: EventServiceDep) -> Event:
    """Get a specific event by ID."""
    logger.info(f"Fetching event: {event_id}")

    try:
        event = await service.get_event_by_id(event_id)
    except Exception as e:
        logger.exception(f"Failed to fetch event {event_id}")
        raise internal_error("Failed to fetch event") from e

    if event is None:
        raise EventNotFoundError(event_id)
    return event


@router.patch(
    "/{event_id}",
    response_model=Event,
    summary="Update an event",
    description="Update only the supplied event fields.",
)
async def update_event(event_id: str, event_data: EventUpdate, service: EventServiceDep) -> Event:
    """Apply a partial update to an event."""
    logger.info(f"Updating event: {event_id}")

    try:
        event = await service.update_event(event_id, event_data)
    except ValidationError as e:
        raise bad_request(e) from e
    except Exception as e:
        logger.exception(f"Failed to update event {event_id}")
        raise internal_error("Failed to update event") from e

    if event is None:
        raise EventNotFoundError(event_id)
    return event


@router.delete(
    "/{event_id}",
    response_model=EventDeleted,
    summary="Delete an event",
    description="Delete an event. Its participants are kept.",
)
async def delete_event(event_id: str, service: EventServiceDep) -> EventDeleted:
    """Delete an event."""
    logger.info(f"Deleting event: {event_id}")

    try:
        event = await service.delete_event(event_id)
    except ValidationError as e:
        raise bad_request(e) from e
    except Exception as e:
        logger.exception(f"Failed to delete event {event_id}")
        raise internal_error("Failed to delete event") from e

    if event is None:
        raise EventNotFoundError(event_id)

    logger.info(f"Deleted event: {event_id}")
    return EventDeleted(event_id=event_id)


# ============================================================================
# Participant Endpoints
# ============================================================================


@router.post(
    "/{event_id}/register",
    response_model=Participant,
    status_code=status.HTTP_201_CREATED,
    summary="Register a participant",
    description="Register a participant for an event. The event itself is not looked up.",
)
async def register_participant(
    event_id: str,
    registration: ParticipantRegistration,
    service: EventServiceDep,
) -> Participant:
    """Validate a registration and store the participant."""
    try:
        require_fields(
            {"fullName": registration.full_name, "email": registration.email, "dob": registration.dob},
            "Full name, email, and date of birth are required.",
        )
        validate_email(registration.email)
        dob = parse_date_of_birth(registration.dob)
        require_fields({"referral": registration.referral}, "Referral is required.")
    except ValidationError as e:
        raise bad_request(e) from e

    logger.info(f"Registering participant '{registration.email}' for event {event_id}")

    participant_data = ParticipantCreate(
        full_name=registration.full_name,
        email=registration.email,
        dob=dob,
        referral=registration.referral,
    )
    try:
        return await service.register_participant(event_id, participant_data)
    except ValidationError as e:
        raise bad_request(e) from e
    except Exception as e:
        logger.exception(f"Error registering participant for event {event_id}")
        raise internal_error("Failed to register participant") from e


@router.get(
    "/{event_id}/participants",
    response_model=list[Participant],
    summary="List participants",
    description="List the participants of an event, optionally filtered by name or email.",
)
async def list_participants(
    event_id: str,
    service: EventServiceDep,
    search: str | None = None,
) -> list[Participant]:
    """List participants of an event."""
    logger.info(f"Listing participants for event {event_id} (search={search})")

    try:
        return await service.list_participants(event_id, search)
    except ValidationError as e:
        raise bad_request(e) from e
    except Exception as e:
        logger.exception(f"Error fetching participants for event {event_id}")
        raise internal_error("Failed to fetch participants") from e
