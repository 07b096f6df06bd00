from .schemas import (
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

__all__ = [
    "Event",
    "EventCreate",
    "EventDeleted",
    "EventListQuery",
    "EventPage",
    "EventUpdate",
    "Participant",
    "ParticipantCreate",
    "ParticipantRegistration",
]
