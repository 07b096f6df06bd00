"""FastAPI dependencies for the event registry routers."""

from typing import Annotated

from fastapi import Depends, Request

from event_registry.services import EventService
from event_registry.settings import app_settings


def get_event_service(request: Request) -> EventService:
    """Build an EventService over the connection opened at startup."""
    connection = request.app.state.mongo
    return EventService(connection.database, strict_sort_fields=app_settings.strict_sort_fields)


EventServiceDep = Annotated[EventService, Depends(get_event_service)]
