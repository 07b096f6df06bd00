"""Test fixtures package."""

from .factories import EventDocumentFactory, ParticipantDocumentFactory
from .mongo import make_collection, make_cursor

__all__ = [
    "EventDocumentFactory",
    "ParticipantDocumentFactory",
    "make_collection",
    "make_cursor",
]
