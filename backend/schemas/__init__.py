from schemas.event import CreateEventRequest, EventFields, EventResponse, UpdateEventRequest

__all__ = [
    "EventFields",
    "CreateEventRequest",
    "UpdateEventRequest",
    "EventResponse",
]
