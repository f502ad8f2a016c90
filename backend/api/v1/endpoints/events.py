"""api/v1/endpoints/events.py — Event endpoints.

Routes:
    POST   /events          Create (multipart form, optional image file)   201
    GET    /events          All events                                      200
    GET    /events/{id}     Single event                                    200 / 404
    PUT    /events/{id}     Replace name, description, location, date       200 / 404
    DELETE /events/{id}     Hard delete                                     204 / 404

Not-found responses carry no body. Any other failure (database, file system)
is left to the application-level exception handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, Response, UploadFile, status

from api.dependencies import get_event_repository, get_image_storage
from core.storage import ImageStorage
from db.models import Event
from db.repository import EventRepository
from schemas.event import CreateEventRequest, EventResponse, UpdateEventRequest

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "No event with this id"}}


def _not_found(event_id: int) -> Response:
    logger.debug("event not found", extra={"event_id": event_id})
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post(
    "",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create event",
)
def create_event(
    request: Request,
    response: Response,
    payload: CreateEventRequest = Depends(CreateEventRequest.as_form),
    file: Optional[UploadFile] = File(None, description="Optional event image"),
    repo: EventRepository = Depends(get_event_repository),
    storage: ImageStorage = Depends(get_image_storage),
):
    event = Event(**payload.model_dump())
    if ImageStorage.has_content(file):
        event.image_path = storage.save(file)

    repo.add(event)
    repo.persist(event)

    logger.info(
        "event created",
        extra={"event_id": event.id, "has_image": event.image_path is not None},
    )
    response.headers["Location"] = str(request.url_for("get_event", event_id=event.id))
    return EventResponse.model_validate(event)


@router.get("", response_model=list[EventResponse], summary="List events")
def list_events(repo: EventRepository = Depends(get_event_repository)):
    return [EventResponse.model_validate(e) for e in repo.list_all()]


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    responses=_NOT_FOUND,
    summary="Get event",
)
def get_event(event_id: int, repo: EventRepository = Depends(get_event_repository)):
    event = repo.find_by_id(event_id)
    if event is None:
        return _not_found(event_id)
    return EventResponse.model_validate(event)


@router.put(
    "/{event_id}",
    response_model=EventResponse,
    responses=_NOT_FOUND,
    summary="Update event",
)
def update_event(
    event_id: int,
    payload: UpdateEventRequest,
    repo: EventRepository = Depends(get_event_repository),
):
    event = repo.find_by_id(event_id)
    if event is None:
        return _not_found(event_id)

    for field, value in payload.model_dump().items():
        setattr(event, field, value)
    repo.persist(event)

    logger.info("event updated", extra={"event_id": event.id})
    return EventResponse.model_validate(event)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete event",
)
def delete_event(event_id: int, repo: EventRepository = Depends(get_event_repository)):
    event = repo.find_by_id(event_id)
    if event is None:
        return _not_found(event_id)

    repo.remove(event)
    repo.persist()

    logger.info("event deleted", extra={"event_id": event_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
