"""schemas/event.py — Event request/response schemas.

DB source: events — id, name, description, location, date, image_path

Create arrives as multipart form data (it may carry an image), update as a
JSON body. EventResponse is the only shape ever returned to callers.

The events.date column is a naive timestamp holding UTC, so offset-bearing
input dates are converted to UTC before they reach the database.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Form
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class EventFields(BaseModel):
    """Fields shared by create and update requests."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=255)
    date: datetime

    @field_validator("date")
    @classmethod
    def _to_naive_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class CreateEventRequest(EventFields):
    """Form portion of POST /events. The optional image is a separate File() part."""

    @classmethod
    def as_form(
        cls,
        name: str = Form(..., min_length=1, max_length=255),
        description: str = Form(..., min_length=1),
        location: str = Form(..., min_length=1, max_length=255),
        date: datetime = Form(...),
    ) -> "CreateEventRequest":
        # Runs inside a dependency, where a bare ValidationError would become a 500
        try:
            return cls(name=name, description=description, location=location, date=date)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False)) from exc


class UpdateEventRequest(EventFields):
    """Body of PUT /events/{id}. The image cannot be changed here."""


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    location: str
    date: Optional[datetime] = None
    image_path: Optional[str] = None
