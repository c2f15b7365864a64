"""
HikeLog Backend - Record Schemas
==================================

What:  Pydantic models for the two stored record types.
How:   FastAPI validates request bodies against these models and serializes
       responses by alias, so the identifier travels as `_id` on the wire.
Who:   Route handlers (request/response), ResourceService (persistence).

Field semantics:
    - Every field except `_id` defaults to its zero value, so a body may
      omit any of them.
    - Values of the wrong JSON type are rejected with a 400 ("3" or 3.0
      for difficulty, "true" or 1 for parking); nothing is coerced.
    - date/length/time are free-form strings; difficulty has no range check.
    - Observation.hiking_id is a plain string, never checked against the
      hiking collection.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StoredRecord(BaseModel):
    """
    Base for documents kept in a MongoDB collection.

    `id` is populated from the store-generated ObjectId (as a 24-char hex
    string). Any `_id` a client sends is replaced by the server.
    """
    id: Optional[str] = Field(
        default=None,
        alias="_id",
        description="Store-generated identifier (24-char hex ObjectId)",
    )

    # strict: a JSON value of the wrong type is rejected, never converted
    model_config = {"populate_by_name": True, "strict": True}

    def document_fields(self) -> dict:
        """All declared fields except the identifier, keyed as stored."""
        return self.model_dump(exclude={"id"})


class HikingTrip(StoredRecord):
    """A planned or completed hike."""
    name: str = Field(default="", description="Trail or trip name")
    location: str = Field(default="", description="Where the hike takes place")
    date: str = Field(default="", description="Date of the hike (free-form)")
    parking: bool = Field(default=False, description="Whether parking is available")
    length: str = Field(default="", description="Trail length, unit included (e.g. '5km')")
    difficulty: int = Field(default=0, description="Difficulty rating")
    description: str = Field(default="", description="Free-text description")


class Observation(StoredRecord):
    """Something noted during a hike."""
    hiking_id: str = Field(default="", description="Identifier of the related hiking trip")
    name: str = Field(default="", description="What was observed")
    comment: str = Field(default="", description="Additional comments")
    time: str = Field(default="", description="When it was observed (free-form)")
