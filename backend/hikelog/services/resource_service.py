"""
HikeLog Backend - Resource Service (Store Gateway)
====================================================

What:  The five single-document operations shared by both collections:
       create, list_all, get_by_id, update_by_id, delete_by_id.
How:   Each ResourceService wraps one Motor collection, the record model it
       stores and a per-operation timeout. Identifiers are parsed before
       any store access; every driver call is bounded by asyncio.wait_for.
Who:   Route handlers, through the StoreGateway attached to app.state.

Error Translation:
    bson InvalidId                  → ValidationError (400)
    find_one returned None          → NotFoundError   (404)
    PyMongoError / timeout          → StoreError      (500, driver text kept)
    stored document fails decoding  → StoreError      (500)

Update semantics:
    The path identifier always wins over any `_id` in the body. All declared
    fields are written with a single `$set`, and the caller's record is
    returned without re-reading the stored document. A `$set` against an
    identifier that matches nothing is not an error.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, List, Optional, Type, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError as SchemaError
from pymongo.errors import PyMongoError

from hikelog.config import Settings, settings as default_settings
from hikelog.exceptions import NotFoundError, StoreError, ValidationError
from hikelog.schemas.records import HikingTrip, Observation, StoredRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=StoredRecord)


def parse_object_id(raw_id: str) -> ObjectId:
    """
    Decode a path identifier into an ObjectId.

    Raises:
        ValidationError: raw_id is not a 24-character hex string.
    """
    try:
        return ObjectId(raw_id)
    except (InvalidId, TypeError) as e:
        raise ValidationError(message=str(e), field="id", context={"id": raw_id})


class ResourceService(Generic[RecordT]):
    """
    Single-document CRUD over one MongoDB collection.

    Args:
        collection: Motor collection (or any object with the same async API)
        model:      Record class stored in the collection
        name:       Display name used in messages, e.g. "Hiking"
        timeout:    Seconds allowed for each store call
    """

    def __init__(
        self,
        collection: Any,
        model: Type[RecordT],
        name: str,
        timeout: float = 10.0,
    ):
        self.collection = collection
        self.model = model
        self.name = name
        self.timeout = timeout

    async def _run(self, operation: str, awaitable: Awaitable) -> Any:
        """Await a driver call under the timeout, translating driver failures."""
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error("%s %s timed out after %.1fs", self.name, operation, self.timeout)
            raise StoreError(
                message=f"{operation} timed out after {self.timeout:g}s",
                context={"resource": self.name, "operation": operation},
            )
        except PyMongoError as e:
            logger.error("%s %s failed: %s", self.name, operation, str(e))
            raise StoreError(
                message=str(e),
                context={"resource": self.name, "operation": operation},
            )

    def _to_record(self, document: dict) -> RecordT:
        document = dict(document)
        if "_id" in document:
            document["_id"] = str(document["_id"])
        try:
            return self.model.model_validate(document)
        except SchemaError as e:
            raise StoreError(
                message=f"stored {self.name.lower()} document could not be decoded: {e}",
                context={"resource": self.name, "id": document.get("_id")},
            )

    async def create(self, payload: RecordT) -> RecordT:
        """Insert the payload under a newly generated identifier and return it."""
        object_id = ObjectId()
        document = {"_id": object_id, **payload.document_fields()}
        await self._run("insert", self.collection.insert_one(document))
        logger.info("%s created: %s", self.name, object_id)
        return payload.model_copy(update={"id": str(object_id)})

    async def list_all(self) -> List[RecordT]:
        """Every document in the collection, in store order."""
        cursor = self.collection.find({})
        documents = await self._run("find", cursor.to_list(length=None))
        return [self._to_record(doc) for doc in documents]

    async def get_by_id(self, raw_id: str) -> RecordT:
        object_id = parse_object_id(raw_id)
        document = await self._run("find", self.collection.find_one({"_id": object_id}))
        if document is None:
            raise NotFoundError(resource=self.name, resource_id=str(object_id))
        return self._to_record(document)

    async def update_by_id(self, raw_id: str, payload: RecordT) -> RecordT:
        """Replace every declared field of the document; the path id wins."""
        object_id = parse_object_id(raw_id)
        record = payload.model_copy(update={"id": str(object_id)})
        result = await self._run(
            "update",
            self.collection.update_one(
                {"_id": object_id},
                {"$set": record.document_fields()},
            ),
        )
        logger.info(
            "%s updated: %s (matched=%s)",
            self.name,
            object_id,
            getattr(result, "matched_count", "?"),
        )
        return record

    async def delete_by_id(self, raw_id: str) -> str:
        """
        Delete the document and return a confirmation message.

        Succeeds whether or not a document matched.
        """
        object_id = parse_object_id(raw_id)
        result = await self._run("delete", self.collection.delete_one({"_id": object_id}))
        logger.info(
            "%s deleted: %s (deleted=%s)",
            self.name,
            object_id,
            getattr(result, "deleted_count", "?"),
        )
        return f"{self.name} deleted"


@dataclass
class StoreGateway:
    """One ResourceService per collection, built once per application."""
    hiking: ResourceService[HikingTrip]
    observation: ResourceService[Observation]

    @classmethod
    def from_database(cls, database: Any, config: Optional[Settings] = None) -> "StoreGateway":
        config = config or default_settings
        timeout = config.store_timeout_seconds
        return cls(
            hiking=ResourceService(
                database[config.hiking_collection], HikingTrip, "Hiking", timeout
            ),
            observation=ResourceService(
                database[config.observation_collection], Observation, "Observation", timeout
            ),
        )
