"""
HikeLog Backend - Record Route Factory
========================================

What:  Builds the five CRUD endpoints for one record collection.
How:   create_resource_router() closes over the record model and the
       StoreGateway attribute name, so FastAPI validates bodies against the
       right model and the handler resolves the right ResourceService.
Who:   routes/hiking.py and routes/observation.py.

Endpoints (for prefix /R):
    GET    /R        → list of records
    POST   /R        → created record (new _id)
    GET    /R/{id}   → one record
    PATCH  /R/{id}   → updated record (path id overrides body _id)
    DELETE /R/{id}   → {"message": "<Name> deleted"}

The {id} parameter is declared as a plain string; ResourceService parses it
so that malformed identifiers produce our 400 error body, not FastAPI's 422.
"""

from typing import List, Type

from fastapi import APIRouter, Depends, Request

from hikelog.schemas.common import ErrorResponse, MessageResponse
from hikelog.schemas.records import StoredRecord
from hikelog.services.resource_service import ResourceService, StoreGateway


def get_gateway(request: Request) -> StoreGateway:
    """FastAPI dependency: the StoreGateway attached to the running app."""
    return request.app.state.gateway


def create_resource_router(
    *,
    prefix: str,
    resource: str,
    model: Type[StoredRecord],
    tag: str,
) -> APIRouter:
    """
    Build the CRUD router for one collection.

    Args:
        prefix:   URL prefix, e.g. "/hiking"
        resource: StoreGateway attribute holding the service, e.g. "hiking"
        model:    Record model validated on writes and returned on reads
        tag:      OpenAPI tag
    """
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_service(gateway: StoreGateway = Depends(get_gateway)) -> ResourceService:
        return getattr(gateway, resource)

    errors = {
        400: {"description": "Malformed identifier or body", "model": ErrorResponse},
        500: {"description": "Store failure", "model": ErrorResponse},
    }

    @router.get(
        "",
        response_model=List[model],
        responses={500: errors[500]},
        summary=f"List all {tag.lower()} records",
    )
    async def list_records(service: ResourceService = Depends(get_service)):
        return await service.list_all()

    @router.post(
        "",
        response_model=model,
        responses=errors,
        summary=f"Create a {tag.lower()} record",
    )
    async def create_record(
        payload: model,
        service: ResourceService = Depends(get_service),
    ):
        return await service.create(payload)

    @router.get(
        "/{record_id}",
        response_model=model,
        responses={
            **errors,
            404: {"description": "No document with this identifier", "model": ErrorResponse},
        },
        summary=f"Get one {tag.lower()} record",
    )
    async def get_record(record_id: str, service: ResourceService = Depends(get_service)):
        return await service.get_by_id(record_id)

    @router.patch(
        "/{record_id}",
        response_model=model,
        responses=errors,
        summary=f"Replace the fields of a {tag.lower()} record",
    )
    async def update_record(
        record_id: str,
        payload: model,
        service: ResourceService = Depends(get_service),
    ):
        return await service.update_by_id(record_id, payload)

    @router.delete(
        "/{record_id}",
        response_model=MessageResponse,
        responses=errors,
        summary=f"Delete a {tag.lower()} record",
    )
    async def delete_record(record_id: str, service: ResourceService = Depends(get_service)):
        message = await service.delete_by_id(record_id)
        return MessageResponse(message=message)

    return router
