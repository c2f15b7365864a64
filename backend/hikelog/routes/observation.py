"""
HikeLog Backend - Observation Routes
======================================

What:  CRUD endpoints for the `observation` collection under /observation.

An observation's hiking_id is stored as given; the referenced hiking trip
is never looked up.
"""

from hikelog.routes.resources import create_resource_router
from hikelog.schemas.records import Observation

router = create_resource_router(
    prefix="/observation",
    resource="observation",
    model=Observation,
    tag="Observation",
)
