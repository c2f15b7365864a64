"""
HikeLog Backend - Hiking Trip Routes
======================================

What:  CRUD endpoints for the `hiking` collection under /hiking.
"""

from hikelog.routes.resources import create_resource_router
from hikelog.schemas.records import HikingTrip

router = create_resource_router(
    prefix="/hiking",
    resource="hiking",
    model=HikingTrip,
    tag="Hiking",
)
