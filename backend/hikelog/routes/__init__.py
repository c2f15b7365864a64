# Routes package init
"""
HikeLog Backend - API Routes Package
======================================

Route Inventory:
    - hiking.py:       GET/POST /hiking, GET/PATCH/DELETE /hiking/{id}
    - observation.py:  GET/POST /observation, GET/PATCH/DELETE /observation/{id}
    - health.py:       GET /health (service health check)

Both record routers are produced by resources.create_resource_router, so
the two collections expose identical operation shapes.

Routes stay thin: decode the request, call the ResourceService, return the
record. Errors propagate as exceptions to the handlers in main.py.
"""
