# Services package init
"""
HikeLog Backend - Services Layer
==================================

What:  Data-access layer sitting between routes (HTTP) and MongoDB.
How:   Routes receive a StoreGateway through FastAPI dependencies and call
       the ResourceService for their collection.

Service Inventory:
    - ResourceService: create/list/get/update/delete for one collection
    - StoreGateway: the hiking and observation services, built from a
      database handle at startup (or from a test double)
"""
