"""
HikeLog Backend - Application Package
=======================================

Layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Resource gateway)     │  ← id parsing, store calls
    ├─────────────────────────────────────┤
    │          Schemas (Records)          │  ← Pydantic models
    ├─────────────────────────────────────┤
    │        Database (MongoDB/Motor)     │  ← client lifecycle
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
