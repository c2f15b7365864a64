# Middleware package init
"""
HikeLog Backend - Middleware Package
======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the same ID as
    the X-Request-ID response header and any error body.
"""
