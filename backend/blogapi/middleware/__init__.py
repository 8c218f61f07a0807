# Middleware package init
"""
BlogAPI Backend: Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID first, so the access log line carries the id
    - Logging measures everything below it, including the database work
"""
