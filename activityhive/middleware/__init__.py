"""
ActivityHive Backend — Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Responses pass back through the chain in reverse, so the logging
    middleware sees the final status code and the request ID header is set
    on every response, error responses included.
"""
