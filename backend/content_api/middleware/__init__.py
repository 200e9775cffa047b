# Middleware package init
"""
Content API — Middleware Package
==================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error bodies
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: Applied by FastAPI's built-in middleware

    Responses travel back through the chain in reverse, so the access log
    sees the final status code and the request ID header is always set.
"""
