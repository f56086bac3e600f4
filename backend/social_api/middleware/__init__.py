# Middleware package init
"""
Social Media API Backend: Middleware Package
==============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assign the correlation ID first so every later log line has it
    2. Logging: one access line per request, with status and duration
    3. GZip / CORS: Starlette built-ins

    Responses pass back through the chain in reverse, so the X-Request-ID
    header is added last.
"""
