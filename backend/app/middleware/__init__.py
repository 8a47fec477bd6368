# Middleware package init
"""
NoteKeeper Backend: Middleware Package
=======================================

Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID stored in a ContextVar and echoed in
       the X-Request-ID response header
    2. Logging: one access log line per request with status and duration
    3. CORS: FastAPI's CORSMiddleware, origins from settings

Authentication is not middleware: it is the `get_current_account_id`
dependency, declared by each protected route.
"""
