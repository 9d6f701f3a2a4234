# Middleware package init
"""
Back Office Backend — Middleware Package
==========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: sets the correlation id before anything logs
    2. Logging: access line written with the request id attached
    3. GZip / CORS: provided by FastAPI
"""
