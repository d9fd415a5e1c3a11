# Middleware package init
"""
RecipeHub Backend — Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: reuse the caller's X-Request-ID or mint one
    2. Logging: one access line per request, tagged with that ID
    3. GZip / CORS: Starlette's stock middleware
"""
