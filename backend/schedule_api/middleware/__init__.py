# Middleware package init
"""
Schedule API — Middleware Package
==================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the correlation ID.
"""
