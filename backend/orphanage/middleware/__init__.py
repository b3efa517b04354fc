# Middleware package init
"""
Orphanage API — Middleware Package
===================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the logging middleware can read the ID from
    request_id_var when it writes the access line.
"""
