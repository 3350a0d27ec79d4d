# Middleware package init
"""
ProjectBoard Backend: Middleware Package
=========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    The request id is bound first so the access log line and any error
    response for the same request carry it.
"""
