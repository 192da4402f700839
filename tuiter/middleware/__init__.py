# Middleware package init
"""
Tuiter Backend — Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    The request ID is set first so that the access log line and every log
    line written while handling the request share the same correlation ID.
"""
