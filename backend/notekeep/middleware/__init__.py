# Middleware package init
"""
Notekeep Backend — Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    The request ID is set before the logging middleware reads it, so every
    access log line carries the same ID as the X-Request-ID response header.
"""
