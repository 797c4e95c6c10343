# Middleware package init
"""
HRMS Employee API — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → Route Handler

    Request ID runs first so the access log line carries the correlation ID.
    Responses travel back through the chain in reverse.
"""
