"""
HRMS Employee API — Server Entry Point
========================================

Usage:
    python -m hrms
    hrms-api

Binds uvicorn to BACKEND_HOST:BACKEND_PORT. A failed bind ends the process
with a non-zero exit status; there is no retry.
"""

import uvicorn

from hrms.config import settings


def main() -> None:
    uvicorn.run(
        "hrms.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
