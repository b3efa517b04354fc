"""
Orphanage API — Server Entrypoint
==================================

Usage:
    python -m orphanage
    PORT=8080 orphanage
"""

import uvicorn

from orphanage.config import settings


def main() -> None:
    uvicorn.run(
        "orphanage.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
