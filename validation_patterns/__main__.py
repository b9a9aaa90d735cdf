"""
Local development server.

Run with ``python -m validation_patterns``. In production, point an
ASGI server at ``validation_patterns.main:app`` instead.
"""

import uvicorn

from validation_patterns.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "validation_patterns.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
