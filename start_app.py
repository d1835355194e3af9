#!/usr/bin/env python
"""Start the FastAPI application with host/port taken from settings."""
import uvicorn

from app.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()

    print(f"Starting application on port {settings.PORT}")

    # Run the app
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
