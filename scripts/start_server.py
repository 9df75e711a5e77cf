#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - Web Server Entry Point
# =============================================================================
# Starts uvicorn on API_HOST:API_PORT from settings.
#
# Usage:
#   python scripts/start_server.py
#
#   # Or use the uvicorn CLI directly
#   uvicorn app.main:app --reload
#
# Auto-reload is on in development only.
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

import uvicorn

from app.config import settings


def main():
    print(f"Starting jokes app on {settings.API_HOST}:{settings.API_PORT} ({settings.ENVIRONMENT})")
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
