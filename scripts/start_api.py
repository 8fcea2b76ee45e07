#!/usr/bin/env python3
# =============================================================================
# scripts/start_api.py - API Server Entry Point
# =============================================================================
# Starts the Pokedex API with uvicorn.
#
# Usage:
#   # Start server (development)
#   poetry run python scripts/start_api.py
#
#   # Or use uvicorn directly
#   poetry run uvicorn app.main:app --reload
#
# Host and port come from API_HOST / API_PORT (.env file or environment).
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print("Pokedex API")
    print("=" * 60)
    print()
    print(f"Serving on http://{settings.API_HOST}:{settings.API_PORT}")
    print(f"Docs at {settings.DOCS_URL}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
