#!/usr/bin/env python3
# =============================================================================
# scripts/start_api.py - API Server Entry Point
# =============================================================================
# Starts the TodoList API with uvicorn.
#
# Usage:
#   # Start server on API_HOST:API_PORT (default 0.0.0.0:3333)
#   python scripts/start_api.py
#
#   # Or use the uvicorn CLI directly
#   uvicorn app.main:app --reload --port 3333
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
    print("TodoList API")
    print("=" * 60)
    print()
    print(f"Listening on http://{settings.API_HOST}:{settings.API_PORT}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development and settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
