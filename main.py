"""
main.py — Server launcher and entry point.

Run this file to start the reservation API:

    python main.py

This file does NOT contain application logic. See app.py for the FastAPI
application, service wiring, and startup sequence.

Direct uvicorn usage:
    uvicorn app:app --reload
"""

from __future__ import annotations

import os

import uvicorn


HOST = os.getenv("HOTEL_HOST", "127.0.0.1")
PORT = int(os.getenv("HOTEL_PORT", "8080"))


def main() -> None:
    """Start the reservation API server."""
    print("=" * 60)
    print("  Hotel Room Reservation API")
    print("=" * 60)
    print(f"  Server   : http://{HOST}:{PORT}/api/rooms/all")
    print(f"  API docs : http://{HOST}:{PORT}/docs")
    print("=" * 60)
    print("  Press CTRL+C to stop\n")

    uvicorn.run(
        "app:app",
        host=HOST,
        port=PORT,
        log_level="info",
    )


if __name__ == "__main__":
    main()
