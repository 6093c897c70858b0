"""
app.py — FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It builds the room inventory, wires the booking service and registers routers.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reservation.controllers.room_controller import router as room_router
from reservation.repository.room_inventory import RoomInventory
from reservation.services.booking_service import BookingService
from reservation.utils.config import Settings, get_settings
from reservation.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    The inventory is created once here and lives for the process; the booking
    service owns it and is exposed to handlers through app.state.
    """
    settings = settings or get_settings()

    # --- Inventory (fixed layout, occupancy only mutates) ---
    inventory = RoomInventory.from_settings(settings)

    # --- Services ---
    booking_service = BookingService(inventory=inventory, settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _startup(app)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Routers ---
    app.include_router(room_router)

    app.state.settings = settings
    app.state.inventory = inventory
    app.state.booking_service = booking_service

    return app


def _startup(app: FastAPI) -> None:
    inventory: RoomInventory = app.state.inventory
    logger.info(
        "Startup complete | floors=%s | rooms=%s",
        len(inventory.floor_numbers),
        inventory.room_count,
    )


# Module-level app object for uvicorn
app = create_app()
