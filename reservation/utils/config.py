"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from reservation.domain.constraints import HotelLayout


def _env_int(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    return tuple(item.strip() for item in raw_value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    app_name: str = "Hotel Room Reservation"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    floor_count: int = 10
    rooms_per_floor: int = 10
    top_floor_rooms: int = 7
    cors_allow_origins: tuple[str, ...] = ("*",)

    @property
    def hotel_layout(self) -> HotelLayout:
        return HotelLayout(
            floor_count=self.floor_count,
            rooms_per_floor=self.rooms_per_floor,
            top_floor_rooms=self.top_floor_rooms,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    defaults = Settings()
    return Settings(
        app_name=os.getenv("HOTEL_APP_NAME", defaults.app_name),
        app_version=os.getenv("HOTEL_APP_VERSION", defaults.app_version),
        log_level=os.getenv("HOTEL_LOG_LEVEL", defaults.log_level),
        floor_count=_env_int("HOTEL_FLOOR_COUNT", defaults.floor_count),
        rooms_per_floor=_env_int("HOTEL_ROOMS_PER_FLOOR", defaults.rooms_per_floor),
        top_floor_rooms=_env_int("HOTEL_TOP_FLOOR_ROOMS", defaults.top_floor_rooms),
        cors_allow_origins=_env_list("HOTEL_CORS_ALLOW_ORIGINS", defaults.cors_allow_origins),
    )
