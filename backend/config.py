# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)

# Keys shorter than this are treated as placeholders ("changeme", "xxx", ...)
MIN_API_KEY_LENGTH = 10


def is_provider_configured(api_key: str | None = None) -> bool:
    key = Settings.ORS_API_KEY if api_key is None else api_key
    return bool(key) and len(key) >= MIN_API_KEY_LENGTH


class Settings:
    ORS_API_KEY: str = os.getenv("ORS_API_KEY", "")
    ORS_BASE_URL: str = os.getenv("ORS_BASE_URL", "https://api.openrouteservice.org")
    ORS_PROFILE: str = os.getenv("ORS_PROFILE", "driving-car")
    # Ask ORS for native alternatives on the direct leg as well
    ORS_REQUEST_ALTERNATIVES: bool = os.getenv("ORS_REQUEST_ALTERNATIVES", "0") == "1"
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "15.0"))
    DEMO_DELAY_S: float = float(os.getenv("DEMO_DELAY_S", "1.5"))
    VIA_OFFSET_DEG: float = float(os.getenv("VIA_OFFSET_DEG", "0.05"))

    NOMINATIM_URL: str = os.getenv(
        "NOMINATIM_URL", "https://nominatim.openstreetmap.org"
    )
    NOMINATIM_USER_AGENT: str = os.getenv("NOMINATIM_USER_AGENT", "EcoRoute/1.0")
    GEOCODE_LIMIT: int = int(os.getenv("GEOCODE_LIMIT", "5"))
    GEOCODE_CACHE_SIZE: int = int(os.getenv("GEOCODE_CACHE_SIZE", "100"))
    GEOCODE_OVERRIDES_FILE: str = os.getenv("GEOCODE_OVERRIDES_FILE", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")


settings = Settings
