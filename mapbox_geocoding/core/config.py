"""Configuration helpers for the Mapbox access token and client options."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.mapbox.com"
DEFAULT_TIMEOUT_S = 15.0


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for the Mapbox credentials and client options."""

    mapbox_access_token: Optional[str] = None
    mapbox_base_url: str = DEFAULT_BASE_URL
    mapbox_timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls, *, dotenv_path: Optional[str] = None) -> "ApiSettings":
        """Load settings from the process environment (and a `.env` file if present)."""

        load_dotenv(dotenv_path)
        timeout = os.getenv("MAPBOX_TIMEOUT_S")
        return cls(
            mapbox_access_token=os.getenv("MAPBOX_ACCESS_TOKEN"),
            mapbox_base_url=os.getenv("MAPBOX_BASE_URL") or DEFAULT_BASE_URL,
            mapbox_timeout_s=float(timeout) if timeout else DEFAULT_TIMEOUT_S,
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value
