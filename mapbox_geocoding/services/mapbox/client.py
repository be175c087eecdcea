import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from mapbox_geocoding.core.config import ApiSettings
from mapbox_geocoding.services.mapbox import geocoding
from mapbox_geocoding.services.mapbox.schemas import (
    ForwardGeocodeRequest,
    GeocodeBatchRequest,
    GeocodeBatchResponse,
    GeocodeResponse,
    RateLimit,
    ReverseGeocodeRequest,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class MapboxAPIError(RuntimeError):
    """Raised when the Mapbox API answers with an error status or an unreadable body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        rate_limit: Optional[RateLimit] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.rate_limit = rate_limit


class RateLimitExceeded(MapboxAPIError):
    """Raised for HTTP 429 responses; ``rate_limit.reset`` tells when to try again."""


def _format_response_error(response: httpx.Response) -> str:
    """Return a human-friendly message for Mapbox errors."""

    status = response.status_code
    details = None
    try:
        parsed = response.json()
    except ValueError:
        details = (response.text or "").strip() or None
    else:
        if isinstance(parsed, dict):
            for key in ("message", "error"):
                if isinstance(parsed.get(key), str):
                    details = parsed[key]
                    break
    prefix = f"HTTP {status}" if status else "Mapbox API error"
    if details:
        return f"{prefix}: {details}"
    return prefix


class MapboxClient:
    """Thin async wrapper around the Mapbox search APIs, authenticated by access token."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.mapbox.com",
        timeout_s: float = 15.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"accept": "application/json"},
            timeout=httpx.Timeout(timeout_s, connect=10.0),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTPX client."""

        await self._client.aclose()

    async def __aenter__(self) -> "MapboxClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: Dict[str, str]) -> httpx.Response:
        """Issue a GET request and return the raw response."""

        logger.debug(f"GET {path} params={sorted(k for k in params if k != 'access_token')}")
        return await self._client.get(path, params=params)

    async def post(self, path: str, params: Dict[str, str], body: Any) -> httpx.Response:
        """Issue a POST request with a JSON body and return the raw response."""

        logger.debug(f"POST {path} entries={len(body) if isinstance(body, list) else 1}")
        return await self._client.post(path, params=params, json=body)

    def handle_response(
        self, response: httpx.Response, model: Type[ModelT], rate_limit: RateLimit
    ) -> ModelT:
        """Validate a successful response into ``model`` or raise `MapboxAPIError`."""

        if response.status_code >= 400:
            limits = RateLimit.from_headers(response.headers, rate_limit)
            message = _format_response_error(response)
            logger.warning(f"Mapbox request failed: {message}")
            if response.status_code == 429:
                raise RateLimitExceeded(message, status_code=429, rate_limit=limits)
            raise MapboxAPIError(message, status_code=response.status_code, rate_limit=limits)

        try:
            data = response.json()
        except ValueError as exc:
            raise MapboxAPIError(
                f"HTTP {response.status_code}: response body is not valid JSON",
                status_code=response.status_code,
            ) from exc
        return model.model_validate(data)

    async def forward_geocode(self, request: ForwardGeocodeRequest) -> GeocodeResponse:
        return await geocoding.forward_geocode(self, request)

    async def reverse_geocode(self, request: ReverseGeocodeRequest) -> GeocodeResponse:
        return await geocoding.reverse_geocode(self, request)

    async def reverse_geocode_batch(self, request: GeocodeBatchRequest) -> GeocodeBatchResponse:
        return await geocoding.reverse_geocode_batch(self, request)


def create_mapbox_client(settings: ApiSettings) -> MapboxClient:
    """Instantiate the Mapbox client using project settings."""

    api_key = settings.ensure("mapbox_access_token")
    return MapboxClient(
        api_key,
        base_url=settings.mapbox_base_url,
        timeout_s=settings.mapbox_timeout_s,
    )
