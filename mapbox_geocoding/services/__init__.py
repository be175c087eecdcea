"""External service integrations.

Each service module exports:
    - create_*_client: Factory to create the API client
    - create_*_tools: Factory to create LangChain tools from the client
    - Request/response schemas: Pydantic models for the wire format

Example Usage:
    >>> from mapbox_geocoding.services.mapbox import create_mapbox_client, ForwardGeocodeRequest
    >>> from mapbox_geocoding.core.config import ApiSettings
    >>>
    >>> settings = ApiSettings.from_env()
    >>> async with create_mapbox_client(settings) as client:
    ...     result = await client.forward_geocode(ForwardGeocodeRequest(q="Berlin"))
"""

# Mapbox geocoding
from mapbox_geocoding.services.mapbox import (
    MapboxAPIError,
    MapboxClient,
    RateLimitExceeded,
    create_mapbox_client,
    create_geocoding_tools,
    ForwardGeocodeRequest,
    ReverseGeocodeRequest,
    GeocodeBatchRequest,
    GeocodeResponse,
    GeocodeBatchResponse,
)

__all__ = [
    "MapboxAPIError",
    "MapboxClient",
    "RateLimitExceeded",
    "create_mapbox_client",
    "create_geocoding_tools",
    "ForwardGeocodeRequest",
    "ReverseGeocodeRequest",
    "GeocodeBatchRequest",
    "GeocodeResponse",
    "GeocodeBatchResponse",
]
