"""Mapbox Geocoding API v6 integration.

This module provides the access-token bearing client, the typed request and
response models, and LangChain tool factories for forward, reverse and batch
geocoding.

Public API:
    - MapboxClient: Async HTTP client for the Mapbox search endpoints
    - create_mapbox_client: Factory function to create the client from settings
    - create_geocoding_tools: Factory function to create LangChain tools
    - forward_geocode / reverse_geocode / reverse_geocode_batch: Endpoint calls
    - ForwardGeocodeRequest / ReverseGeocodeRequest / GeocodeBatchRequest: Request schemas
"""
from mapbox_geocoding.services.mapbox.client import (
    MapboxAPIError,
    MapboxClient,
    RateLimitExceeded,
    create_mapbox_client,
)
from mapbox_geocoding.services.mapbox.geocoding import (
    GEOCODING_BATCH_ENDPOINT,
    GEOCODING_FORWARD_ENDPOINT,
    GEOCODING_RATE_LIMIT,
    GEOCODING_REVERSE_ENDPOINT,
    forward_geocode,
    reverse_geocode,
    reverse_geocode_batch,
)
from mapbox_geocoding.services.mapbox.schemas import (
    BoundingBox,
    Context,
    Coordinate,
    ExtendedCoordinate,
    Feature,
    FeatureType,
    ForwardGeocodeRequest,
    GeocodeBatchRequest,
    GeocodeBatchResponse,
    GeocodeResponse,
    Geometry,
    Properties,
    RateLimit,
    ReverseGeocodeRequest,
)
from mapbox_geocoding.services.mapbox.tools import create_geocoding_tools

__all__ = [
    "MapboxAPIError",
    "MapboxClient",
    "RateLimitExceeded",
    "create_mapbox_client",
    "create_geocoding_tools",
    "GEOCODING_BATCH_ENDPOINT",
    "GEOCODING_FORWARD_ENDPOINT",
    "GEOCODING_RATE_LIMIT",
    "GEOCODING_REVERSE_ENDPOINT",
    "forward_geocode",
    "reverse_geocode",
    "reverse_geocode_batch",
    "BoundingBox",
    "Context",
    "Coordinate",
    "ExtendedCoordinate",
    "Feature",
    "FeatureType",
    "ForwardGeocodeRequest",
    "GeocodeBatchRequest",
    "GeocodeBatchResponse",
    "GeocodeResponse",
    "Geometry",
    "Properties",
    "RateLimit",
    "ReverseGeocodeRequest",
]
