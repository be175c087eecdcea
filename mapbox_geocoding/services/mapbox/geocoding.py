"""Forward, reverse and batch calls against the Mapbox Geocoding API v6.

Each call builds the query parameters (or JSON body) from a typed request,
hands the network round trip to the client and validates the JSON answer
into the matching response model.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from mapbox_geocoding.services.mapbox.schemas import (
    ForwardGeocodeRequest,
    GeocodeBatchRequest,
    GeocodeBatchResponse,
    GeocodeResponse,
    RateLimit,
    ReverseGeocodeRequest,
    format_float,
    types_query,
)

if TYPE_CHECKING:
    from mapbox_geocoding.services.mapbox.client import MapboxClient

GEOCODING_BATCH_ENDPOINT = "/search/geocode/v6/batch"
GEOCODING_REVERSE_ENDPOINT = "/search/geocode/v6/reverse"
GEOCODING_FORWARD_ENDPOINT = "/search/geocode/v6/forward"

# Default geocoding allowance: 1000 requests per minute.
GEOCODING_RATE_LIMIT = RateLimit(limit=1000, interval_s=60)


def forward_params(api_key: str, request: ForwardGeocodeRequest) -> Dict[str, str]:
    """Build the query string for a forward geocoding request."""

    query = {
        "q": request.q,
        "access_token": api_key,
        "autocomplete": "true" if request.autocomplete else "false",
    }
    if request.has_bbox():
        query["bbox"] = request.bbox.query()
    if request.country:
        query["country"] = request.country
    if request.language:
        query["language"] = request.language
    if request.limit:
        query["limit"] = str(request.limit)
    if request.has_proximity():
        query["proximity"] = request.proximity_query()
    if request.types:
        query["types"] = types_query(request.types)
    return query


def reverse_params(api_key: str, request: ReverseGeocodeRequest) -> Dict[str, str]:
    """Build the query string for a reverse geocoding request."""

    query = {
        "access_token": api_key,
        "latitude": format_float(request.latitude),
        "longitude": format_float(request.longitude),
    }
    if request.country:
        query["country"] = request.country
    if request.language:
        query["language"] = request.language
    if request.limit:
        query["limit"] = str(request.limit)
    if request.types:
        query["types"] = types_query(request.types)
    return query


# https://docs.mapbox.com/api/search/geocoding/#forward-geocoding-with-search-text-input
async def forward_geocode(client: MapboxClient, request: ForwardGeocodeRequest) -> GeocodeResponse:
    response = await client.get(GEOCODING_FORWARD_ENDPOINT, forward_params(client.api_key, request))
    return client.handle_response(response, GeocodeResponse, GEOCODING_RATE_LIMIT)


# https://docs.mapbox.com/api/search/geocoding/#reverse-geocoding
async def reverse_geocode(client: MapboxClient, request: ReverseGeocodeRequest) -> GeocodeResponse:
    response = await client.get(GEOCODING_REVERSE_ENDPOINT, reverse_params(client.api_key, request))
    return client.handle_response(response, GeocodeResponse, GEOCODING_RATE_LIMIT)


# https://docs.mapbox.com/api/search/geocoding/#batch-geocoding
async def reverse_geocode_batch(
    client: MapboxClient, request: GeocodeBatchRequest
) -> GeocodeBatchResponse:
    """Send every reverse query, then every forward query, in one POST."""

    response = await client.post(
        GEOCODING_BATCH_ENDPOINT,
        {"access_token": client.api_key},
        request.to_body(),
    )
    return client.handle_response(response, GeocodeBatchResponse, GEOCODING_RATE_LIMIT)
