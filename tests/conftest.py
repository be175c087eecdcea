"""Pytest configuration for the mapbox geocoding project."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

# Ensure the project root is on sys.path so that the package imports without installation.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mapbox_geocoding.services.mapbox import MapboxClient  # noqa: E402


def make_response(
    payload: Any = None,
    *,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    text: str = "",
) -> Mock:
    """Build a stand-in for ``httpx.Response`` (its methods are sync)."""

    response = Mock()
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def feature_collection() -> Dict[str, Any]:
    """A trimmed forward geocoding answer for an address in Washington, DC."""

    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": "dXJuOm1ieGFkcjo0ZjNj",
                "geometry": {"type": "Point", "coordinates": [-77.036547, 38.897675]},
                "properties": {
                    "mapbox_id": "dXJuOm1ieGFkcjo0ZjNj",
                    "feature_type": "address",
                    "name": "1600 Pennsylvania Avenue Northwest",
                    "name_preferred": "1600 Pennsylvania Avenue Northwest",
                    "place_formatted": "Washington, District of Columbia 20500, United States",
                    "full_address": "1600 Pennsylvania Avenue Northwest, Washington, District of Columbia 20500, United States",
                    "coordinates": {
                        "longitude": -77.036547,
                        "latitude": 38.897675,
                        "accuracy": "rooftop",
                        "routable_points": [
                            {"name": "default", "latitude": 38.8971, "longitude": -77.0366}
                        ],
                    },
                    "context": {
                        "address": {
                            "mapbox_id": "dXJuOm1ieGFkcjo0ZjNj",
                            "name": "1600 Pennsylvania Avenue Northwest",
                            "address_number": "1600",
                            "street_name": "Pennsylvania Avenue Northwest",
                        },
                        "region": {
                            "mapbox_id": "dXJuOm1ieHBsYzpCUVRz",
                            "name": "District of Columbia",
                            "wikidata_id": "Q3551781",
                            "region_code": "DC",
                            "region_code_full": "US-DC",
                        },
                        "country": {
                            "mapbox_id": "dXJuOm1ieHBsYzpJdXc",
                            "name": "United States",
                            "wikidata_id": "Q30",
                            "country_code": "US",
                            "country_code_alpha_3": "USA",
                        },
                    },
                    "match_code": {"address_number": "matched", "confidence": "exact"},
                },
            }
        ],
        "attribution": "NOTICE: © 2024 Mapbox and its suppliers.",
    }


@pytest.fixture
def mock_http():
    """Create a mock HTTPX client for testing."""

    mock_client = AsyncMock(spec=httpx.AsyncClient)
    empty = {"type": "FeatureCollection", "features": [], "attribution": ""}
    mock_client.get.return_value = make_response(empty)
    mock_client.post.return_value = make_response({"batch": []})
    return mock_client


@pytest.fixture
def mapbox_client(mock_http):
    """Create a MapboxClient whose HTTP layer is mocked."""

    with patch("httpx.AsyncClient", return_value=mock_http):
        client = MapboxClient(api_key="pk.test-token")
        client._client = mock_http
        return client
