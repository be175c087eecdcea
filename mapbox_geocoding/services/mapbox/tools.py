from typing import Any, Dict, List

from langchain_core.tools import StructuredTool, Tool

from mapbox_geocoding.services.mapbox.client import MapboxAPIError, MapboxClient
from mapbox_geocoding.services.mapbox.schemas import ForwardGeocodeRequest, ReverseGeocodeRequest


def create_geocoding_tools(client: MapboxClient) -> List[Tool]:
    """Expose Mapbox forward and reverse geocoding as LangChain tools.

    Args:
        client: An initialized MapboxClient instance

    Returns:
        List[Tool]: ``forward_geocode_tool`` and ``reverse_geocode_tool``. Both
        return the GeoJSON FeatureCollection as a plain dict.
    """

    async def _forward(**kwargs) -> Dict[str, Any]:
        payload = ForwardGeocodeRequest(**kwargs)
        try:
            response = await client.forward_geocode(payload)
        except MapboxAPIError as exc:
            raise RuntimeError(exc.message) from exc
        return response.model_dump(mode="json", exclude_none=True)

    async def _reverse(**kwargs) -> Dict[str, Any]:
        payload = ReverseGeocodeRequest(**kwargs)
        try:
            response = await client.reverse_geocode(payload)
        except MapboxAPIError as exc:
            raise RuntimeError(exc.message) from exc
        return response.model_dump(mode="json", exclude_none=True)

    return [
        StructuredTool.from_function(
            coroutine=_forward,
            name="forward_geocode_tool",
            description="Find coordinates and place details for an address or place name. Input: q (required) and optional autocomplete, bbox, country (ISO alpha-2 codes), language, limit, proximity, types.",
            args_schema=ForwardGeocodeRequest,
        ),
        StructuredTool.from_function(
            coroutine=_reverse,
            name="reverse_geocode_tool",
            description="Describe the place at a latitude/longitude pair. Input: latitude, longitude (required) and optional country, language, limit, types.",
            args_schema=ReverseGeocodeRequest,
        ),
    ]
