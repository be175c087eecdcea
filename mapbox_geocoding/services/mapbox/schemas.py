from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mapbox_geocoding.core.types import CountryCodes, LanguageTag, Lat, Lon, NonNegInt


FeatureType = Literal[
    "country",
    "region",
    "postcode",
    "district",
    "place",
    "locality",
    "neighborhood",
    "street",
    "block",
    "address",
    "secondary_address",
]

MAX_BATCH_QUERIES = 1000


def format_float(value: float) -> str:
    """Render a float in its shortest decimal form, without exponent or trailing `.0`."""

    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def types_query(types: Optional[List[FeatureType]]) -> str:
    """Join feature types into the comma separated form used in query strings."""

    return ",".join(types or [])


class Coordinate(BaseModel):
    """A WGS84 point."""
    latitude: Lat
    longitude: Lon

    model_config = ConfigDict(extra="forbid")

    def is_zero(self) -> bool:
        return self.latitude == 0 and self.longitude == 0

    def wgs84_format(self) -> str:
        """Return the `lng,lat` pair Mapbox expects in query strings."""
        return f"{format_float(self.longitude)},{format_float(self.latitude)}"

    def as_list(self) -> List[float]:
        return [self.longitude, self.latitude]


class BoundingBox(BaseModel):
    """Rectangle limiting forward results, given by its south-west and north-east corners."""
    min: Coordinate = Field(description="South-west corner")
    max: Coordinate = Field(description="North-east corner")

    model_config = ConfigDict(extra="forbid")

    def query(self) -> str:
        return ",".join(format_float(value) for value in self.as_list())

    def as_list(self) -> List[float]:
        return [self.min.longitude, self.min.latitude, self.max.longitude, self.max.latitude]


class ForwardGeocodeRequest(BaseModel):
    """Request schema for the forward geocoding endpoint."""
    q: str = Field(description="Search text, e.g. an address or place name")
    autocomplete: bool = Field(
        default=False, description="Return partial matches for incomplete search text"
    )
    bbox: Optional[BoundingBox] = Field(default=None, description="Limit results to this box")
    country: Optional[CountryCodes] = Field(
        default=None, description="ISO 3166 alpha-2 country codes, comma separated"
    )
    language: Optional[LanguageTag] = Field(default=None, description="IETF language tag")
    limit: Optional[NonNegInt] = Field(default=None, description="Maximum number of results")
    proximity: Optional[Union[Coordinate, Literal["ip"]]] = Field(
        default=None, description="Bias results toward this point, or 'ip' for the caller's location"
    )
    types: Optional[List[FeatureType]] = Field(
        default=None, description="Filter results to these feature types"
    )

    model_config = ConfigDict(extra="forbid")

    def has_bbox(self) -> bool:
        # Only the south-west corner decides whether a box was given.
        return self.bbox is not None and not self.bbox.min.is_zero()

    def has_proximity(self) -> bool:
        if self.proximity is None:
            return False
        if isinstance(self.proximity, Coordinate):
            return not self.proximity.is_zero()
        return True

    def proximity_query(self) -> str:
        if isinstance(self.proximity, Coordinate):
            return self.proximity.wgs84_format()
        return self.proximity

    def to_batch_entry(self) -> Dict[str, Any]:
        """Return the JSON object describing this query inside a batch body."""

        entry: Dict[str, Any] = {"q": self.q, "autocomplete": self.autocomplete}
        if self.has_bbox():
            entry["bbox"] = self.bbox.as_list()
        if self.country:
            entry["country"] = self.country
        if self.language:
            entry["language"] = self.language
        if self.limit:
            entry["limit"] = self.limit
        if self.has_proximity():
            entry["proximity"] = (
                self.proximity.as_list() if isinstance(self.proximity, Coordinate) else self.proximity
            )
        if self.types:
            entry["types"] = list(self.types)
        return entry


class ReverseGeocodeRequest(BaseModel):
    """Request schema for the reverse geocoding endpoint."""
    latitude: Lat
    longitude: Lon
    country: Optional[CountryCodes] = Field(
        default=None, description="ISO 3166 alpha-2 country codes, comma separated"
    )
    language: Optional[LanguageTag] = Field(default=None, description="IETF language tag")
    limit: Optional[NonNegInt] = Field(default=None, description="Maximum number of results")
    types: Optional[List[FeatureType]] = Field(
        default=None, description="Filter results to these feature types"
    )

    model_config = ConfigDict(extra="forbid")

    def to_batch_entry(self) -> Dict[str, Any]:
        """Return the JSON object describing this query inside a batch body."""

        entry: Dict[str, Any] = {"longitude": self.longitude, "latitude": self.latitude}
        if self.country:
            entry["country"] = self.country
        if self.language:
            entry["language"] = self.language
        if self.limit:
            entry["limit"] = self.limit
        if self.types:
            entry["types"] = list(self.types)
        return entry


class GeocodeBatchRequest(BaseModel):
    """A batch of reverse and forward queries sent in a single POST."""
    reverse: List[ReverseGeocodeRequest] = Field(default_factory=list)
    forward: List[ForwardGeocodeRequest] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_size(self) -> "GeocodeBatchRequest":
        total = len(self.reverse) + len(self.forward)
        if total == 0:
            raise ValueError("a batch needs at least one query")
        if total > MAX_BATCH_QUERIES:
            raise ValueError(f"a batch accepts at most {MAX_BATCH_QUERIES} queries, got {total}")
        return self

    def to_body(self) -> List[Dict[str, Any]]:
        """Serialize reverse queries first, then forward queries, each in submission order."""

        return [item.to_batch_entry() for item in self.reverse] + [
            item.to_batch_entry() for item in self.forward
        ]


class RoutablePoint(BaseModel):
    """Access point along a road for an address result."""
    name: Optional[str] = None
    latitude: float
    longitude: float


class ExtendedCoordinate(BaseModel):
    """Coordinates of a feature together with their accuracy and routable points."""
    longitude: float
    latitude: float
    accuracy: Optional[str] = None
    routable_points: Optional[List[RoutablePoint]] = None


class Geometry(BaseModel):
    type: str
    coordinates: List[float]


class Context(BaseModel):
    """One level of the administrative hierarchy a feature belongs to."""
    mapbox_id: Optional[str] = None
    name: Optional[str] = None
    wikidata_id: Optional[str] = None
    region_code: Optional[str] = None
    region_code_full: Optional[str] = None
    address_number: Optional[str] = None
    street_name: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class Properties(BaseModel):
    """Descriptive properties attached to a geocoding feature.

    ``feature_type`` stays a plain string so values the service adds later still decode.
    """
    mapbox_id: Optional[str] = None
    feature_type: Optional[str] = None
    name: Optional[str] = None
    name_preferred: Optional[str] = None
    place_formatted: Optional[str] = None
    full_address: Optional[str] = None
    coordinates: Optional[ExtendedCoordinate] = None
    context: Optional[Dict[str, Context]] = None
    bbox: Optional[List[float]] = None
    match_code: Optional[Dict[str, str]] = None


class Feature(BaseModel):
    """GeoJSON feature returned by the geocoding endpoints."""
    id: Optional[str] = None
    type: str = "Feature"
    geometry: Optional[Geometry] = None
    properties: Optional[Properties] = None


class GeocodeResponse(BaseModel):
    """GeoJSON FeatureCollection returned for a single query."""
    type: str = "FeatureCollection"
    features: List[Feature] = Field(default_factory=list)
    attribution: Optional[str] = None


class GeocodeBatchResponse(BaseModel):
    """One `GeocodeResponse` per batch query, in submission order."""
    batch: List[GeocodeResponse] = Field(default_factory=list)


class RateLimit(BaseModel):
    """Rate-limit window reported by the service in its response headers."""
    limit: int = Field(description="Requests allowed per interval")
    interval_s: int = Field(description="Length of the window in seconds")
    reset: Optional[datetime] = Field(default=None, description="When the current window resets")

    @classmethod
    def from_headers(cls, headers: Mapping[str, str], default: "RateLimit") -> "RateLimit":
        """Read the `X-Rate-Limit-*` headers, falling back to ``default`` for missing values."""

        limit = headers.get("X-Rate-Limit-Limit")
        interval = headers.get("X-Rate-Limit-Interval")
        reset = headers.get("X-Rate-Limit-Reset")
        return cls(
            limit=int(limit) if limit and limit.isdigit() else default.limit,
            interval_s=int(interval) if interval and interval.isdigit() else default.interval_s,
            reset=datetime.fromtimestamp(int(reset), tz=timezone.utc) if reset and reset.isdigit() else None,
        )
