"""Shared type aliases used across the geocoding modules."""
from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

Lat = Annotated[float, Field(ge=-90, le=90)]
Lon = Annotated[float, Field(ge=-180, le=180)]
NonNegInt = Annotated[int, Field(ge=0)]
# One or more ISO 3166 alpha-2 codes, comma separated ("us" or "us,ca"); "" means unset.
CountryCodes = Annotated[
    str,
    StringConstraints(
        pattern=r"^$|^([A-Za-z]{2})(,[A-Za-z]{2})*$",
        strip_whitespace=True,
    ),
]
LanguageTag = Annotated[
    str,
    StringConstraints(
        pattern=r"^$|^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})*(,[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})*)*$",
        strip_whitespace=True,
    ),
]
