from __future__ import annotations

from typing import Optional

import msgspec

from .base import TolerantStruct


class PlaceGeo(msgspec.Struct, frozen=True):
    # GeoJSON feature describing the place
    type: str
    bbox: tuple[float, ...] = ()


class Place(TolerantStruct):
    id: str
    full_name: str
    contained_within: Optional[tuple[str, ...]] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    geo: Optional[PlaceGeo] = None
    name: Optional[str] = None
    place_type: Optional[str] = None
