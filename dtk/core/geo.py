# -*- coding: utf-8 -*-
"""
Geo Distance - Great-circle distance between latitude/longitude points.

Uses the haversine formula on a spherical Earth of mean radius 6371 km.
Coordinates are validated before computation and never clamped; once
both points are valid, distance computation cannot fail. Longitude
wrap-around (e.g. 179 vs -179) needs no special case because the
formula only sees the sine of the half-angle difference.

Dependencies
------------
numpy

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import logging
from dataclasses import dataclass
from typing import Any

# Third-party
import numpy as np

# DTK internal
from dtk.core.errors import (
    CoordinateError,
    CoordinateErrorKind,
    NumericParseError,
)

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371


@dataclass(frozen=True)
class Coordinate:
    """A validated geographic position in decimal degrees.

    Attributes
    ----------
    latitude : float
        In [-90, 90].
    longitude : float
        In [-180, 180].
    """

    latitude: float
    longitude: float


@dataclass(frozen=True)
class DistanceResult:
    """Great-circle distance in kilometers and miles.

    ``miles`` is always ``kilometers * KM_TO_MILES``.
    """

    kilometers: float
    miles: float

    @classmethod
    def from_kilometers(cls, kilometers: float) -> 'DistanceResult':
        return cls(kilometers=kilometers, miles=kilometers * KM_TO_MILES)


def validate_coordinate(lat: float, lon: float) -> Coordinate:
    """Validate a latitude/longitude pair.

    Parameters
    ----------
    lat : float
        Latitude in decimal degrees.
    lon : float
        Longitude in decimal degrees.

    Returns
    -------
    Coordinate

    Raises
    ------
    CoordinateError
        ``LATITUDE_OUT_OF_RANGE`` if ``|lat| > 90``,
        ``LONGITUDE_OUT_OF_RANGE`` if ``|lon| > 180``. NaN and infinite
        values are out of range.
    """
    lat = float(lat)
    lon = float(lon)
    if not -90.0 <= lat <= 90.0:
        raise CoordinateError(
            CoordinateErrorKind.LATITUDE_OUT_OF_RANGE,
            f"Latitude must be between -90 and 90, got {lat}",
            lat,
        )
    if not -180.0 <= lon <= 180.0:
        raise CoordinateError(
            CoordinateErrorKind.LONGITUDE_OUT_OF_RANGE,
            f"Longitude must be between -180 and 180, got {lon}",
            lon,
        )
    return Coordinate(latitude=lat, longitude=lon)


def _parse_float(text: str, field: str) -> float:
    try:
        return float(text.strip())
    except (AttributeError, ValueError):
        raise NumericParseError(field, str(text)) from None


def parse_coordinate(lat_text: str, lon_text: str) -> Coordinate:
    """Parse and validate a coordinate typed as two text fields.

    Raises
    ------
    NumericParseError
        If either field is not a number.
    CoordinateError
        If the parsed values are out of range.
    """
    lat = _parse_float(lat_text, "latitude")
    lon = _parse_float(lon_text, "longitude")
    return validate_coordinate(lat, lon)


def haversine_km(lat1: Any, lon1: Any, lat2: Any, lon2: Any) -> np.ndarray:
    """Vectorized haversine distance in kilometers.

    Inputs are array-likes in decimal degrees and broadcast against each
    other. No range validation is performed here.

    Parameters
    ----------
    lat1, lon1, lat2, lon2 : array_like
        Endpoint coordinates.

    Returns
    -------
    np.ndarray
        Distances in kilometers, shaped by broadcasting the inputs.
    """
    lat1_rad = np.radians(np.asarray(lat1, dtype=np.float64))
    lat2_rad = np.radians(np.asarray(lat2, dtype=np.float64))
    dlat = lat2_rad - lat1_rad
    dlon = np.radians(
        np.asarray(lon2, dtype=np.float64) - np.asarray(lon1, dtype=np.float64)
    )

    a = (
        np.sin(dlat / 2.0) ** 2
        + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2.0) ** 2
    )
    # Rounding can push a a hair past 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def distance(a: Coordinate, b: Coordinate) -> DistanceResult:
    """Great-circle distance between two validated coordinates.

    Parameters
    ----------
    a : Coordinate
    b : Coordinate

    Returns
    -------
    DistanceResult
    """
    km = float(haversine_km(a.latitude, a.longitude, b.latitude, b.longitude))
    logger.debug("Distance %s -> %s: %.6f km", a, b, km)
    return DistanceResult.from_kilometers(km)


def distance_between(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> DistanceResult:
    """Validate two raw coordinate pairs, then compute their distance.

    Raises
    ------
    CoordinateError
        If either point is out of range (first point checked first).
    """
    point1 = validate_coordinate(lat1, lon1)
    point2 = validate_coordinate(lat2, lon2)
    return distance(point1, point2)
