# -*- coding: utf-8 -*-
"""
Coordinate Validation - Range checks and normalization for geo URI values.

Provides the validation functions applied to every ``GeoURI`` at
construction time.  They enforce the latitude, longitude and uncertainty
ranges of RFC 5870 and apply the two longitude normalizations:

- At the poles (latitude of exactly -90 or 90) longitude is undefined and
  is stored as 0.
- Longitudes -180 and 180 denote the same meridian; -180 is stored as 180.

All functions are pure.  The first violation found raises a
``ValidationError`` immediately.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import math
from typing import Optional, Tuple

# geouri internal
from geouri.exceptions import ValidationError
from geouri.vocabulary import ErrorKind

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def validate_latitude(latitude: float) -> float:
    """Return ``latitude`` as a float, or raise if outside [-90, 90].

    Raises
    ------
    ValidationError
        ``INVALID_LATITUDE`` when out of range (NaN is out of range).
    """
    latitude = float(latitude)
    lo, hi = LATITUDE_RANGE
    if not lo <= latitude <= hi:
        raise ValidationError(ErrorKind.INVALID_LATITUDE)
    return latitude


def validate_longitude(longitude: float) -> float:
    """Return ``longitude`` as a float, or raise if outside [-180, 180].

    Raises
    ------
    ValidationError
        ``INVALID_LONGITUDE`` when out of range (NaN is out of range).
    """
    longitude = float(longitude)
    lo, hi = LONGITUDE_RANGE
    if not lo <= longitude <= hi:
        raise ValidationError(ErrorKind.INVALID_LONGITUDE)
    return longitude


def validate_uncertainty(uncertainty: Optional[float]) -> Optional[float]:
    """Return ``uncertainty`` as a float (or None), or raise if negative.

    None means the uncertainty is unknown and is passed through.  Zero is
    valid and means the URI identifies exactly one point.

    Raises
    ------
    ValidationError
        ``INVALID_UNCERTAINTY`` when negative or not finite.
    """
    if uncertainty is None:
        return None
    uncertainty = float(uncertainty)
    if not math.isfinite(uncertainty) or uncertainty < 0:
        raise ValidationError(ErrorKind.INVALID_UNCERTAINTY)
    return uncertainty


def normalize_longitude(latitude: float, longitude: float) -> float:
    """Apply the pole and date-line rules to an in-range longitude."""
    if latitude in LATITUDE_RANGE:
        return 0.0
    if longitude == LONGITUDE_RANGE[0]:
        return LONGITUDE_RANGE[1]
    return longitude


def validate_coordinate(
    latitude: float,
    longitude: float,
    altitude: Optional[float] = None,
    uncertainty: Optional[float] = None,
) -> Tuple[float, float, Optional[float], Optional[float]]:
    """
    Validate and normalize the numeric fields of a geo URI.

    Parameters
    ----------
    latitude : float
        Latitude in decimal degrees, WGS-84.
    longitude : float
        Longitude in decimal degrees, WGS-84.
    altitude : float, optional
        Altitude in meters.  Not range checked.
    uncertainty : float, optional
        Uncertainty radius in meters.

    Returns
    -------
    Tuple[float, float, Optional[float], Optional[float]]
        ``(latitude, longitude, altitude, uncertainty)`` with longitude
        normalized and all present values converted to float.

    Raises
    ------
    ValidationError
        On the first out-of-range value, checked in the order latitude,
        longitude, uncertainty.
    """
    latitude = validate_latitude(latitude)
    longitude = normalize_longitude(latitude, validate_longitude(longitude))
    if altitude is not None:
        altitude = float(altitude)
    uncertainty = validate_uncertainty(uncertainty)
    return latitude, longitude, altitude, uncertainty
