# -*- coding: utf-8 -*-
"""
Location Models - Plain location types exchanged with platform code.

Provides the coordinate and location records that ``GeoURI`` converts to
and from: ``Coordinate2D`` for a bare latitude/longitude pair and
``Location`` for a positioned fix with altitude and accuracy estimates.
They mirror what positioning services report, so callers can bridge their
own location objects by copying fields.

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
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Coordinate2D:
    """WGS-84 geographic point (2D).

    Parameters
    ----------
    latitude : float
        Latitude in degrees.
    longitude : float
        Longitude in degrees.
    """

    latitude: float = 0.0
    longitude: float = 0.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Location:
    """Positioned fix with accuracy estimates.

    Parameters
    ----------
    coordinate : Coordinate2D
        Horizontal position.
    altitude : float
        Altitude in meters.
    horizontal_accuracy : float
        Radius of uncertainty for ``coordinate`` in meters.  Positioning
        services report a negative value when the fix is invalid.
    vertical_accuracy : float
        Uncertainty of ``altitude`` in meters.
    timestamp : datetime
        Time of the fix.  Not part of equality.
    """

    coordinate: Coordinate2D
    altitude: float = 0.0
    horizontal_accuracy: float = 0.0
    vertical_accuracy: float = 0.0
    timestamp: datetime = field(default_factory=_utc_now, compare=False)

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude
