# -*- coding: utf-8 -*-
"""
GeoURI - Immutable value type for RFC 5870 geographic location URIs.

A ``GeoURI`` identifies a physical location by latitude, longitude and an
optional altitude in the WGS-84 coordinate reference system, optionally
qualified by an uncertainty radius.  Every instance is validated and
normalized on construction (see ``geouri.validation``), so an instance
outside the RFC 5870 ranges cannot exist.

Usage
-----
    >>> from geouri import GeoURI
    >>> uri = GeoURI(48.2010, 16.3695, altitude=183, uncertainty=66.6)
    >>> str(uri)
    'geo:48.201,16.3695,183;crs=wgs84;u=66.6'
    >>> uri.formatted()
    'geo:48.201,16.3695,183;u=66.6'
    >>> GeoURI.from_string('geo:90,180').longitude
    0.0

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
from dataclasses import dataclass
from typing import Any, Optional, Union, TYPE_CHECKING

# geouri internal
from geouri.exceptions import ParseError
from geouri.location import Coordinate2D, Location
from geouri.validation import validate_coordinate
from geouri.vocabulary import CoordinateReferenceSystem, ErrorKind

if TYPE_CHECKING:
    from geouri.formatting import FormatStyle


def _coerce_crs(
    crs: Union[CoordinateReferenceSystem, str]
) -> CoordinateReferenceSystem:
    """Resolve a CRS member or wire label to a ``CoordinateReferenceSystem``."""
    if isinstance(crs, CoordinateReferenceSystem):
        return crs
    if isinstance(crs, str):
        try:
            return CoordinateReferenceSystem.from_label(crs)
        except ValueError:
            raise ParseError(ErrorKind.UNSUPPORTED_CRS, crs) from None
    raise TypeError(
        f"crs must be a CoordinateReferenceSystem or str, "
        f"got {type(crs).__name__}"
    )


@dataclass(frozen=True, repr=False)
class GeoURI:
    """
    A location identified by a ``geo:`` URI.

    Parameters
    ----------
    latitude : float
        Latitude in decimal degrees, WGS-84.  Southern hemisphere values
        are negative.  Range [-90, 90].
    longitude : float
        Longitude in decimal degrees, WGS-84.  Western hemisphere values
        are negative.  Range [-180, 180].  Stored as 0 at the poles and
        as 180 when given as -180.
    altitude : float, optional
        Altitude in meters.  None means unspecified and may be taken as
        the physical surface at this position.  Zero is *not* ground
        elevation.
    uncertainty : float, optional
        Radius in meters within which the location lies.  None means
        unknown; zero means exactly this point.  Must be >= 0.
    crs : CoordinateReferenceSystem or str, default=WGS84
        Coordinate reference system.  WGS-84 is the only supported one.

    Raises
    ------
    ValidationError
        If latitude, longitude or uncertainty is out of range.
    ParseError
        If ``crs`` names an unsupported coordinate reference system.

    Notes
    -----
    Equality is exact over all five fields (RFC 5870 section 3.4.4).  The
    number of digits in a value carries no precision information; use
    ``uncertainty`` for that.
    """

    latitude: float
    longitude: float
    altitude: Optional[float] = None
    uncertainty: Optional[float] = None
    crs: CoordinateReferenceSystem = CoordinateReferenceSystem.WGS84

    def __post_init__(self) -> None:
        latitude, longitude, altitude, uncertainty = validate_coordinate(
            self.latitude, self.longitude, self.altitude, self.uncertainty
        )
        object.__setattr__(self, 'latitude', latitude)
        object.__setattr__(self, 'longitude', longitude)
        object.__setattr__(self, 'altitude', altitude)
        object.__setattr__(self, 'uncertainty', uncertainty)
        object.__setattr__(self, 'crs', _coerce_crs(self.crs))

    # -----------------------------------------------------------------
    # Construction from other representations
    # -----------------------------------------------------------------
    @classmethod
    def from_string(cls, value: str) -> 'GeoURI':
        """Parse a ``geo:`` URI string.  See ``geouri.parsing.parse_string``."""
        from geouri.parsing import parse_string
        return parse_string(value)

    @classmethod
    def from_url(cls, url: Any) -> 'GeoURI':
        """Parse a ``geo:`` URL.  See ``geouri.parsing.parse_url``."""
        from geouri.parsing import parse_url
        return parse_url(url)

    @classmethod
    def parse(cls, value: str, style: Optional['FormatStyle'] = None) -> 'GeoURI':
        """
        Parse a string produced by a ``FormatStyle``.

        Surrounding whitespace is ignored.

        Parameters
        ----------
        value : str
            Text to parse.
        style : FormatStyle, optional
            Style whose parse strategy is used.  Defaults to ``SHORT``.
        """
        if style is None:
            from geouri.formatting import SHORT
            style = SHORT
        return style.parse_strategy.parse(value)

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate2D) -> 'GeoURI':
        """Create a ``GeoURI`` from a 2D coordinate (no altitude, no uncertainty)."""
        return cls(coordinate.latitude, coordinate.longitude)

    @classmethod
    def from_location(cls, location: Location) -> 'GeoURI':
        """
        Create a ``GeoURI`` from a positioned fix.

        The location's horizontal accuracy becomes the uncertainty, so a
        fix flagged invalid by a negative accuracy is rejected.

        Raises
        ------
        ValidationError
            If any value is out of range.
        """
        return cls(
            location.latitude,
            location.longitude,
            altitude=location.altitude,
            uncertainty=location.horizontal_accuracy,
        )

    # -----------------------------------------------------------------
    # Projections
    # -----------------------------------------------------------------
    @property
    def coordinate(self) -> Coordinate2D:
        """The 2D position as a ``Coordinate2D``."""
        return Coordinate2D(self.latitude, self.longitude)

    @property
    def location(self) -> Location:
        """The position as a ``Location``.

        Missing altitude and uncertainty are reported as 0, which is how
        positioning services encode them.
        """
        return Location(
            coordinate=self.coordinate,
            altitude=self.altitude if self.altitude is not None else 0.0,
            horizontal_accuracy=(
                self.uncertainty if self.uncertainty is not None else 0.0
            ),
            vertical_accuracy=0.0,
        )

    # -----------------------------------------------------------------
    # Text forms
    # -----------------------------------------------------------------
    def formatted(
        self,
        style: Optional['FormatStyle'] = None,
        include_crs: bool = False,
    ) -> str:
        """
        Render as a ``geo:`` URI string.

        Parameters
        ----------
        style : FormatStyle, optional
            Style to render with.  When given, ``include_crs`` is ignored.
        include_crs : bool, default=False
            Append the ``;crs=`` parameter.

        Returns
        -------
        str
        """
        from geouri.formatting import FormatStyle
        if style is None:
            style = FormatStyle(include_crs=include_crs)
        return style.format(self)

    @property
    def url(self) -> str:
        """The URL form, ``geo:<lat>,<lon>[,<alt>]?crs=wgs84[&u=<u>]``."""
        from geouri.formatting import format_url
        return format_url(self)

    def __str__(self) -> str:
        from geouri.formatting import describe
        return describe(self)

    def __repr__(self) -> str:
        return (
            f"GeoURI(latitude={self.latitude!r}, "
            f"longitude={self.longitude!r}, "
            f"altitude={self.altitude!r}, "
            f"crs={self.crs.value}, "
            f"uncertainty={self.uncertainty!r})"
        )
