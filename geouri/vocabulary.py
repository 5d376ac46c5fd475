# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the geouri package.

Defines the controlled vocabularies shared by the parser, validator and
formatter: the supported coordinate reference systems, the closed set of
error kinds, and the parameter names recognized in ``geo:`` URIs.

Author
------
Steven Siebert

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

from enum import Enum

SCHEME = "geo"


class CoordinateReferenceSystem(Enum):
    """Coordinate reference systems a ``geo:`` URI may declare.

    Values are the lowercase labels used on the wire.  WGS-84 is the
    default and currently the only supported system.
    """

    WGS84 = "wgs84"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> 'CoordinateReferenceSystem':
        """Look up a member by its wire label, ignoring case.

        Raises
        ------
        ValueError
            If ``label`` does not name a supported system.
        """
        return cls(label.lower())


class ErrorKind(Enum):
    """Closed taxonomy of ``geo:`` URI failures.

    Every error raised by this package carries exactly one of these kinds.
    None of them is transient; the caller has to fix the input.
    """

    MALFORMED = "malformed"
    BAD_URL = "bad_url"
    INCORRECT_SCHEME = "incorrect_scheme"
    INVALID_LATITUDE = "invalid_latitude"
    INVALID_LONGITUDE = "invalid_longitude"
    INVALID_UNCERTAINTY = "invalid_uncertainty"
    UNSUPPORTED_CRS = "unsupported_crs"
    DUPLICATE_QUERY_ITEM = "duplicate_query_item"
    INVALID_QUERY_ITEM = "invalid_query_item"


class ParameterName(Enum):
    """Parameter names with defined meaning in a ``geo:`` URI."""

    CRS = "crs"
    UNCERTAINTY = "u"
