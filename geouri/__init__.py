# -*- coding: utf-8 -*-
"""
geouri - RFC 5870 geographic location URIs.

Parses, validates, normalizes and renders ``geo:`` URIs such as
``geo:48.201,16.3695,183;crs=wgs84;u=66.6`` around the immutable
``GeoURI`` value type.

Key Classes
-----------
- GeoURI: Validated, immutable geographic location
- FormatStyle: Options for rendering a GeoURI as a string
- NumberStyle: Number rendering rules (wire and presentation)
- GeoURIError: Base of the exception hierarchy

Usage
-----
    >>> from geouri import GeoURI, parse_url
    >>> uri = GeoURI.from_string('geo:48.2010,16.3695;u=10')
    >>> uri.latitude, uri.longitude, uri.uncertainty
    (48.201, 16.3695, 10.0)
    >>> uri.url
    'geo:48.201,16.3695?crs=wgs84&u=10'
    >>> parse_url(uri.url) == uri
    True

Dependencies
------------
numpy

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from geouri.exceptions import (
    GeoURIError,
    ValidationError,
    ParseError,
    URLParsingError,
)
from geouri.vocabulary import (
    SCHEME,
    CoordinateReferenceSystem,
    ErrorKind,
    ParameterName,
)
from geouri.numeric import (
    MAX_FRACTION_DIGITS,
    NumberStyle,
    WIRE_STYLE,
    render_number,
)
from geouri.validation import validate_coordinate
from geouri.location import Coordinate2D, Location
from geouri.uri import GeoURI
from geouri.parsing import ParseStrategy, parse_string, parse_url
from geouri.formatting import (
    FULL,
    SHORT,
    FormatStyle,
    describe,
    format_string,
    format_url,
)

__all__ = [
    'GeoURIError',
    'ValidationError',
    'ParseError',
    'URLParsingError',
    'SCHEME',
    'CoordinateReferenceSystem',
    'ErrorKind',
    'ParameterName',
    'MAX_FRACTION_DIGITS',
    'NumberStyle',
    'WIRE_STYLE',
    'render_number',
    'validate_coordinate',
    'Coordinate2D',
    'Location',
    'GeoURI',
    'ParseStrategy',
    'parse_string',
    'parse_url',
    'FULL',
    'SHORT',
    'FormatStyle',
    'describe',
    'format_string',
    'format_url',
]
