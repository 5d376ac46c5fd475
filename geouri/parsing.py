# -*- coding: utf-8 -*-
"""
Parsing - Read ``GeoURI`` values from strings and URLs.

Two entry surfaces are provided:

- ``parse_string`` matches raw text against the ``geo:`` URI grammar::

      geo:<lat>,<lon>[,<alt>][;crs=<label>][;u=<uncertainty>][;<name>[=<value>]]...

  It is strict: whitespace, non-numeric coordinates, wrong separators or an
  unparseable tail raise ``ParseError`` with kind ``MALFORMED``.  Trailing
  parameters with unknown names are ignored.

- ``parse_url`` works on URL components (scheme, path, query items)::

      geo:<lat>,<lon>[,<alt>]?crs=<label>&u=<uncertainty>

  Every failure is raised as a ``URLParsingError`` that carries the URL and
  the underlying error.  A malformed path is reported as ``BAD_URL``.
  Unknown query items are ignored.

Both surfaces hand the extracted values to ``GeoURI``, so range errors from
``geouri.validation`` propagate unchanged.

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

# Standard library
import logging
import re
from typing import Any, List, Optional, Tuple
from urllib.parse import unquote, urlsplit

# geouri internal
from geouri.exceptions import (
    GeoURIError,
    ParseError,
    URLParsingError,
    ValidationError,
)
from geouri.numeric import parse_decimal
from geouri.uri import GeoURI
from geouri.vocabulary import (
    SCHEME,
    CoordinateReferenceSystem,
    ErrorKind,
    ParameterName,
)

logger = logging.getLogger(__name__)

# =====================================================================
# String grammar
# =====================================================================

_ALLOWED_CHARACTERS = re.compile(r'[a-z0-9:,.;=-]*')

_NUMBER = r'-?\d+(?:\.\d+)?'

_GEO_URI = re.compile(
    rf'{SCHEME}:'
    rf'(?P<latitude>{_NUMBER}),(?P<longitude>{_NUMBER})'
    rf'(?:,(?P<altitude>{_NUMBER}))?'
    r'(?:;crs=(?P<crs>[a-z0-9-]+))?'
    rf'(?:;u=(?P<uncertainty>{_NUMBER}))?'
    r'(?P<parameters>(?:;[a-z0-9-]+(?:=[a-z0-9:,.-]+)?)*)'
)

_PARAMETER = re.compile(r';(?P<name>[a-z0-9-]+)(?:=(?P<value>[a-z0-9:,.-]+))?')

_RESERVED_NAMES = frozenset(p.value for p in ParameterName)


def _optional_float(text: Optional[str]) -> Optional[float]:
    return None if text is None else float(text)


def _check_parameters(parameters: str) -> None:
    """Reject misplaced reserved parameters; ignore unknown ones."""
    for match in _PARAMETER.finditer(parameters):
        name = match.group('name')
        if name in _RESERVED_NAMES:
            raise ParseError(ErrorKind.MALFORMED)
        logger.debug("Ignoring unknown geo URI parameter %r", name)


def parse_string(value: str) -> GeoURI:
    """
    Parse a ``geo:`` URI string.

    Scheme, parameter names and the CRS label are case-insensitive.

    Parameters
    ----------
    value : str
        Text such as ``'geo:48.201,16.3695,183;crs=wgs84;u=66.6'``.

    Returns
    -------
    GeoURI

    Raises
    ------
    ParseError
        ``MALFORMED`` when the text does not follow the grammar,
        ``UNSUPPORTED_CRS`` when the CRS label is not ``wgs84``.
    ValidationError
        When a coordinate or the uncertainty is out of range.
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be a str, got {type(value).__name__}")

    text = value.lower()
    if not _ALLOWED_CHARACTERS.fullmatch(text) or text.endswith((',', '=')):
        logger.debug("Rejected geo URI %r: malformed", value)
        raise ParseError(ErrorKind.MALFORMED)

    match = _GEO_URI.fullmatch(text)
    if match is None:
        logger.debug("Rejected geo URI %r: malformed", value)
        raise ParseError(ErrorKind.MALFORMED)

    _check_parameters(match.group('parameters'))

    crs = CoordinateReferenceSystem.WGS84
    label = match.group('crs')
    if label is not None:
        try:
            crs = CoordinateReferenceSystem.from_label(label)
        except ValueError:
            logger.debug("Rejected geo URI %r: unsupported CRS", value)
            raise ParseError(ErrorKind.UNSUPPORTED_CRS, label) from None

    uri = GeoURI(
        float(match.group('latitude')),
        float(match.group('longitude')),
        altitude=_optional_float(match.group('altitude')),
        uncertainty=_optional_float(match.group('uncertainty')),
        crs=crs,
    )
    logger.debug("Parsed geo URI %r", value)
    return uri


class ParseStrategy:
    """
    Strategy that reads the output of ``FormatStyle`` back into a ``GeoURI``.

    Unlike ``parse_string`` it tolerates surrounding spaces and tabs.
    """

    def parse(self, value: str) -> GeoURI:
        """Parse ``value`` after stripping surrounding spaces and tabs."""
        return parse_string(value.strip(' \t'))

    def __eq__(self, other):
        return isinstance(other, ParseStrategy)

    def __hash__(self):
        return hash(ParseStrategy)

    def __repr__(self) -> str:
        return "ParseStrategy()"


# =====================================================================
# URL components
# =====================================================================

def _query_items(query: str) -> List[Tuple[str, Optional[str]]]:
    """Split a raw query into ``(name, value)`` pairs.

    An item without ``=`` has a value of None, which is distinct from an
    empty value.
    """
    if not query:
        return []
    items = []
    for segment in query.split('&'):
        name, sep, item_value = segment.partition('=')
        items.append((unquote(name), unquote(item_value) if sep else None))
    return items


def _query_value(
    items: List[Tuple[str, Optional[str]]],
    parameter: ParameterName,
) -> Optional[str]:
    """Value of the single query item named ``parameter``, or None if absent."""
    values = [v for n, v in items if n.lower() == parameter.value]
    if not values:
        return None
    if len(values) > 1:
        raise ParseError(ErrorKind.DUPLICATE_QUERY_ITEM, parameter.value)
    if values[0] is None:
        raise ParseError(ErrorKind.INVALID_QUERY_ITEM, parameter.value)
    return values[0]


def _crs_from_query(
    items: List[Tuple[str, Optional[str]]]
) -> CoordinateReferenceSystem:
    label = _query_value(items, ParameterName.CRS)
    if label is None:
        return CoordinateReferenceSystem.WGS84
    try:
        return CoordinateReferenceSystem.from_label(label)
    except ValueError:
        raise ParseError(ErrorKind.UNSUPPORTED_CRS, label) from None


def _uncertainty_from_query(
    items: List[Tuple[str, Optional[str]]]
) -> Optional[float]:
    text = _query_value(items, ParameterName.UNCERTAINTY)
    if text is None:
        return None
    uncertainty = parse_decimal(text)
    if uncertainty is None or uncertainty < 0:
        raise ValidationError(ErrorKind.INVALID_UNCERTAINTY)
    return uncertainty


def _parse_url_components(url: Any) -> GeoURI:
    if not isinstance(url, str):
        raise ParseError(ErrorKind.BAD_URL)
    # urlsplit drops tabs, newlines and leading controls instead of failing
    if any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7f for c in url):
        raise ParseError(ErrorKind.BAD_URL)
    try:
        parts = urlsplit(url)
    except ValueError:
        raise ParseError(ErrorKind.BAD_URL) from None

    if parts.scheme.lower() != SCHEME:
        raise ParseError(ErrorKind.INCORRECT_SCHEME)

    fields = [parse_decimal(f) for f in unquote(parts.path).split(',')]
    if len(fields) not in (2, 3) or any(f is None for f in fields):
        raise ParseError(ErrorKind.BAD_URL)
    latitude, longitude = fields[:2]
    altitude = fields[2] if len(fields) == 3 else None

    # unknown query items are ignored
    items = _query_items(parts.query)
    crs = _crs_from_query(items)
    uncertainty = _uncertainty_from_query(items)

    return GeoURI(latitude, longitude, altitude=altitude,
                  uncertainty=uncertainty, crs=crs)


def parse_url(url: Any) -> GeoURI:
    """
    Parse a ``geo:`` URL.

    Parameters
    ----------
    url : str
        URL such as ``'geo:48.201,16.3695,183?crs=wgs84&u=66.6'``.

    Returns
    -------
    GeoURI

    Raises
    ------
    URLParsingError
        For every failure.  ``kind`` is one of ``BAD_URL``,
        ``INCORRECT_SCHEME``, ``DUPLICATE_QUERY_ITEM``,
        ``INVALID_QUERY_ITEM``, ``UNSUPPORTED_CRS`` or a range error from
        validation; the underlying error is available as ``error``.
    """
    try:
        uri = _parse_url_components(url)
    except GeoURIError as err:
        logger.debug("Rejected geo URL %r: %s", url, err.kind.value)
        raise URLParsingError(url, err) from err
    logger.debug("Parsed geo URL %r", url)
    return uri
