# -*- coding: utf-8 -*-
"""
geouri Exception Hierarchy - Domain-specific exceptions for geo URI handling.

Provides a small exception hierarchy that lets callers catch geouri errors
distinctly from Python built-in exceptions.  All geouri exceptions subclass
both ``GeoURIError`` and ``ValueError``, since every failure is caused by
the input rather than by the environment.

Each exception carries an ``ErrorKind`` from the closed taxonomy in
``geouri.vocabulary`` plus an optional ``detail`` (the offending CRS label
or query item name).

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
from typing import Any, Optional

# geouri internal
from geouri.vocabulary import ErrorKind

RFC_5870_URL = "https://datatracker.ietf.org/doc/html/rfc5870"

_DESCRIPTIONS = {
    ErrorKind.MALFORMED: "Syntax is invalid.",
    ErrorKind.BAD_URL: "The URL is not a valid GeoURI.",
    ErrorKind.INCORRECT_SCHEME: "The URL scheme must be 'geo'.",
    ErrorKind.INVALID_LATITUDE: "The latitude is invalid.",
    ErrorKind.INVALID_LONGITUDE: "The longitude is invalid.",
    ErrorKind.INVALID_UNCERTAINTY: "The uncertainty is invalid.",
    ErrorKind.UNSUPPORTED_CRS:
        "The '{detail}' coordinate reference system is not supported.",
    ErrorKind.DUPLICATE_QUERY_ITEM:
        "The '{detail}' query item was specified more than once.",
    ErrorKind.INVALID_QUERY_ITEM: "The '{detail}' query item is invalid.",
}

_FAILURE_REASONS = {
    ErrorKind.INVALID_LATITUDE: "Latitude values range from -90 to 90.",
    ErrorKind.INVALID_LONGITUDE: "Longitude values range from -180 to 180.",
    ErrorKind.INVALID_UNCERTAINTY:
        "Uncertainty must be greater than or equal to zero, or None.",
    ErrorKind.UNSUPPORTED_CRS:
        "WGS-84 (wgs84) is the only supported coordinate reference system.",
    ErrorKind.DUPLICATE_QUERY_ITEM: "The '{detail}' must only be provided once.",
}


class GeoURIError(Exception):
    """Base exception for all geouri errors.

    Parameters
    ----------
    kind : ErrorKind
        What went wrong.
    detail : str, optional
        The offending CRS label or query item name, for the kinds that
        carry one.
    """

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self.description)

    @property
    def description(self) -> str:
        """Short human-readable description of the failure."""
        return _DESCRIPTIONS[self.kind].format(detail=self.detail)

    @property
    def failure_reason(self) -> str:
        """Explanation of the rule the input broke."""
        reason = _FAILURE_REASONS.get(self.kind)
        if reason is None:
            return self.description
        return reason.format(detail=self.detail)

    @property
    def recovery_suggestion(self) -> str:
        return f"Review the geo URI scheme definition in RFC 5870 ({RFC_5870_URL})."

    def _key(self) -> tuple:
        return (type(self), self.kind, self.detail)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GeoURIError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self.detail is None:
            return f"{type(self).__name__}({self.kind})"
        return f"{type(self).__name__}({self.kind}, {self.detail!r})"


class ValidationError(GeoURIError, ValueError):
    """Coordinate value outside its permitted range.

    Raised for latitudes outside [-90, 90], longitudes outside
    [-180, 180] and negative or non-finite uncertainties.
    """


class ParseError(GeoURIError, ValueError):
    """Input text or URL components do not form a supported geo URI.

    Raised for syntax errors, wrong schemes, unsupported coordinate
    reference systems and invalid or repeated query items.
    """


class URLParsingError(GeoURIError, ValueError):
    """Failure to build a ``GeoURI`` from a URL.

    Wraps the underlying ``GeoURIError`` together with the URL that
    produced it, so callers can report both what was wrong and in which
    input.  ``kind`` and ``detail`` mirror the wrapped error.

    Parameters
    ----------
    url : Any
        The URL exactly as it was passed to the parser.
    error : GeoURIError
        The underlying failure.
    """

    def __init__(self, url: Any, error: GeoURIError) -> None:
        self.url = url
        self.error = error
        super().__init__(error.kind, error.detail)

    def _key(self) -> tuple:
        return (type(self), self.kind, self.detail, self.url)

    def __str__(self) -> str:
        return f"{self.description} (url: {self.url!r})"

    def __repr__(self) -> str:
        return f"URLParsingError(url={self.url!r}, error={self.error!r})"
