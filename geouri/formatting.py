# -*- coding: utf-8 -*-
"""
Formatting - Render ``GeoURI`` values as ``geo:`` strings and URLs.

Two output shapes are derived from the same value:

- String form, with ``;``-delimited parameters::

      geo:48.201,16.3695,183;crs=wgs84;u=66.6

- URL form, with ``?``/``&``-delimited query items::

      geo:48.201,16.3695,183?crs=wgs84&u=66.6

The CRS parameter is emitted on request; the uncertainty parameter is
emitted whenever the value has one.  Both shapes parse back to an equal
``GeoURI`` through the matching parser in ``geouri.parsing``.

``FormatStyle`` bundles the formatting options.  ``FULL`` always includes
the CRS, ``SHORT`` omits it.

Usage
-----
    >>> from geouri import GeoURI, FULL, SHORT
    >>> uri = GeoURI(48.2010, 16.3695)
    >>> uri.formatted(SHORT)
    'geo:48.201,16.3695'
    >>> uri.formatted(FULL)
    'geo:48.201,16.3695;crs=wgs84'

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
from typing import List, Tuple, TYPE_CHECKING
from urllib.parse import quote, urlencode, urlunsplit

# geouri internal
from geouri.numeric import NumberStyle, WIRE_STYLE
from geouri.parsing import ParseStrategy
from geouri.vocabulary import SCHEME, ParameterName

if TYPE_CHECKING:
    from geouri.uri import GeoURI


def _path(value: 'GeoURI', number_style: NumberStyle) -> str:
    """Comma-join latitude, longitude and (when present) altitude."""
    fields = [value.latitude, value.longitude]
    if value.altitude is not None:
        fields.append(value.altitude)
    return ','.join(number_style.render(f) for f in fields)


def _parameters(
    value: 'GeoURI',
    include_crs: bool,
    number_style: NumberStyle,
) -> List[Tuple[str, str]]:
    """Ordered ``(name, value)`` pairs for the CRS and uncertainty."""
    params = []
    if include_crs:
        params.append((ParameterName.CRS.value, value.crs.value))
    if value.uncertainty is not None:
        params.append((ParameterName.UNCERTAINTY.value,
                       number_style.render(value.uncertainty)))
    return params


class FormatStyle:
    """
    Options for rendering a ``GeoURI`` as a string.

    Parameters
    ----------
    include_crs : bool, default=False
        Append the ``;crs=`` parameter.
    number_style : NumberStyle, default=WIRE_STYLE
        Number rendering rules.  Anything other than ``WIRE_STYLE`` is a
        presentation format and is not guaranteed to parse back.
    """

    __slots__ = ('include_crs', 'number_style')

    def __init__(
        self,
        include_crs: bool = False,
        number_style: NumberStyle = WIRE_STYLE,
    ) -> None:
        self.include_crs = bool(include_crs)
        self.number_style = number_style

    def with_crs(self, include_crs: bool = True) -> 'FormatStyle':
        """Return a copy of this style with ``include_crs`` replaced."""
        return FormatStyle(include_crs=include_crs,
                           number_style=self.number_style)

    def format(self, value: 'GeoURI') -> str:
        """
        Render ``value`` in the string form.

        Parameters
        ----------
        value : GeoURI
            Value to render.

        Returns
        -------
        str
            ``geo:<lat>,<lon>[,<alt>][;crs=<crs>][;u=<u>]``
        """
        text = f"{SCHEME}:{_path(value, self.number_style)}"
        for name, param in _parameters(value, self.include_crs,
                                       self.number_style):
            text += f";{name}={param}"
        return text

    @property
    def parse_strategy(self) -> ParseStrategy:
        """Strategy that reads back what this style writes."""
        return ParseStrategy()

    def parse(self, value: str) -> 'GeoURI':
        """Parse ``value`` with this style's parse strategy."""
        return self.parse_strategy.parse(value)

    def __eq__(self, other):
        if not isinstance(other, FormatStyle):
            return NotImplemented
        return (self.include_crs == other.include_crs
                and self.number_style == other.number_style)

    def __hash__(self):
        return hash((self.include_crs, self.number_style))

    def __repr__(self) -> str:
        return (f"FormatStyle(include_crs={self.include_crs!r}, "
                f"number_style={self.number_style!r})")


FULL = FormatStyle(include_crs=True)
SHORT = FormatStyle(include_crs=False)


def format_string(value: 'GeoURI', include_crs: bool = False) -> str:
    """Render ``value`` in the ``;``-delimited string form."""
    return FormatStyle(include_crs=include_crs).format(value)


def format_url(value: 'GeoURI', include_crs: bool = True) -> str:
    """
    Render ``value`` in the URL form.

    Parameters
    ----------
    value : GeoURI
        Value to render.
    include_crs : bool, default=True
        Add the ``crs`` query item.

    Returns
    -------
    str
        ``geo:<lat>,<lon>[,<alt>][?crs=<crs>][&u=<u>]``
    """
    path = quote(_path(value, WIRE_STYLE), safe=',')
    query = urlencode(_parameters(value, include_crs, WIRE_STYLE),
                      quote_via=quote)
    return urlunsplit((SCHEME, '', path, query, ''))


def describe(value: 'GeoURI') -> str:
    """Full string form, always including the CRS."""
    return FULL.format(value)
