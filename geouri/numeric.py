# -*- coding: utf-8 -*-
"""
Number Rendering - Canonical decimal text for coordinate values.

Single home of the width and precision rules used when coordinate values
are written into, or read back from, a ``geo:`` URI.  Values are rendered in
positional notation (never scientific) from their shortest round-trip
digits, truncated to at most eight fractional digits, with trailing zeros
and the sign of a truncated zero removed.

Eight decimal places of a degree are about 1.1 mm at the equator, so finer
digits carry no information.

``NumberStyle`` also serves as the opt-in presentation layer for
locale-style output (decimal comma, digit grouping).  The wire format
always uses ``WIRE_STYLE``, which is locale independent.

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

# Standard library
import re
from typing import Optional, Union

# Third-party
import numpy as np

MAX_FRACTION_DIGITS = 8

# Accepts what a plain decimal float literal looks like; rejects
# whitespace, 'inf', 'nan' and hexadecimal forms.
_DECIMAL_PATTERN = re.compile(
    r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?',
    re.ASCII,
)


class NumberStyle:
    """
    Rendering rules for a single floating point value.

    Parameters
    ----------
    fraction_digits : int, default=8
        Maximum number of fractional digits.  Extra digits are truncated,
        never rounded, and the result is never zero padded.
    decimal_separator : str, default='.'
        Separator between the integer and fractional parts.
    grouping_separator : str, optional
        Thousands separator for the integer part.  None disables grouping.
    """

    __slots__ = ('fraction_digits', 'decimal_separator', 'grouping_separator')

    def __init__(
        self,
        fraction_digits: int = MAX_FRACTION_DIGITS,
        decimal_separator: str = '.',
        grouping_separator: Optional[str] = None,
    ) -> None:
        if not isinstance(fraction_digits, int) or fraction_digits < 0:
            raise ValueError(
                f"fraction_digits must be a non-negative integer, "
                f"got {fraction_digits!r}"
            )
        if not decimal_separator:
            raise ValueError("decimal_separator must not be empty")
        if grouping_separator == decimal_separator:
            raise ValueError(
                "grouping_separator must differ from decimal_separator"
            )
        self.fraction_digits = fraction_digits
        self.decimal_separator = decimal_separator
        self.grouping_separator = grouping_separator

    def render(self, value: Union[int, float]) -> str:
        """
        Render ``value`` as positional decimal text.

        Parameters
        ----------
        value : int or float
            Value to render.

        Returns
        -------
        str
            Decimal text such as ``'48.201'`` or ``'-16.3695'``.
            Non-finite values render as ``'inf'``, ``'-inf'`` or ``'nan'``.
        """
        text = np.format_float_positional(float(value), unique=True, trim='-')
        if not np.isfinite(value):
            return text

        sign = ''
        if text.startswith('-'):
            sign, text = '-', text[1:]

        whole, _, fraction = text.partition('.')
        fraction = fraction[:self.fraction_digits].rstrip('0')
        if whole == '0' and not fraction:
            sign = ''

        if self.grouping_separator:
            whole = _group_digits(whole, self.grouping_separator)

        if fraction:
            return f"{sign}{whole}{self.decimal_separator}{fraction}"
        return f"{sign}{whole}"

    def __eq__(self, other):
        if not isinstance(other, NumberStyle):
            return NotImplemented
        return (
            self.fraction_digits == other.fraction_digits
            and self.decimal_separator == other.decimal_separator
            and self.grouping_separator == other.grouping_separator
        )

    def __hash__(self):
        return hash((self.fraction_digits, self.decimal_separator,
                     self.grouping_separator))

    def __repr__(self) -> str:
        return (
            f"NumberStyle(fraction_digits={self.fraction_digits!r}, "
            f"decimal_separator={self.decimal_separator!r}, "
            f"grouping_separator={self.grouping_separator!r})"
        )


def _group_digits(digits: str, separator: str) -> str:
    """Insert ``separator`` between groups of three integer digits."""
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


WIRE_STYLE = NumberStyle()


def render_number(value: Union[int, float],
                  style: NumberStyle = WIRE_STYLE) -> str:
    """Render ``value`` with ``style`` (the wire style by default)."""
    return style.render(value)


def parse_decimal(text: str) -> Optional[float]:
    """
    Read a finite decimal number, strictly.

    Parameters
    ----------
    text : str
        Candidate number text.

    Returns
    -------
    float or None
        The parsed value, or None when ``text`` is not a plain finite
        decimal number (surrounding whitespace counts as not a number).
    """
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not np.isfinite(value):
        return None
    return value
