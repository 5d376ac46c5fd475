# -*- coding: utf-8 -*-
"""
Vocabulary Tests - Unit tests for CoordinateReferenceSystem, ErrorKind
and ParameterName enums.

Dependencies
------------
pytest

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

import pytest

from geouri.vocabulary import (
    SCHEME,
    CoordinateReferenceSystem,
    ErrorKind,
    ParameterName,
)


class TestCoordinateReferenceSystem:
    """Tests for CoordinateReferenceSystem enum."""

    def test_wgs84_is_only_member(self):
        """WGS-84 is the single supported system."""
        assert [m.name for m in CoordinateReferenceSystem] == ['WGS84']

    def test_value_is_wire_label(self):
        """Member value is the lowercase label written to URIs."""
        assert CoordinateReferenceSystem.WGS84.value == 'wgs84'
        assert str(CoordinateReferenceSystem.WGS84) == 'wgs84'

    @pytest.mark.parametrize("label", ['wgs84', 'WGS84', 'Wgs84'])
    def test_from_label_ignores_case(self, label):
        """Labels are matched case-insensitively."""
        assert (CoordinateReferenceSystem.from_label(label)
                is CoordinateReferenceSystem.WGS84)

    @pytest.mark.parametrize("label", ['nad27', '', 'wgs-84', 'epsg:4326'])
    def test_from_label_unknown(self, label):
        """Unknown labels raise ValueError."""
        with pytest.raises(ValueError):
            CoordinateReferenceSystem.from_label(label)


class TestErrorKind:
    """Tests for ErrorKind enum."""

    def test_closed_taxonomy(self):
        """ErrorKind has exactly the nine documented members."""
        expected = {
            'MALFORMED', 'BAD_URL', 'INCORRECT_SCHEME', 'INVALID_LATITUDE',
            'INVALID_LONGITUDE', 'INVALID_UNCERTAINTY', 'UNSUPPORTED_CRS',
            'DUPLICATE_QUERY_ITEM', 'INVALID_QUERY_ITEM',
        }
        assert {m.name for m in ErrorKind} == expected

    def test_values_are_lowercase_strings(self):
        """Each ErrorKind value is a lowercase string."""
        for member in ErrorKind:
            assert isinstance(member.value, str)
            assert member.value == member.value.lower()


class TestParameterName:
    """Tests for ParameterName enum and the scheme constant."""

    def test_values(self):
        assert ParameterName.CRS.value == 'crs'
        assert ParameterName.UNCERTAINTY.value == 'u'

    def test_scheme(self):
        assert SCHEME == 'geo'
