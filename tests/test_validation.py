# -*- coding: utf-8 -*-
"""
Coordinate Validation Tests - Range checks and pole/date-line normalization.

Dependencies
------------
pytest

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

import pytest

from geouri.exceptions import ValidationError
from geouri.validation import (
    normalize_longitude,
    validate_coordinate,
    validate_latitude,
    validate_longitude,
    validate_uncertainty,
)
from geouri.vocabulary import ErrorKind


class TestLatitude:
    """Latitude must lie in [-90, 90]."""

    @pytest.mark.parametrize("value", [-90, -90.0, 0, 48.201, 90.0])
    def test_in_range(self, value):
        assert validate_latitude(value) == float(value)
        assert isinstance(validate_latitude(value), float)

    @pytest.mark.parametrize("value", [90.000001, -90.000001, 180, float('nan')])
    def test_out_of_range(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_latitude(value)
        assert exc_info.value.kind is ErrorKind.INVALID_LATITUDE


class TestLongitude:
    """Longitude must lie in [-180, 180]."""

    @pytest.mark.parametrize("value", [-180, 0, 16.3695, 180])
    def test_in_range(self, value):
        assert validate_longitude(value) == float(value)

    @pytest.mark.parametrize("value", [180.00000001, -180.00000001, float('nan')])
    def test_out_of_range(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_longitude(value)
        assert exc_info.value.kind is ErrorKind.INVALID_LONGITUDE


class TestUncertainty:
    """Uncertainty must be absent or >= 0."""

    def test_absent(self):
        assert validate_uncertainty(None) is None

    @pytest.mark.parametrize("value", [0, 0.0, 66.6, 1e9])
    def test_valid(self, value):
        assert validate_uncertainty(value) == float(value)

    @pytest.mark.parametrize("value", [-0.0000001, -123, float('inf'), float('nan')])
    def test_invalid(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_uncertainty(value)
        assert exc_info.value.kind is ErrorKind.INVALID_UNCERTAINTY


class TestNormalization:
    """Pole and date-line rules."""

    @pytest.mark.parametrize("latitude", [90.0, -90.0])
    @pytest.mark.parametrize("longitude", [-180.0, -16.3695, 0.0, 123.0, 180.0])
    def test_pole_forces_zero(self, latitude, longitude):
        assert normalize_longitude(latitude, longitude) == 0.0

    @pytest.mark.parametrize("latitude", [-89.999, 0.0, 48.201])
    def test_date_line(self, latitude):
        assert normalize_longitude(latitude, -180.0) == 180.0
        assert normalize_longitude(latitude, 180.0) == 180.0

    def test_passthrough(self):
        assert normalize_longitude(48.201, -16.3695) == -16.3695


class TestValidateCoordinate:
    """Combined validation."""

    def test_returns_normalized_tuple(self):
        assert validate_coordinate(48.201, -180, 183, 10) == (
            48.201, 180.0, 183.0, 10.0
        )

    def test_optional_fields_stay_absent(self):
        assert validate_coordinate(1, 2) == (1.0, 2.0, None, None)

    def test_altitude_is_unrestricted(self):
        assert validate_coordinate(0, 0, altitude=-10920)[2] == -10920.0
        assert validate_coordinate(0, 0, altitude=1e7)[2] == 1e7

    def test_first_violation_wins(self):
        """Latitude is checked before longitude and uncertainty."""
        with pytest.raises(ValidationError) as exc_info:
            validate_coordinate(91, 181, uncertainty=-1)
        assert exc_info.value.kind is ErrorKind.INVALID_LATITUDE

        with pytest.raises(ValidationError) as exc_info:
            validate_coordinate(0, 181, uncertainty=-1)
        assert exc_info.value.kind is ErrorKind.INVALID_LONGITUDE
