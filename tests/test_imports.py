# -*- coding: utf-8 -*-
"""
Import Tests - Public names are importable from the top-level package.

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

import importlib

import pytest

import geouri


@pytest.mark.parametrize("name", geouri.__all__)
def test_public_name(name):
    """Every name in __all__ resolves on the package."""
    assert getattr(geouri, name) is not None


@pytest.mark.parametrize("module", [
    'geouri.exceptions',
    'geouri.vocabulary',
    'geouri.numeric',
    'geouri.validation',
    'geouri.location',
    'geouri.uri',
    'geouri.parsing',
    'geouri.formatting',
])
def test_module_imports(module):
    assert importlib.import_module(module) is not None


def test_version():
    assert isinstance(geouri.__version__, str)
