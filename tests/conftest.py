"""Test configuration for colorkit."""

import pytest

from colorkit.colorspace import from_hex


@pytest.fixture
def white():
    return from_hex('#ffffff')


@pytest.fixture
def black():
    return from_hex('#000000')


@pytest.fixture
def red():
    """sRGB red, the most saturated sRGB color at its hue."""
    return from_hex('#ff0000')
