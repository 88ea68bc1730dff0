"""Shared fixtures for colorutility tests."""

from __future__ import annotations

import random

import pytest

from colorutility.core.conversions import rgb_to_cielab


@pytest.fixture
def magenta_lab():
    """CIELAB of sRGB magenta (255, 0, 255)."""
    return rgb_to_cielab((255, 0, 255))


@pytest.fixture
def crimson_lab():
    """CIELAB of sRGB crimson (220, 20, 60)."""
    return rgb_to_cielab((220, 20, 60))


@pytest.fixture
def sample_labs():
    """A spread of CIELAB colors: neutral, dark, every a/b quadrant."""
    return [
        (50.0, 0.0, 0.0),
        (10.0, 0.0, 0.0),
        (100.0, 0.0, 0.0),
        (60.3, 98.2, -60.8),
        (47.0, 70.9, 33.6),
        (32.3, 79.2, -107.9),
        (87.7, -86.2, 83.2),
        (40.0, -20.0, -35.0),
        (25.0, 0.0, 12.5),
    ]


@pytest.fixture
def random_lab_pairs():
    """200 reproducible random CIELAB pairs."""
    rng = random.Random(42)

    def lab():
        return (rng.uniform(0, 100), rng.uniform(-128, 128), rng.uniform(-128, 128))

    return [(lab(), lab()) for _ in range(200)]
