"""Pytest configuration and shared fixtures."""

import random

import pytest

from core.vector import Vector3
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.diffuse_light import DiffuseLight


@pytest.fixture
def rng():
    """A seeded sampler so stochastic code paths are repeatable."""
    return random.Random(1234)


@pytest.fixture
def grey_diffuse():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def mirror():
    return Metal(Vector3(0.8, 0.8, 0.8))


@pytest.fixture
def light():
    return DiffuseLight(Vector3(4.0, 3.0, 2.0))


def random_unit(rng):
    """Uniform direction via rejection sampling, independent of core.utils."""
    while True:
        x, y, z = rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1)
        n2 = x * x + y * y + z * z
        if 1e-6 < n2 <= 1.0:
            n = n2 ** 0.5
            return Vector3(x / n, y / n, z / n)
