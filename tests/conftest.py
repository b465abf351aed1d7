"""Pytest configuration and shared fixtures for the path tracer tests."""

import numpy as np
import pytest

from pathtracer.core.vector import Color, Point3
from pathtracer.materials.lambertian import Lambertian
from pathtracer.renderer.settings import RenderSettings


class SequenceRNG:
    """Random stream stand-in that replays queued draws.

    uniform() returns the next queued value regardless of its bounds, so a
    test can steer rejection samplers to an exact vector. Running out of
    queued values raises IndexError, which doubles as a "no draw expected"
    assertion.
    """

    def __init__(self, uniform=(), random=()):
        self._uniform = list(uniform)
        self._random = list(random)

    def uniform(self, low=0.0, high=1.0):
        return self._uniform.pop(0)

    def random(self):
        return self._random.pop(0)


@pytest.fixture
def sequence_rng():
    """The SequenceRNG class, for tests that need scripted draws."""
    return SequenceRNG


@pytest.fixture
def rng():
    """A seeded numpy random stream."""
    return np.random.default_rng(12345)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def tiny_settings():
    """Settings for a fast render looking down -z at the origin from z=5."""

    def _make(**overrides):
        params = dict(
            width=6,
            height=4,
            samples_per_pixel=2,
            max_depth=4,
            vfov=40.0,
            look_from=Point3(0, 0, 5),
            look_at=Point3(0, 0, 0),
            workers=2,
            progress=False,
        )
        params.update(overrides)
        return RenderSettings(**params)

    return _make
