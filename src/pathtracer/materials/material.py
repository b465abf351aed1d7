# materials/material.py
from dataclasses import dataclass
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, BLACK
from pathtracer.geometry.hittable import HitRecord


@dataclass(frozen=True)
class Scattered:
    """The path continues along `ray`, weighted by `attenuation`."""
    attenuation: Color
    ray: Ray
    emission: Color = BLACK


@dataclass(frozen=True)
class Emitted:
    """The path ends at a light source radiating `color`."""
    color: Color


@dataclass(frozen=True)
class Absorbed:
    """The path ends and carries no radiance."""


ABSORBED = Absorbed()

ScatterResult = Union[Scattered, Emitted, Absorbed]


class Material:
    """
    Base material. Subclasses override interact() to describe how a ray that
    reaches a surface continues (or ends). Materials are immutable once built,
    so one instance may back any number of shapes and render workers.

    The base behaviour absorbs everything.
    """
    albedo: Color = BLACK

    def interact(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        """
        Returns a Scattered, Emitted or Absorbed result for `ray_in` hitting
        the surface described by `rec`. All random draws come from `rng`.
        """
        return ABSORBED
