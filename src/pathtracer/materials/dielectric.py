# src/materials/dielectric.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.vector import WHITE
from pathtracer.core.utils import reflect, refract
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scattered


class Dielectric(Material):
    """
    Clear refractive material (glass, water, ...) that never absorbs light.
    """
    albedo = WHITE

    def __init__(self, refraction_index: float):
        if refraction_index <= 0:
            raise ValueError(f"refraction_index must be positive, got {refraction_index}")
        self.refraction_index = refraction_index

    def interact(self, ray_in: Ray, rec: HitRecord, rng) -> Scattered:
        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection consumes no random draw
        cannot_refract = ri * sin_theta > 1.0

        if cannot_refract or reflectance(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return Scattered(WHITE, Ray(rec.p, direction))

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index})"


def reflectance(cosine: float, refraction_index: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)


def make_dielectric(refraction_index: float) -> Dielectric:
    return Dielectric(refraction_index)
