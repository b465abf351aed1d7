# materials/metal.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import reflect, random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scattered, ScatterResult, ABSORBED


class Metal(Material):
    """
    Metal material with reflective properties. `fuzz` in [0, 1] blurs the
    reflection; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Color, fuzz: float):
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def interact(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return Scattered(self.albedo, scattered)

        return ABSORBED  # Fuzz pushed the ray below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"


def make_metal(albedo: Color, fuzz: float) -> Metal:
    return Metal(albedo, fuzz)
