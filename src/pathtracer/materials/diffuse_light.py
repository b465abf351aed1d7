# materials/diffuse_light.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Emitted


class DiffuseLight(Material):
    """
    Emissive material that radiates `intensity * color` and never scatters.
    """
    def __init__(self, color: Color, intensity: float = 1.0):
        self.color = color
        self.intensity = intensity
        self.albedo = color

    def emitted(self) -> Color:
        """
        Return the emitted radiance.

        Returns:
            Color: The base color scaled by the intensity.
        """
        return self.color * self.intensity

    def interact(self, ray_in: Ray, rec: HitRecord, rng) -> Emitted:
        return Emitted(self.emitted())

    def __repr__(self) -> str:
        return f"DiffuseLight({self.color!r}, intensity={self.intensity})"


def make_emission(color: Color, intensity: float = 1.0) -> DiffuseLight:
    return DiffuseLight(color, intensity)
