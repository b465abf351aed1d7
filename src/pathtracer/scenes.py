# scenes.py
"""Hard-coded demo scenes. Each builder fills a Renderer and tweaks its camera settings."""
import numpy as np
from pathtracer.core.vector import Color, Point3
from pathtracer.core.color import from_hsv
from pathtracer.materials.lambertian import make_lambertian
from pathtracer.materials.metal import make_metal
from pathtracer.materials.dielectric import make_dielectric
from pathtracer.materials.diffuse_light import make_emission
from pathtracer.materials.presets import ColorPresets, DielectricPresets


def random_spheres(renderer, rng=None):
    """
    Ground plane, a grid of small random spheres (diffuse, glowing, metal or
    glass) and three large feature spheres, under a dim sky.
    """
    rng = rng if rng is not None else np.random.default_rng(0)
    s = renderer.settings
    s.vfov = 20.0
    s.look_from = Point3(13, 2, 3)
    s.look_at = Point3(0, 0, 0)
    s.defocus_angle = 0.6
    s.focus_dist = 10.0
    s.exposure = 0.05

    renderer.add_sphere(Point3(0, -1000, 0), 1000, make_lambertian(ColorPresets.GRAY))

    counts = {"diffuse": 0, "emission": 0, "metal": 0, "glass": 0}
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.5:
                albedo = _random_color(rng) * _random_color(rng)
                material = make_lambertian(albedo)
                counts["diffuse"] += 1
            elif choose_mat < 0.8:
                emit_color = from_hsv(rng.random(), 0.7, 1)
                material = make_emission(emit_color * emit_color, rng.uniform(6.0, 20.0))
                counts["emission"] += 1
            elif choose_mat < 0.95:
                albedo = _random_color(rng, 0.5, 1.0)
                material = make_metal(albedo, rng.uniform(0.0, 0.5))
                counts["metal"] += 1
            else:
                material = make_dielectric(1.5)
                counts["glass"] += 1
            renderer.add_sphere(center, 0.2, material)

    renderer.add_sphere(Point3(0, 1, 0), 1.0, make_dielectric(1.5))
    renderer.add_sphere(Point3(-4, 1, 0), 1.0, make_lambertian(ColorPresets.BROWN))
    renderer.add_sphere(Point3(4, 1, 0), 1.0, make_metal(Color(0.7, 0.6, 0.5), 0.0))

    print(f"Added {len(renderer.world)} spheres "
          f"({', '.join(f'{n} {kind}' for kind, n in counts.items())})")
    return renderer


def three_spheres(renderer, rng=None):
    """A diffuse sphere flanked by a hollow glass sphere and a fuzzy metal one."""
    s = renderer.settings
    s.vfov = 90.0
    s.look_from = Point3(0, 0, 0)
    s.look_at = Point3(0, 0, -1)
    s.defocus_angle = 0.0
    s.exposure = 1.0

    renderer.add_sphere(Point3(0.0, -100.5, -1.0), 100.0, make_lambertian(ColorPresets.BLUE))
    renderer.add_sphere(Point3(0.0, 0.0, -1.2), 0.5, make_lambertian(ColorPresets.BLUE))
    renderer.add_sphere(Point3(-1.0, 0.0, -1.0), 0.5, DielectricPresets.glass())
    renderer.add_sphere(Point3(-1.0, 0.0, -1.0), 0.4, DielectricPresets.air_bubble())
    renderer.add_sphere(Point3(1.0, 0.0, -1.0), 0.5, make_metal(Color(0.8, 0.6, 0.2), 1.0))

    print(f"Added {len(renderer.world)} spheres")
    return renderer


def _random_color(rng, low: float = 0.0, high: float = 1.0) -> Color:
    return Color(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))


SCENES = {
    "random_spheres": random_spheres,
    "three_spheres": three_spheres,
}
