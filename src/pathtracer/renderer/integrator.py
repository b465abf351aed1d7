# renderer/integrator.py
"""
Monte Carlo radiance estimation along camera paths.

A path bounces through the scene until it escapes to the sky, reaches a
light, is absorbed, or runs out of bounces. Each scattering event adds its
emission and multiplies the remaining contribution by its attenuation, which
is the iterative form of

    L(ray, n) = emission + attenuation * L(scattered, n - 1),   L(ray, 0) = 0
"""
import math
from typing import Tuple
from pathtracer.core.vector import Color, Vector3, BLACK, WHITE
from pathtracer.core.ray import Ray
from pathtracer.core.interval import Interval
from pathtracer.core.utils import lerp
from pathtracer.materials.material import Scattered, Emitted

SKY_TOP = Color(0.5, 0.7, 1.0)
SKY_BOTTOM = WHITE

DEFAULT_CLIP = Interval(0.001, math.inf)


def background(ray: Ray, exposure: float = 1.0) -> Color:
    """Vertical sky gradient seen by rays that escape the scene."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return lerp(SKY_BOTTOM * exposure, SKY_TOP * exposure, t)


def ray_color(ray: Ray, max_depth: int, world, rng,
              clip: Interval = DEFAULT_CLIP, exposure: float = 1.0) -> Color:
    """
    Estimate the radiance carried back along `ray`.

    Args:
        ray: The ray to trace.
        max_depth: Maximum number of surface interactions; 0 yields black.
        world: Anything with a hit(ray, interval) method.
        rng: Random stream used by the materials.
        clip: Valid ray parameters for intersections.
        exposure: Scale applied to the sky gradient.

    Returns:
        Linear radiance, never negative.
    """
    radiance = BLACK
    throughput = WHITE
    for _ in range(max_depth):
        rec = world.hit(ray, clip)
        if rec is None:
            return radiance + throughput * background(ray, exposure)

        result = rec.material.interact(ray, rec, rng)
        if isinstance(result, Scattered):
            radiance = radiance + throughput * result.emission
            throughput = throughput * result.attenuation
            ray = result.ray
        elif isinstance(result, Emitted):
            return radiance + throughput * result.color
        else:
            return radiance
    return radiance


def sample_pixel(i: int, j: int, camera, world, settings, rng) -> Color:
    """Average of `samples_per_pixel` independent radiance estimates for pixel (i, j)."""
    clip = _clip(settings)
    pixel_color = BLACK
    for _ in range(settings.samples_per_pixel):
        ray = camera.get_ray(i, j, rng)
        pixel_color = pixel_color + ray_color(ray, settings.max_depth, world, rng,
                                              clip, settings.exposure)
    return pixel_color * (1.0 / settings.samples_per_pixel)


def sample_pixel_aux(i: int, j: int, camera, world, settings, rng) -> Tuple[Color, Color, Vector3, float]:
    """
    Like sample_pixel(), also averaging the first-hit albedo, normal and
    distance over the camera rays. The extra lookups draw no random numbers,
    so the color matches sample_pixel() for the same stream.
    """
    clip = _clip(settings)
    pixel_color = BLACK
    albedo = BLACK
    normal = Vector3(0, 0, 0)
    depth_sum = 0.0
    hits = 0
    for _ in range(settings.samples_per_pixel):
        ray = camera.get_ray(i, j, rng)
        rec = world.hit(ray, clip)
        if rec is not None:
            albedo = albedo + rec.material.albedo
            normal = normal + rec.normal
            depth_sum += rec.t * ray.direction.length()
            hits += 1
        pixel_color = pixel_color + ray_color(ray, settings.max_depth, world, rng,
                                              clip, settings.exposure)

    scale = 1.0 / settings.samples_per_pixel
    depth = depth_sum / hits if hits else math.inf
    return pixel_color * scale, albedo * scale, normal * scale, depth


def _clip(settings) -> Interval:
    return Interval(settings.clip_min, math.inf)
