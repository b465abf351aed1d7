"""Unit tests for sphere intersection and nearest-hit scene traversal.

Tests cover:
- Ray hitting a sphere from outside (front face)
- Ray missing a sphere
- Ray starting inside a sphere (back face)
- Open-interval rejection of hits at the ray origin
- Nearest hit regardless of insertion order
"""

import math

import pytest

from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList

CLIP = Interval(0.001, math.inf)


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        rec = sphere.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), CLIP)

        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.p == Point3(0, 0, 1)
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.front_face
        assert rec.material is gray

    def test_miss(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        assert sphere.hit(Ray(Point3(5, 0, 0), Vector3(0, 0, -1)), CLIP) is None

    def test_sphere_behind_ray(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        assert sphere.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, 1)), CLIP) is None

    def test_inside_hits_back_face(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        rec = sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, 1)), CLIP)

        assert rec is not None
        assert rec.t == pytest.approx(1.0)
        assert not rec.front_face
        # Normal is flipped to face the incoming ray
        assert rec.normal == Vector3(0, 0, -1)

    def test_far_root_when_near_root_outside_interval(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        rec = sphere.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), Interval(4.5, math.inf))
        assert rec is not None
        assert rec.t == pytest.approx(6.0)
        assert not rec.front_face

    def test_interval_upper_bound(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        assert sphere.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), Interval(0.001, 3.0)) is None

    def test_root_at_interval_minimum_is_rejected(self, gray):
        """A ray leaving the surface must not re-hit it at t == 0."""
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        ray = Ray(Point3(0, 0, 1), Vector3(0, 0, 1))
        assert sphere.hit(ray, Interval(0.0, math.inf)) is None

    def test_unnormalized_direction(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1.0, gray)
        rec = sphere.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -2)), CLIP)
        assert rec.t == pytest.approx(2.0)
        assert rec.p.z == pytest.approx(1.0)

    def test_negative_radius_is_clamped(self, gray):
        sphere = Sphere(Point3(0, 0, 0), -2.0, gray)
        assert sphere.radius == 0.0
        assert sphere.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), CLIP) is None

    def test_random_rays_land_on_surface(self, gray, rng):
        """Hits from outside lie on the sphere, inside the interval, facing the ray."""
        center = Point3(0.5, -0.25, -3.0)
        radius = 1.25
        sphere = Sphere(center, radius, gray)
        hits = 0
        for _ in range(500):
            origin = Point3(rng.uniform(-4, 4), rng.uniform(-4, 4), rng.uniform(2, 6))
            target = center + Vector3(rng.uniform(-2, 2), rng.uniform(-2, 2), rng.uniform(-2, 2))
            ray = Ray(origin, target - origin)
            rec = sphere.hit(ray, CLIP)
            if rec is None:
                continue
            hits += 1
            assert CLIP.surrounds(rec.t)
            assert (rec.p - center).length() == pytest.approx(radius, abs=1e-9)
            assert ray.direction.dot(rec.normal) <= 0
            assert rec.front_face
        assert hits > 50

    def test_front_face_matches_outward_normal(self, gray, rng):
        sphere = Sphere(Point3(0, 0, 0), 2.0, gray)
        for _ in range(200):
            origin = Point3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
            direction = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
            rec = sphere.hit(Ray(origin, direction), CLIP)
            assert rec is not None
            outward = (rec.p - sphere.center) / sphere.radius
            assert rec.front_face == (direction.dot(outward) <= 0)
            assert direction.dot(rec.normal) <= 0


class TestHittableList:
    """Tests for nearest-hit traversal."""

    def test_empty_world_misses(self):
        assert HittableList().hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), CLIP) is None

    def test_nearest_hit_independent_of_order(self, gray):
        near = Sphere(Point3(0, 0, -5), 1.0, gray)
        far = Sphere(Point3(0, 0, -10), 1.0, gray)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))

        for order in ([near, far], [far, near]):
            world = HittableList()
            for obj in order:
                world.add(obj)
            rec = world.hit(ray, CLIP)
            assert rec.t == pytest.approx(4.0)

    def test_material_of_nearest_sphere(self, gray):
        from pathtracer.materials.dielectric import Dielectric

        glass = Dielectric(1.5)
        world = HittableList()
        world.add(Sphere(Point3(0, 0, -10), 1.0, gray))
        world.add(Sphere(Point3(0, 0, -3), 1.0, glass))
        rec = world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), CLIP)
        assert rec.material is glass

    def test_len_and_clear(self, gray):
        world = HittableList()
        world.add(Sphere(Point3(0, 0, 0), 1.0, gray))
        world.add(Sphere(Point3(0, 0, 3), 1.0, gray))
        assert len(world) == 2
        world.clear()
        assert len(world) == 0
