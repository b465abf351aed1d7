# camera/camera.py
import math
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_in_unit_disk, random_in_square


class Camera:
    """
    Thin-lens camera placed at `look_from`, aimed at `look_at`.

    Pixel (0, 0) is the top-left corner of the image. `initialize()` derives
    the viewport once; `get_ray()` then maps a pixel plus random offsets to a
    world-space ray.
    """
    def __init__(self, image_width: int, image_height: int, vfov: float = 90.0,
                 look_from: Point3 = Point3(0, 0, 0), look_at: Point3 = Point3(0, 0, -1),
                 vup: Vector3 = Vector3(0, 1, 0), defocus_angle: float = 0.0,
                 focus_dist: float = 10.0):
        self.image_width = image_width
        self.image_height = image_height
        self.vfov = vfov                    # Vertical field of view in degrees
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.defocus_angle = defocus_angle  # Cone angle through each pixel, degrees
        self.focus_dist = focus_dist        # Distance to the plane of perfect focus
        self.initialized = False

    def initialize(self):
        """Computes the camera's basis vectors, viewport and defocus disk."""
        self.center = self.look_from

        # u, v, w unit basis vectors for the camera coordinate frame
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        h = math.tan(degrees_to_radians(self.vfov) / 2)
        self.viewport_height = 2.0 * h * self.focus_dist
        self.viewport_width = self.viewport_height * (self.image_width / self.image_height)

        viewport_u = self.u * self.viewport_width     # Across the horizontal edge
        viewport_v = -self.v * self.viewport_height   # Down the vertical edge

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               self.w * self.focus_dist -
                               viewport_u / 2 -
                               viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius
        self.initialized = True

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Generates a ray towards a random point inside pixel (i, j), starting
        from the eye or, with depth of field enabled, from the defocus disk.
        """
        if not self.initialized:
            raise RuntimeError("Camera.initialize() must be called before get_ray()")

        offset = random_in_square(rng)
        pixel_sample = (self.pixel00_loc +
                        self.pixel_delta_u * (i + offset.x) +
                        self.pixel_delta_v * (j + offset.y))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng) -> Point3:
        """Returns a random point in the camera defocus disk."""
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
