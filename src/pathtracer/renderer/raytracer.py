# renderer/raytracer.py
import dataclasses
from typing import Optional
import numpy as np
from pathtracer.core.vector import Point3
from pathtracer.camera.camera import Camera
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.material import Material
from pathtracer.renderer.framebuffer import FrameBuffers
from pathtracer.renderer.scheduler import RenderContext, TileScheduler
from pathtracer.renderer.settings import RenderSettings


class Renderer:
    """
    Owns the scene, the camera and the frame buffers.

    Typical use: add spheres, call initialize() once the settings are final,
    then render() and read `frame` (linear RGB, one row-major triple per
    pixel, top row first).

    initialize() freezes a validated copy of the settings; later edits to
    `settings` take effect only after the next initialize().
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()
        self.world = HittableList()
        self.camera: Optional[Camera] = None
        self._active: Optional[RenderSettings] = None
        self.buffers: Optional[FrameBuffers] = None

    def add(self, obj: Hittable):
        self.world.add(obj)

    def add_sphere(self, center: Point3, radius: float, material: Material) -> Sphere:
        sphere = Sphere(center, radius, material)
        self.world.add(sphere)
        return sphere

    def initialize(self):
        """
        Validate the settings and derive the camera. Raises ValueError on a
        configuration that cannot be rendered.
        """
        s = dataclasses.replace(self.settings)
        s.validate()
        self.camera = Camera(
            image_width=s.width,
            image_height=s.height,
            vfov=s.vfov,
            look_from=s.look_from,
            look_at=s.look_at,
            vup=s.vup,
            defocus_angle=s.defocus_angle,
            focus_dist=s.focus_dist,
        )
        self.camera.initialize()
        self._active = s

    def render(self) -> np.ndarray:
        """Fill the frame buffers and return the color buffer."""
        if self._active is None:
            raise RuntimeError("Renderer.initialize() must be called before render()")
        s = self._active
        self.buffers = FrameBuffers.allocate(s.width, s.height, s.aux_buffers)
        scheduler = TileScheduler(workers=s.workers, backend=s.backend, progress=s.progress)
        scheduler.run(RenderContext(self.camera, self.world, s), self.buffers, s.seed)
        return self.buffers.color

    @property
    def frame(self) -> Optional[np.ndarray]:
        return None if self.buffers is None else self.buffers.color

    @property
    def albedo(self) -> Optional[np.ndarray]:
        return None if self.buffers is None else self.buffers.albedo

    @property
    def normal(self) -> Optional[np.ndarray]:
        return None if self.buffers is None else self.buffers.normal

    @property
    def depth(self) -> Optional[np.ndarray]:
        return None if self.buffers is None else self.buffers.depth

    def image(self) -> np.ndarray:
        """The color buffer as a (height, width, 3) view."""
        if self.buffers is None:
            raise RuntimeError("Nothing has been rendered yet")
        return self.buffers.color.reshape(self.buffers.height, self.buffers.width, 3)
