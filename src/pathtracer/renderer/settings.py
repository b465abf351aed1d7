# renderer/settings.py
import dataclasses
from dataclasses import dataclass, field
from typing import Optional
from pathtracer.core.vector import Vector3, Point3

BACKENDS = ("thread", "process")

# Preset sample/bounce budgets, from quick look-dev to final frames.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 4},
    "balanced": {"samples": 20, "bounces": 10},
    "final": {"samples": 100, "bounces": 50},
}


@dataclass
class RenderSettings:
    """
    Everything the renderer needs besides the scene geometry.

    Angles are in degrees. `workers=None` uses one worker per CPU core; the
    same seed and worker count always reproduce the same image.
    """
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 20
    max_depth: int = 10
    vfov: float = 90.0
    look_from: Point3 = field(default_factory=lambda: Point3(0, 0, 0))
    look_at: Point3 = field(default_factory=lambda: Point3(0, 0, -1))
    vup: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0
    exposure: float = 1.0
    clip_min: float = 0.001
    seed: int = 0
    workers: Optional[int] = None
    backend: str = "thread"
    aux_buffers: bool = False
    progress: bool = True

    @classmethod
    def from_aspect(cls, width: int, aspect_ratio: float, **kwargs) -> "RenderSettings":
        """Derive the image height from a width and an aspect ratio (at least 1 row)."""
        height = max(1, int(width / aspect_ratio))
        return cls(width=width, height=height, **kwargs)

    def with_quality(self, name: str) -> "RenderSettings":
        """Return a copy using the sample and bounce budget of a quality preset."""
        if name not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level {name!r}; expected one of {sorted(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[name]
        return dataclasses.replace(self, samples_per_pixel=level["samples"], max_depth=level["bounces"])

    def validate(self):
        """Raise ValueError if the settings cannot describe a renderable image."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov must lie in (0, 180) degrees, got {self.vfov}")
        if self.defocus_angle < 0:
            raise ValueError(f"defocus_angle must be non-negative, got {self.defocus_angle}")
        if self.focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {self.focus_dist}")
        if self.exposure < 0:
            raise ValueError(f"exposure must be non-negative, got {self.exposure}")
        if self.clip_min < 0:
            raise ValueError(f"clip_min must be non-negative, got {self.clip_min}")
        view = self.look_from - self.look_at
        if view.near_zero():
            raise ValueError("look_from and look_at must be distinct points")
        if self.vup.cross(view).near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}; expected one of {BACKENDS}")
