# renderer/framebuffer.py
from typing import Optional
import numpy as np


class FrameBuffers:
    """
    Flat, row-major per-pixel buffers: linear color plus the optional albedo,
    normal and depth passes. Index `j * width + i` holds pixel (i, j), top row
    first.
    """
    def __init__(self, width: int, color: np.ndarray, albedo: Optional[np.ndarray] = None,
                 normal: Optional[np.ndarray] = None, depth: Optional[np.ndarray] = None):
        self.width = width
        self.color = color
        self.albedo = albedo
        self.normal = normal
        self.depth = depth

    @classmethod
    def allocate(cls, width: int, height: int, aux: bool = False) -> "FrameBuffers":
        size = width * height
        color = np.zeros((size, 3), dtype=np.float64)
        if not aux:
            return cls(width, color)
        return cls(width, color,
                   albedo=np.zeros((size, 3), dtype=np.float64),
                   normal=np.zeros((size, 3), dtype=np.float64),
                   depth=np.full(size, np.inf, dtype=np.float64))

    @property
    def height(self) -> int:
        return self.color.shape[0] // self.width

    @property
    def has_aux(self) -> bool:
        return self.albedo is not None

    def rows(self, start: int, end: int) -> "FrameBuffers":
        """Views onto rows [start, end); writes through to this buffer."""
        lo, hi = start * self.width, end * self.width
        if not self.has_aux:
            return FrameBuffers(self.width, self.color[lo:hi])
        return FrameBuffers(self.width, self.color[lo:hi], self.albedo[lo:hi],
                            self.normal[lo:hi], self.depth[lo:hi])

    def write_rows(self, start: int, band: "FrameBuffers"):
        """Copy a band rendered elsewhere into rows starting at `start`."""
        target = self.rows(start, start + band.height)
        target.color[:] = band.color
        if target.has_aux:
            target.albedo[:] = band.albedo
            target.normal[:] = band.normal
            target.depth[:] = band.depth
