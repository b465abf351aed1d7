# renderer/tone_mapping.py
import math
from pathlib import Path
import numpy as np
from numba import njit
from PIL import Image

MAX_CHANNEL = 0.999


@njit
def tone_mapping_kernel(linear_frame, output_image):
    for idx in range(linear_frame.shape[0]):
        for c in range(3):
            x = linear_frame[idx, c]
            # Reinhard x / (1 + x) maps [0, inf) to [0, 1)
            x = x / (1.0 + x)

            # Gamma 2
            x = math.sqrt(x) if x > 0.0 else 0.0

            if x > MAX_CHANNEL:
                x = MAX_CHANNEL
            output_image[idx, c] = int(256.0 * x)


def tone_map_rgb8(frame: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Convert a flat linear-light frame to displayable 8-bit RGB.

    Args:
        frame: (width * height, 3) linear radiance, row-major, top row first.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        np.ndarray: A (height, width, 3) uint8 image.
    """
    frame = np.ascontiguousarray(frame, dtype=np.float64)
    if frame.shape != (width * height, 3):
        raise ValueError(f"Expected a frame of shape {(width * height, 3)}, got {frame.shape}")
    output = np.empty((width * height, 3), dtype=np.uint8)
    tone_mapping_kernel(frame, output)
    return output.reshape(height, width, 3)


def write_png(frame: np.ndarray, width: int, height: int, path) -> Path:
    """Tone-map `frame` and save it as a PNG, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(tone_map_rgb8(frame, width, height)).save(path)
    return path
