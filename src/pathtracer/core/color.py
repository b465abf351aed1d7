# core/color.py
from pathtracer.core.vector import Color


def from_hsv(h: float, s: float, v: float) -> Color:
    """
    Convert an HSV triple (all components in [0, 1]) to a linear RGB color.
    """
    i = int(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        return Color(v, t, p)
    if sector == 1:
        return Color(q, v, p)
    if sector == 2:
        return Color(p, v, t)
    if sector == 3:
        return Color(p, q, v)
    if sector == 4:
        return Color(t, p, v)
    return Color(v, p, q)
