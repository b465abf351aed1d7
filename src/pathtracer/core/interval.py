# core/interval.py
import math


class Interval:
    """
    A real interval [min, max] used to bound ray parameters and clamp colors.

    `contains` is closed on both ends while `surrounds` is open; intersection
    tests use `surrounds` so a ray leaving a surface at t == min never hits it.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf):
        self.min = minimum
        self.max = maximum

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
