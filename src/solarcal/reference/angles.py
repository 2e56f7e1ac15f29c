from __future__ import annotations

import math


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def radians(deg: float) -> float:
    return math.pi * deg / 180


def degrees(rad: float) -> float:
    return 180 * rad / math.pi


def modulo(x: float, y: float) -> float:
    """
    Floored modulo: x - floor(x/y)*y.

    The result carries the sign of y, unlike math.fmod (sign of x).
    """
    return x - math.floor(x / y) * y
