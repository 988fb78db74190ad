"""Perspective projection 4D -> 3D -> 2D."""
import math
from typing import Sequence, Tuple


def project_to_3d(v4: Sequence[float], focal_w: float) -> Tuple[float, float, float]:
    """Project through w: every coordinate is scaled by focal_w / (focal_w - w)."""
    x, y, z, w = v4
    scale = focal_w / (focal_w - w)
    return (x * scale, y * scale, z * scale)


def project_to_2d(v3: Sequence[float], focal_z: float) -> Tuple[float, float, float]:
    """Project through z, returning (x, y, depth).

    depth is the unscaled z, kept for ordering and styling.
    """
    x, y, z = v3
    scale = focal_z / (focal_z - z)
    return (x * scale, y * scale, z)


def to_screen(x: float, y: float, width: int, height: int, screen_scale: float) -> Tuple[float, float]:
    """Map projected coordinates to raster pixels, y pointing down."""
    scale_2d = min(width, height) * screen_scale
    return (width / 2 + x * scale_2d, height / 2 - y * scale_2d)


def max_projected_radius(radius: float, focal: float) -> float:
    """Largest 3D radius a 4D point of norm ``radius`` can reach after project_to_3d.

    The bound peaks at w = radius**2 / focal.
    """
    if focal <= radius:
        return math.inf
    return radius * focal / math.sqrt(focal * focal - radius * radius)


def check_focal_margin(focal_w: float, focal_z: float, radius: float, margin: float) -> None:
    """Raise ValueError unless both denominators stay at least ``margin`` above zero.

    Plane rotations are orthogonal so ``radius`` bounds |w| for any rotation
    coefficients.
    """
    if margin < 0:
        raise ValueError(f"focal_margin={margin} must not be negative")
    if focal_w < radius + margin:
        raise ValueError(
            f"focal_w={focal_w} must be at least {radius + margin:.3f} (radius {radius} + margin {margin})")
    limit_z = max_projected_radius(radius, focal_w)
    if focal_z < limit_z + margin:
        raise ValueError(
            f"focal_z={focal_z} must be at least {limit_z + margin:.3f} (projected radius {limit_z:.3f} + margin {margin})")
