# rasterbench/math.py
import math

from rasterbench.types import Scalar, Vector2


def deg_to_rad(d: Scalar) -> Scalar:
    return d * math.pi / 180.0


def polar_point(center: Vector2, radius: Scalar, angle: Scalar) -> Vector2:
    """Point at `radius` from `center` along `angle` (radians, +y is down)."""
    return Vector2(
        center.x + radius * math.cos(angle),
        center.y + radius * math.sin(angle),
    )


def segment_angles(segments: int, arc: Scalar = 2.0 * math.pi) -> list[Scalar]:
    """
    Evenly spaced angles covering `arc`, endpoints included.

    Returns segments + 1 values: i * (arc / segments) for i in [0, segments].
    """
    step = arc / segments
    return [i * step for i in range(segments + 1)]
